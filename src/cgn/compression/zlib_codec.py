"""Length-prefixed binary layout for :class:`PgnData`, compressed with zlib.

Layout (all integers unsigned 64-bit little-endian)::

    7 x (length, utf-8 bytes)     Event, Site, Date, Round, White, Black, Result
    move count
    N x (length, utf-8 bytes)     canonical SAN of each move

There is no magic number or version tag. Changing :class:`PgnData`
changes the format.
"""

from __future__ import annotations

import logging
import struct
import zlib
from enum import StrEnum

from cgn.core.notation.models import HEADER_TAGS, MoveToken, PgnData, PgnHeaders
from cgn.core.notation.pgn import parse_pgn_game, pgn_to_string

_LOGGER = logging.getLogger(__name__)

COMPRESSION_LEVEL = zlib.Z_BEST_COMPRESSION

_U64 = struct.Struct("<Q")


class CodecErrorKind(StrEnum):
    """What went wrong while decoding a blob."""

    CORRUPT_STREAM = "corrupt stream"
    MALFORMED_LAYOUT = "malformed layout"
    TRAILING_BYTES = "trailing bytes"


class CodecError(ValueError):
    """Raised when a blob cannot be turned back into :class:`PgnData`."""

    def __init__(self, kind: CodecErrorKind, message: str) -> None:
        super().__init__(f"{kind}: {message}")
        self.kind = kind


# ── Structural layout ────────────────────────────────────────────────────


def _write_str(buffer: bytearray, value: str) -> None:
    raw = value.encode("utf-8")
    buffer += _U64.pack(len(raw))
    buffer += raw


class _Reader:
    """Bounds-checked cursor over an encoded payload."""

    __slots__ = ("_payload", "_offset")

    def __init__(self, payload: bytes) -> None:
        self._payload = payload
        self._offset = 0

    @property
    def remaining(self) -> int:
        return len(self._payload) - self._offset

    def _take(self, size: int) -> bytes:
        if size > self.remaining:
            raise CodecError(
                CodecErrorKind.MALFORMED_LAYOUT,
                f"need {size} bytes at offset {self._offset}, "
                f"only {self.remaining} left",
            )
        chunk = self._payload[self._offset : self._offset + size]
        self._offset += size
        return chunk

    def read_u64(self) -> int:
        (value,) = _U64.unpack(self._take(_U64.size))
        return value

    def read_str(self) -> str:
        raw = self._take(self.read_u64())
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise CodecError(
                CodecErrorKind.MALFORMED_LAYOUT, "string is not valid UTF-8"
            ) from exc


def encode_pgn_data(data: PgnData) -> bytes:
    """Serialize *data* without compression."""
    buffer = bytearray()
    for value in data.headers.values():
        _write_str(buffer, value)
    buffer += _U64.pack(len(data.moves))
    for move in data.moves:
        _write_str(buffer, str(move))
    return bytes(buffer)


def decode_pgn_data(payload: bytes) -> PgnData:
    """Inverse of :func:`encode_pgn_data`."""
    reader = _Reader(payload)
    headers = PgnHeaders(**{name: reader.read_str() for name in HEADER_TAGS.values()})

    count = reader.read_u64()
    # Every move needs at least its length prefix.
    if count > reader.remaining // _U64.size:
        raise CodecError(
            CodecErrorKind.MALFORMED_LAYOUT,
            f"move count {count} exceeds remaining payload",
        )

    moves: list[MoveToken] = []
    for _ in range(count):
        san = reader.read_str()
        try:
            moves.append(MoveToken.parse(san))
        except ValueError as exc:
            raise CodecError(
                CodecErrorKind.MALFORMED_LAYOUT, f"invalid move {san!r}"
            ) from exc

    if reader.remaining:
        raise CodecError(
            CodecErrorKind.TRAILING_BYTES,
            f"{reader.remaining} bytes left after the last move",
        )
    return PgnData(headers=headers, moves=moves)


# ── Compression ──────────────────────────────────────────────────────────


def compress_pgn_data(data: PgnData) -> bytes:
    """Encode *data* and compress it at the best zlib level."""
    payload = encode_pgn_data(data)
    blob = zlib.compress(payload, COMPRESSION_LEVEL)
    _LOGGER.debug("Compressed PGN data: %d -> %d bytes", len(payload), len(blob))
    return blob


def decompress_pgn_data(blob: bytes) -> PgnData:
    """Decompress and decode a blob produced by :func:`compress_pgn_data`."""
    decompressor = zlib.decompressobj()
    try:
        payload = decompressor.decompress(blob)
    except zlib.error as exc:
        raise CodecError(CodecErrorKind.CORRUPT_STREAM, str(exc)) from exc
    if not decompressor.eof:
        raise CodecError(CodecErrorKind.CORRUPT_STREAM, "truncated zlib stream")
    if decompressor.unused_data:
        raise CodecError(
            CodecErrorKind.CORRUPT_STREAM,
            f"{len(decompressor.unused_data)} bytes after the zlib stream",
        )
    return decode_pgn_data(payload)


def compress_pgn_str(pgn_text: str) -> bytes:
    """Parse one PGN game and compress it."""
    return compress_pgn_data(parse_pgn_game(pgn_text))


def decompress_pgn_str(blob: bytes) -> str:
    """Decompress a blob straight to reduced-export-format PGN text."""
    return pgn_to_string(decompress_pgn_data(blob))
