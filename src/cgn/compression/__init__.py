"""Binary encoding and zlib compression of :class:`~cgn.core.PgnData`."""

from cgn.compression.zlib_codec import (
    COMPRESSION_LEVEL,
    CodecError,
    CodecErrorKind,
    compress_pgn_data,
    compress_pgn_str,
    decode_pgn_data,
    decompress_pgn_data,
    decompress_pgn_str,
    encode_pgn_data,
)

__all__ = [
    "COMPRESSION_LEVEL",
    "CodecError",
    "CodecErrorKind",
    "compress_pgn_data",
    "compress_pgn_str",
    "decode_pgn_data",
    "decompress_pgn_data",
    "decompress_pgn_str",
    "encode_pgn_data",
]
