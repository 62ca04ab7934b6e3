"""Board-free SAN token parsing and rendering."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

import chess

_SAN_RE = re.compile(
    r"^(?:(?P<castle>O-O(?:-O)?)|(?P<null>--)"
    r"|(?P<piece>[NBRQK])?(?P<file>[a-h])?(?P<rank>[1-8])?(?P<capture>x)?"
    r"(?P<to>[a-h][1-8])(?:=(?P<promotion>[NBRQ]))?)"
    r"(?P<suffix>[+#])?\Z"
)
_PROMOTION_RANKS = (0, 7)
NULL_MOVE = "--"


class Castle(StrEnum):
    """Castling side as written in SAN."""

    KINGSIDE = "O-O"
    QUEENSIDE = "O-O-O"


class Suffix(StrEnum):
    """Check / checkmate marker appended to a SAN move."""

    NONE = ""
    CHECK = "+"
    CHECKMATE = "#"


def _piece_letter(piece_type: chess.PieceType) -> str:
    return chess.piece_symbol(piece_type).upper()


@dataclass(frozen=True, slots=True)
class SanPlus:
    """A syntactically valid SAN move plus its check suffix.

    Only the notation is validated; legality needs a board and is left
    to whoever produced the token.
    """

    to_square: chess.Square | None = None
    piece_type: chess.PieceType = chess.PAWN
    from_file: int | None = None
    from_rank: int | None = None
    capture: bool = False
    promotion: chess.PieceType | None = None
    castle: Castle | None = None
    null: bool = False
    suffix: Suffix = Suffix.NONE

    def __post_init__(self) -> None:
        forms = (self.castle is not None, self.null, self.to_square is not None)
        if sum(forms) != 1:
            raise ValueError(
                "SAN move needs exactly one of a target square, castling "
                f"or a null move: {self!r}"
            )

    def __str__(self) -> str:
        if self.castle is not None:
            return f"{self.castle}{self.suffix}"
        if self.null:
            return f"{NULL_MOVE}{self.suffix}"
        if self.to_square is None:
            raise ValueError("SAN move without a target square")

        parts: list[str] = []
        if self.piece_type != chess.PAWN:
            parts.append(_piece_letter(self.piece_type))
        if self.from_file is not None:
            parts.append(chess.FILE_NAMES[self.from_file])
        if self.from_rank is not None:
            parts.append(chess.RANK_NAMES[self.from_rank])
        if self.capture:
            parts.append("x")
        parts.append(chess.square_name(self.to_square))
        if self.promotion is not None:
            parts.append("=" + _piece_letter(self.promotion))
        parts.append(self.suffix)
        return "".join(parts)


def parse_san_plus(text: str) -> SanPlus:
    """Parse a SAN token such as ``Nbd7``, ``exd8=Q+``, ``O-O-O#`` or ``--``.

    Raises :class:`ValueError` for anything that is not well-formed SAN.
    """
    match = _SAN_RE.match(text)
    if match is None:
        raise ValueError(f"Invalid SAN token: {text!r}")

    suffix = Suffix(match.group("suffix") or "")
    castle = match.group("castle")
    if castle is not None:
        return SanPlus(castle=Castle(castle), suffix=suffix)
    if match.group("null") is not None:
        return SanPlus(null=True, suffix=suffix)

    piece = match.group("piece")
    piece_type = chess.PAWN
    if piece is not None:
        piece_type = chess.PIECE_SYMBOLS.index(piece.lower())

    to_square = chess.parse_square(match.group("to"))
    promotion: chess.PieceType | None = None
    if match.group("promotion") is not None:
        if piece_type != chess.PAWN:
            raise ValueError(f"Only pawns can promote: {text!r}")
        if chess.square_rank(to_square) not in _PROMOTION_RANKS:
            raise ValueError(f"Promotion off the back rank: {text!r}")
        promotion = chess.PIECE_SYMBOLS.index(match.group("promotion").lower())

    capture = match.group("capture") is not None
    file_name = match.group("file")
    rank_name = match.group("rank")
    if piece_type == chess.PAWN and capture and file_name is None:
        raise ValueError(f"Pawn capture needs a source file: {text!r}")

    return SanPlus(
        to_square=to_square,
        piece_type=piece_type,
        from_file=chess.FILE_NAMES.index(file_name) if file_name else None,
        from_rank=chess.RANK_NAMES.index(rank_name) if rank_name else None,
        capture=capture,
        promotion=promotion,
        suffix=suffix,
    )
