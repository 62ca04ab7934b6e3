"""Notation package: SAN tokens, reduced-export-format PGN models and I/O."""

from cgn.core.notation.models import HEADER_TAGS, MoveToken, PgnData, PgnHeaders
from cgn.core.notation.pgn import (
    PGN_LINE_WIDTH,
    ParseError,
    PgnVisitor,
    parse_pgn_game,
    pgn_movetext,
    pgn_to_string,
)
from cgn.core.notation.san import Castle, SanPlus, Suffix, parse_san_plus

__all__ = [
    "HEADER_TAGS",
    "PGN_LINE_WIDTH",
    "Castle",
    "MoveToken",
    "ParseError",
    "PgnData",
    "PgnHeaders",
    "PgnVisitor",
    "SanPlus",
    "Suffix",
    "parse_pgn_game",
    "parse_san_plus",
    "pgn_movetext",
    "pgn_to_string",
]
