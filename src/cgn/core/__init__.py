"""Core domain layer: the reduced-export-format game model and PGN text.

Quick start::

    from cgn.core import parse_pgn_game, pgn_to_string

    data = parse_pgn_game(pgn_text)
    print(data.headers.white, len(data.moves))
    assert pgn_to_string(data) == pgn_text  # for reduced-export-format input
"""

from cgn.core.notation import (
    HEADER_TAGS,
    MoveToken,
    ParseError,
    PgnData,
    PgnHeaders,
    parse_pgn_game,
    pgn_to_string,
)

__all__ = [
    "HEADER_TAGS",
    "MoveToken",
    "ParseError",
    "PgnData",
    "PgnHeaders",
    "parse_pgn_game",
    "pgn_to_string",
]
