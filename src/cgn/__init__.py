"""Compressed game notation: store chess games in reduced export format."""

from cgn.compression import (
    CodecError,
    compress_pgn_data,
    compress_pgn_str,
    decompress_pgn_data,
    decompress_pgn_str,
)
from cgn.core import (
    MoveToken,
    ParseError,
    PgnData,
    PgnHeaders,
    parse_pgn_game,
    pgn_to_string,
)

__all__ = [
    "CodecError",
    "MoveToken",
    "ParseError",
    "PgnData",
    "PgnHeaders",
    "compress_pgn_data",
    "compress_pgn_str",
    "decompress_pgn_data",
    "decompress_pgn_str",
    "parse_pgn_game",
    "pgn_to_string",
]
