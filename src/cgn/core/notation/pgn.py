"""PGN parsing and serialization in reduced export format."""

from __future__ import annotations

import io
import logging
import textwrap
from enum import Enum, auto

import chess
import chess.pgn

from cgn.core.notation.models import HEADER_TAGS, MoveToken, PgnData, PgnHeaders

_LOGGER = logging.getLogger(__name__)

PGN_LINE_WIDTH = 80


class ParseError(ValueError):
    """Raised when PGN text does not contain one complete, valid game."""


class _BuilderState(Enum):
    AWAIT_HEADERS = auto()
    AWAIT_MOVES = auto()
    DONE = auto()


class PgnVisitor(chess.pgn.BaseVisitor[PgnData]):
    """Collects one game from :func:`chess.pgn.read_game` into :class:`PgnData`.

    Unknown tags, comments, NAGs and variations are dropped. The result
    token ending the movetext always wins over the ``Result`` tag.
    """

    def __init__(self) -> None:
        self._headers = PgnHeaders()
        self._moves: list[MoveToken] = []
        self._state = _BuilderState.AWAIT_HEADERS
        self._variation_depth = 0

    def begin_headers(self) -> chess.pgn.Headers:
        # Tags never reach this mapping, so FEN/Variant/SetUp are ignored
        # and every game is replayed from the standard start position.
        return chess.pgn.Headers()

    def visit_header(self, tagname: str, tagvalue: str) -> None:
        if self._state is _BuilderState.DONE:
            return
        name = HEADER_TAGS.get(tagname)
        if name is not None:
            setattr(self._headers, name, tagvalue)

    def end_headers(self) -> None:
        if self._state is _BuilderState.AWAIT_HEADERS:
            self._state = _BuilderState.AWAIT_MOVES

    def begin_variation(self) -> chess.pgn.SkipType:
        self._variation_depth += 1
        return chess.pgn.SKIP

    def end_variation(self) -> None:
        if self._variation_depth:
            self._variation_depth -= 1

    def visit_move(self, board: chess.Board, move: chess.Move) -> None:
        if self._state is _BuilderState.DONE:
            return
        san = board.san(move)
        try:
            self._moves.append(MoveToken.parse(san))
        except ValueError as exc:
            raise ParseError(f"Unsupported move in PGN: {san}") from exc

    def visit_result(self, result: str) -> None:
        if self._state is _BuilderState.DONE:
            return
        if result:
            self._headers.result = result
        self._state = _BuilderState.DONE

    def handle_error(self, error: Exception) -> None:
        if self._state is _BuilderState.DONE:
            return
        raise ParseError(f"Invalid PGN: {error}") from error

    def result(self) -> PgnData:
        if self._variation_depth:
            raise ParseError("PGN ends inside an unterminated variation")
        if not self._moves and self._state is not _BuilderState.DONE:
            raise ParseError("PGN game has neither moves nor a result")
        return PgnData(headers=self._headers, moves=self._moves)


def parse_pgn_game(pgn_text: str) -> PgnData:
    """Parse exactly one PGN game into reduced export format."""
    data = chess.pgn.read_game(io.StringIO(pgn_text), Visitor=PgnVisitor)
    if data is None:
        raise ParseError("No PGN game found")
    _LOGGER.debug("Parsed PGN game with %d moves", len(data.moves))
    return data


def pgn_movetext(data: PgnData) -> str:
    """Numbered movetext followed by the result, before line wrapping."""
    parts: list[str] = []
    for ply, move in enumerate(data.moves):
        if ply % 2 == 0:
            parts.append(f"{(ply // 2) + 1}. ")
        parts.append(f"{move} ")
    parts.append(data.headers.result)
    return "".join(parts)


def pgn_to_string(data: PgnData, width: int = PGN_LINE_WIDTH) -> str:
    """Render *data* as reduced-export-format PGN.

    Tag values are written verbatim between quotes. Only the movetext is
    wrapped, greedily and at spaces only.
    """
    header_lines = [
        f'[{tag} "{value}"]\n'
        for tag, value in zip(HEADER_TAGS, data.headers.values(), strict=True)
    ]
    movetext = textwrap.fill(
        pgn_movetext(data),
        width=width,
        break_long_words=False,
        break_on_hyphens=False,
    )
    return "".join(header_lines) + "\n" + movetext
