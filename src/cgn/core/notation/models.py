"""Reduced-export-format game models."""

from __future__ import annotations

from dataclasses import dataclass, field, fields

from cgn.core.notation.san import SanPlus, parse_san_plus

# PGN tag name -> PgnHeaders field, in Seven Tag Roster order.
HEADER_TAGS: dict[str, str] = {
    "Event": "event",
    "Site": "site",
    "Date": "date",
    "Round": "round",
    "White": "white",
    "Black": "black",
    "Result": "result",
}


class MoveToken:
    """One ply in canonical SAN.

    Wraps a :class:`SanPlus` and projects it to its SAN string once.
    Equality, hashing and serialization all go through that string.
    """

    __slots__ = ("_san_plus", "_san")

    def __init__(self, san_plus: SanPlus) -> None:
        self._san_plus = san_plus
        self._san = str(san_plus)

    @classmethod
    def parse(cls, text: str) -> MoveToken:
        """Create a token from SAN text; raises :class:`ValueError` if invalid."""
        return cls(parse_san_plus(text))

    @property
    def san_plus(self) -> SanPlus:
        return self._san_plus

    def __str__(self) -> str:
        return self._san

    def __repr__(self) -> str:
        return f"MoveToken({self._san!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MoveToken):
            return NotImplemented
        return self._san == other._san

    def __hash__(self) -> int:
        return hash(self._san)


@dataclass(slots=True)
class PgnHeaders:
    """The seven mandatory PGN tags; nothing else can be stored."""

    event: str = ""
    site: str = ""
    date: str = ""
    round: str = ""
    white: str = ""
    black: str = ""
    result: str = ""

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) == "" for f in fields(self))

    def values(self) -> list[str]:
        """Tag values in :data:`HEADER_TAGS` order."""
        return [getattr(self, name) for name in HEADER_TAGS.values()]


@dataclass(slots=True)
class PgnData:
    """Headers and mainline moves of one game in reduced export format.

    A game is in reduced export format when it has no comments, no
    recursive annotation variations, no numeric annotation glyphs and
    only the seven mandatory tags.
    """

    headers: PgnHeaders = field(default_factory=PgnHeaders)
    moves: list[MoveToken] = field(default_factory=list)

    def clear_headers(self) -> None:
        """Reset every tag to ``""``; moves are kept."""
        self.headers = PgnHeaders()

    def is_empty(self) -> bool:
        return self.headers.is_empty() and not self.moves
