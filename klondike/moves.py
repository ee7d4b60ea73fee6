"""Pile references and parsing of move commands."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class PileType(Enum):
    TABLEAU = auto()
    FOUNDATION = auto()
    WASTE = auto()
    UNKNOWN = auto()


class MoveParseError(ValueError):
    """Raised when a move command cannot be understood."""


def _leading_int(text: str) -> int | None:
    """Parse the integer at the start of ``text``, ignoring anything after it."""
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


@dataclass(frozen=True)
class Pile:
    """A reference to a pile on the board; indices are 1-based."""

    type: PileType
    index: int

    @classmethod
    def from_string(cls, text: str) -> Pile:
        """Parse notation such as ``T3``, ``F1`` or ``W``."""
        if not text:
            return cls(PileType.UNKNOWN, -1)
        kind = text[0].upper()
        index = _leading_int(text[1:])
        if index is None:
            index = -1
        if kind == "T":
            return cls(PileType.TABLEAU, index)
        if kind == "F":
            return cls(PileType.FOUNDATION, index)
        if kind == "W":
            return cls(PileType.WASTE, 1)
        return cls(PileType.UNKNOWN, -1)

    def is_valid(self) -> bool:
        if self.type is PileType.UNKNOWN:
            return False
        if self.type in (PileType.TABLEAU, PileType.FOUNDATION) and self.index < 1:
            return False
        return True


@dataclass(frozen=True)
class Move:
    """Move ``count`` cards from ``source`` to ``destination``."""

    source: Pile
    destination: Pile
    count: int = 1


def parse_move_command(text: str) -> Move:
    """Parse ``"<source> <destination> [count]"`` into a Move."""
    tokens = text.split()
    if len(tokens) < 2:
        raise MoveParseError(f"expected a source and a destination: {text!r}")
    count = 1
    if len(tokens) >= 3:
        parsed = _leading_int(tokens[2])
        if parsed is not None:
            count = parsed
    source = Pile.from_string(tokens[0])
    destination = Pile.from_string(tokens[1])
    if not source.is_valid():
        raise MoveParseError(f"invalid source pile: {tokens[0]!r}")
    if not destination.is_valid():
        raise MoveParseError(f"invalid destination pile: {tokens[1]!r}")
    if count < 1:
        raise MoveParseError(f"card count must be at least 1, got {count}")
    return Move(source, destination, count)