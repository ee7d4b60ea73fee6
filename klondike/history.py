"""Snapshots of game positions for undo."""

from __future__ import annotations

from dataclasses import dataclass

from klondike.cards import Deck
from klondike.position import Difficulty, Position


class NoHistoryError(Exception):
    """Raised when there is no earlier position to return to."""


@dataclass
class Snapshot:
    """An independent copy of a position's piles and counters."""

    tableau: list[Deck]
    foundations: list[Deck]
    deck: Deck
    waste: Deck
    moves: int = 0
    difficulty: Difficulty = Difficulty.UNSET

    @classmethod
    def capture(cls, position: Position) -> Snapshot:
        return cls(
            tableau=[stack.copy() for stack in position.tableau],
            foundations=[stack.copy() for stack in position.foundations],
            deck=position.deck.copy(),
            waste=position.waste.copy(),
            moves=position.moves,
            difficulty=position.difficulty,
        )

    def restore_into(self, position: Position) -> None:
        """Overwrite the position's state with copies of this snapshot."""
        position.tableau = [stack.copy() for stack in self.tableau]
        position.foundations = [stack.copy() for stack in self.foundations]
        position.deck = self.deck.copy()
        position.waste = self.waste.copy()
        position.moves = self.moves
        position.difficulty = self.difficulty


class History:
    """Recorded positions of one game, for undoing moves."""

    def __init__(self, position: Position, max_undo_depth: int = 3) -> None:
        self._board = position
        self._max_undo_depth = max_undo_depth
        self._max_moves = 0
        self._snapshots: list[Snapshot] = []

    def record(self, position: Position) -> None:
        """Append a snapshot of ``position``."""
        self._max_moves = max(self._max_moves, position.moves)
        self._snapshots.append(Snapshot.capture(position))

    @property
    def max_moves(self) -> int:
        """The highest move count ever recorded, regardless of undo."""
        return self._max_moves

    @property
    def max_undo_depth(self) -> int:
        return self._max_undo_depth

    def undo(self) -> None:
        """Drop the latest snapshot and restore the one before it."""
        if len(self._snapshots) <= 1:
            raise NoHistoryError("No history available!")
        self._snapshots.pop()
        self._snapshots[-1].restore_into(self._board)