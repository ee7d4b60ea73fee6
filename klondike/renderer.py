"""Text views of the game: difficulty prompt, board, help and win screen."""

from __future__ import annotations

import sys
from enum import Enum, auto
from itertools import islice
from typing import TextIO

from klondike.cards import suit_to_symbol
from klondike.position import Position, difficulty_label, foundation_suit

_WASTE_SHOWN = 3
_EMPTY_CELL = " " * 5
_CELL_GAP = " " * 2
_COLUMN_GAP = " " * 6

_DIFFICULTY_TEXT = (
    "What difficulty would you like to play on?\n"
    "1. Easy\n"
    "2. Hard\n"
)

_HELP_TEXT = "\n".join(
    (
        "",
        "==================[ HELP MENU ]==================",
        "",
        "OBJECTIVE:",
        "  Move all cards to the four foundations in",
        "  ascending order (Ace to King, by suit).",
        "",
        "TABLEAU RULES:",
        "  - Cards are built in descending order",
        "    and alternating colors.",
        "  - You can only move a King to an empty column.",
        "",
        "COMMANDS:",
        "  MOVE T1 F1 1   -> Move 1 card from Tableau 1 to Foundation 1",
        "  DRAW           -> Draw from the deck",
        "  UNDO           -> Undo the last move",
        "  RESTART        -> Start a new game",
        "  HELP           -> Show this help screen",
        "  EXIT           -> Quit the game",
        "",
        "NOTATION:",
        "  T1-T7 -> Tableau columns",
        "  F1-F4 -> Foundation piles",
        "  W     -> Waste pile",
        "",
        "Enter command BACK to return to game",
        "=================================================",
        "",
    )
)

_WIN_TEXT = (
    "\n\n\n"
    "*******************************\n"
    "*                             *\n"
    "*        YOU WON THE GAME!    *\n"
    "*                             *\n"
    "*******************************\n\n"
)


class Renderable(Enum):
    """What the renderer currently shows."""

    DIFFICULTY_DIALOGUE = auto()
    BOARD = auto()
    HELP = auto()
    WINSCREEN = auto()


class Renderer:
    """Writes the current view of a position to a text stream."""

    def __init__(
        self,
        position: Position,
        view: Renderable = Renderable.DIFFICULTY_DIALOGUE,
        out: TextIO | None = None,
    ) -> None:
        self.position = position
        self.view = view
        self._out = out

    def _write(self, text: str) -> None:
        (self._out if self._out is not None else sys.stdout).write(text)

    def render(self) -> None:
        """Write the view that is currently selected."""
        views = {
            Renderable.DIFFICULTY_DIALOGUE: self.difficulty_dialogue,
            Renderable.BOARD: self.board_view,
            Renderable.HELP: self.help_view,
            Renderable.WINSCREEN: self.win_view,
        }
        views[self.view]()

    def set_view(self, view: Renderable) -> None:
        """Choose what the next render() writes."""
        self.view = view

    def difficulty_dialogue(self) -> None:
        self._write(_DIFFICULTY_TEXT)

    def board_view(self) -> None:
        position = self.position
        self._write(
            f"Current moves: {position.moves}{' ' * 10}"
            f"Difficulty: {difficulty_label(position.difficulty)}\n"
        )
        self._write(self._top_row() + "\n")
        self._write(self._tableau_text())

    def help_view(self) -> None:
        self._write(_HELP_TEXT)

    def win_view(self) -> None:
        self._write(_WIN_TEXT)

    def _top_row(self) -> str:
        position = self.position
        parts = ["Foundations:"]
        for number, stack in enumerate(position.foundations, start=1):
            if stack.is_empty():
                label = f" {suit_to_symbol(foundation_suit(number))} "
            else:
                label = stack.peek().label()
            parts.append(f" [{label}]")
        parts.append(_COLUMN_GAP)

        deck_label = "  " if position.deck.is_empty() else position.deck.peek().label(False)
        parts.append(f"Deck: [{deck_label}]")
        parts.append(_COLUMN_GAP)

        parts.append("Waste:")
        parts.extend(
            f"[{card.label()}]" for card in islice(reversed(position.waste), _WASTE_SHOWN)
        )
        return "".join(parts)

    def _tableau_text(self) -> str:
        tableau = self.position.tableau
        lines = [
            "Tableau: ",
            "  " + "".join(f"{number}{_COLUMN_GAP}" for number in range(1, len(tableau) + 1)),
        ]
        for row in range(self.position.largest_stack()):
            cells = (
                (f"[{stack[row].label()}]" if row < len(stack) else _EMPTY_CELL) + _CELL_GAP
                for stack in tableau
            )
            lines.append("".join(cells))
        lines.append("")
        return "\n".join(lines) + "\n"