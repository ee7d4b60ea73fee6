"""Reading player commands and carrying them out."""

from __future__ import annotations

import sys
from enum import Enum, auto
from typing import Callable, TextIO

from klondike.history import History, NoHistoryError
from klondike.moves import MoveParseError, parse_move_command
from klondike.position import Difficulty, Position
from klondike.renderer import Renderable, Renderer

PROMPT = "Command: "


class Command(Enum):
    """Kinds of player command."""

    MOVE = auto()
    DRAW = auto()
    UNDO = auto()
    RESTART = auto()
    HELP = auto()
    QUIT = auto()
    BACK = auto()
    GET_DIFFICULTY = auto()
    INVALID = auto()


_COMMAND_WORDS = {
    "MOVE": Command.MOVE,
    "M": Command.MOVE,
    "DRAW": Command.DRAW,
    "D": Command.DRAW,
    "UNDO": Command.UNDO,
    "RESTART": Command.RESTART,
    "HELP": Command.HELP,
    "BACK": Command.BACK,
    "QUIT": Command.QUIT,
}

_DIFFICULTY_CHOICES = {
    "1": Difficulty.EASY,
    "EASY": Difficulty.EASY,
    "2": Difficulty.HARD,
    "HARD": Difficulty.HARD,
}


def parse_command(text: str) -> Command:
    """Map an upper-case command word to a Command."""
    return _COMMAND_WORDS.get(text, Command.INVALID)


class Commander:
    """Runs the input side of the game loop."""

    def __init__(
        self,
        position: Position,
        renderer: Renderer,
        history: History,
        input_func: Callable[[str], str] | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.position = position
        self.renderer = renderer
        self.history = history
        self._input = input_func if input_func is not None else input
        self._out = out
        self._running = True

    def _say(self, message: str) -> None:
        print(message, file=self._out if self._out is not None else sys.stdout)

    def is_running(self) -> bool:
        return self._running

    def handle_input(self) -> None:
        """Read one command and carry it out."""
        command, rest = self.read_command()
        self.execute(command, rest)

    def read_command(self) -> tuple[Command, str]:
        """Read a line and split it into a command and its arguments.

        Until a difficulty is chosen, the whole line answers that question.
        End of input counts as quitting.
        """
        try:
            text = self._input(PROMPT)
        except EOFError:
            return Command.QUIT, ""
        text = text.upper()
        if self.position.difficulty is Difficulty.UNSET:
            return Command.GET_DIFFICULTY, text
        word, _, rest = text.partition(" ")
        return parse_command(word), rest

    def handle_move(self, text: str) -> bool:
        """Parse and play a move; False if it is malformed or illegal."""
        try:
            move = parse_move_command(text)
        except MoveParseError:
            return False
        if not self.position.is_legal(move):
            return False
        self.position.apply_move(move)
        return True

    def quit(self) -> None:
        """Stop the game loop."""
        self._running = False

    def execute(self, command: Command, rest: str = "") -> None:
        """Carry out a command, reporting problems to the player."""
        position, renderer, history = self.position, self.renderer, self.history
        match command:
            case Command.GET_DIFFICULTY:
                if position.difficulty is not Difficulty.UNSET:
                    self._say("The difficulty has already been chosen!")
                    return
                difficulty = _DIFFICULTY_CHOICES.get(rest)
                if difficulty is None:
                    self._say("Wrong command!")
                    return
                position.difficulty = difficulty
                history.record(position)
                renderer.set_view(Renderable.BOARD)
            case Command.DRAW:
                try:
                    position.draw_from_deck()
                except IndexError:
                    self._say("No cards left to draw!")
                    return
                renderer.set_view(Renderable.BOARD)
                history.record(position)
            case Command.MOVE:
                if not self.handle_move(rest):
                    self._say("Invalid Move!")
                    return
                renderer.set_view(
                    Renderable.WINSCREEN if position.is_won() else Renderable.BOARD
                )
                history.record(position)
            case Command.UNDO:
                if position.moves <= history.max_moves - history.max_undo_depth:
                    self._say("Undo limit exceeded!")
                    return
                try:
                    history.undo()
                except NoHistoryError as exc:
                    self._say(str(exc))
                    return
                renderer.set_view(Renderable.BOARD)
            case Command.RESTART:
                position.restart()
                renderer.set_view(Renderable.BOARD)
            case Command.HELP:
                renderer.set_view(Renderable.HELP)
            case Command.BACK:
                renderer.set_view(Renderable.BOARD)
            case Command.QUIT:
                self.quit()
            case Command.INVALID:
                self._say("Invalid command; please try again")
            case _:
                self._say("Input error")