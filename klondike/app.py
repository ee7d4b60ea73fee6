"""Command-line entry point for the solitaire game."""

from __future__ import annotations

import sys
from typing import Callable, Sequence, TextIO

from klondike.controller import Commander
from klondike.history import History
from klondike.position import Position
from klondike.renderer import Renderer


def run(
    input_func: Callable[[str], str] | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Play one session; return the process exit status."""
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr
    try:
        position = Position()
        history = History(position)
        renderer = Renderer(position, out=out)
        commander = Commander(position, renderer, history, input_func=input_func, out=out)
        while commander.is_running():
            renderer.render()
            commander.handle_input()
    except Exception as exc:
        print(f"Fatal error: {exc}", file=err)
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game on the terminal."""
    if sys.platform == "win32":
        reconfigure = getattr(sys.stdout, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(encoding="utf-8")
    return run()


if __name__ == "__main__":
    sys.exit(main())