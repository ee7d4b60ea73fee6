"""Klondike solitaire: cards, rules, undo history, text screens and a terminal game loop."""

__version__ = "0.1.0"