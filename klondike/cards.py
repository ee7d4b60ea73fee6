"""Playing cards and ordered stacks of cards."""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Iterable, Iterator


class Suit(Enum):
    DIAMONDS = auto()
    HEARTS = auto()
    SPADES = auto()
    CLUBS = auto()
    INVALID = auto()


class Color(Enum):
    RED = auto()
    BLACK = auto()


_SYMBOLS = {
    Suit.DIAMONDS: "\u2666",
    Suit.HEARTS: "\u2665",
    Suit.SPADES: "\u2660",
    Suit.CLUBS: "\u2663",
}

RANKS = {
    1: "A",
    2: "2",
    3: "3",
    4: "4",
    5: "5",
    6: "6",
    7: "7",
    8: "8",
    9: "9",
    10: "10",
    11: "J",
    12: "Q",
    13: "K",
}

ACE = 1
KING = 13

FACE_DOWN_LABEL = " * "


def suit_to_symbol(suit: Suit) -> str:
    """Return the Unicode symbol of a suit, or "?" for an invalid one."""
    return _SYMBOLS.get(suit, "?")


@dataclass
class Card:
    """A single playing card; ``value`` runs from 1 (ace) to 13 (king)."""

    color: Color
    suit: Suit
    value: int
    face_up: bool = False

    def label(self, face_up: bool | None = None) -> str:
        """Return a three-column label; ``face_up`` overrides the card's own state."""
        shown = self.face_up if face_up is None else face_up
        if not shown:
            return FACE_DOWN_LABEL
        rank = RANKS.get(self.value, "")
        if len(rank) == 1:
            rank = " " + rank
        return rank + suit_to_symbol(self.suit)


class Deck:
    """An ordered stack of cards; the last card is the top."""

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: list[Card] = list(cards)

    def clear(self) -> None:
        """Remove every card."""
        self._cards.clear()

    def create(self) -> None:
        """Replace the contents with a fresh, ordered 52-card deck."""
        self._cards.clear()
        for suit in (Suit.DIAMONDS, Suit.HEARTS, Suit.SPADES, Suit.CLUBS):
            color = Color.RED if suit in (Suit.DIAMONDS, Suit.HEARTS) else Color.BLACK
            self._cards.extend(Card(color, suit, value) for value in range(ACE, KING + 1))

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Shuffle the cards in place."""
        (rng if rng is not None else random).shuffle(self._cards)

    def listing(self) -> list[str]:
        """Labels of all cards, bottom to top, shown face up."""
        return [card.label(True) for card in self._cards]

    def append(self, card: Card) -> None:
        """Put a card on top."""
        self._cards.append(card)

    def is_empty(self) -> bool:
        return not self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __getitem__(self, index: int) -> Card:
        return self._cards[index]

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __repr__(self) -> str:
        return f"Deck({self.listing()!r})"

    def peek(self, n: int = 1) -> Card:
        """Return the n-th card from the top (1 is the top card)."""
        if not 1 <= n <= len(self._cards):
            raise IndexError(f"cannot peek at card {n} of a deck of {len(self._cards)}")
        return self._cards[-n]

    def deal(self) -> Card:
        """Remove and return the top card."""
        if not self._cards:
            raise IndexError("cannot deal from an empty deck")
        return self._cards.pop()

    def copy(self) -> Deck:
        """Return an independent copy, cards included."""
        return Deck(replace(card) for card in self._cards)