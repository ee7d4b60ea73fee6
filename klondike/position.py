"""The state of a Klondike game and its rules."""

from __future__ import annotations

import random
from enum import Enum, auto

from klondike.cards import ACE, KING, Deck, Suit
from klondike.moves import Move, Pile, PileType

TABLEAU_COUNT = 7
FOUNDATION_COUNT = 4


class Difficulty(Enum):
    UNSET = auto()
    EASY = auto()
    HARD = auto()


_DIFFICULTY_LABELS = {Difficulty.EASY: "Easy", Difficulty.HARD: "Hard"}

_FOUNDATION_SUITS = {
    1: Suit.DIAMONDS,
    2: Suit.HEARTS,
    3: Suit.SPADES,
    4: Suit.CLUBS,
}


def difficulty_label(difficulty: Difficulty) -> str:
    """Human-readable name of a difficulty; empty when unset."""
    return _DIFFICULTY_LABELS.get(difficulty, "")


def foundation_suit(index: int) -> Suit:
    """The suit that the 1-based foundation ``index`` collects."""
    return _FOUNDATION_SUITS.get(index, Suit.INVALID)


class Position:
    """Tableau, foundations, stock and waste, plus the move counter."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.tableau = [Deck() for _ in range(TABLEAU_COUNT)]
        self.foundations = [Deck() for _ in range(FOUNDATION_COUNT)]
        self.deck = Deck()
        self.waste = Deck()
        self.moves = 0
        self.difficulty = Difficulty.UNSET
        self.setup()

    def clear(self) -> None:
        """Empty every pile and reset the move counter."""
        for stack in (*self.tableau, *self.foundations, self.waste, self.deck):
            stack.clear()
        self.moves = 0

    def setup(self) -> None:
        """Shuffle a new deck and deal the tableau."""
        self.deck.create()
        self.deck.shuffle(self._rng)
        for i, stack in enumerate(self.tableau):
            for _ in range(i + 1):
                stack.append(self.deck.deal())
            stack[i].face_up = True
        self.deck.shuffle(self._rng)

    def restart(self) -> None:
        """Start a new deal, keeping the chosen difficulty."""
        self.clear()
        self.setup()

    def is_won(self) -> bool:
        """True when every foundation is topped by a king."""
        return all(
            not stack.is_empty() and stack.peek().value == KING for stack in self.foundations
        )

    def largest_stack(self) -> int:
        """Height of the tallest tableau column."""
        return max(len(stack) for stack in self.tableau)

    def is_legal(self, move: Move) -> bool:
        """Check whether a move may be played on this position."""
        src, dst = move.source, move.destination
        if not (self._exists(src) and self._exists(dst)):
            return False
        if dst.type is PileType.WASTE:
            return False
        single_only = src.type in (PileType.WASTE, PileType.FOUNDATION) or (
            dst.type is PileType.FOUNDATION
        )
        if single_only and move.count != 1:
            return False
        return self._can_transfer(move)

    def reveal_top_cards(self) -> None:
        """Turn the top card of each tableau column face up."""
        for stack in self.tableau:
            if not stack.is_empty():
                stack.peek().face_up = True

    def draw_from_deck(self) -> None:
        """Draw one card (easy) or three (hard) onto the waste.

        An empty stock is refilled from the shuffled waste first.
        """
        count = 1 if self.difficulty is Difficulty.EASY else 3
        if self.deck.is_empty():
            self.deck, self.waste = self.waste, Deck()
            self.deck.shuffle(self._rng)
        if self.deck.is_empty():
            raise IndexError("no cards left to draw")
        for _ in range(min(count, len(self.deck))):
            card = self.deck.deal()
            card.face_up = True
            self.waste.append(card)
        self.moves += 1

    def pile(self, ref: Pile) -> Deck:
        """The deck that a pile reference points at."""
        if ref.type is PileType.TABLEAU:
            return self._indexed(self.tableau, ref.index)
        if ref.type is PileType.FOUNDATION:
            return self._indexed(self.foundations, ref.index)
        return self.waste

    def apply_move(self, move: Move) -> None:
        """Move the cards, keeping their order, and count the move."""
        source = self.pile(move.source)
        destination = self.pile(move.destination)
        taken = [source.deal() for _ in range(move.count)]
        for card in reversed(taken):
            destination.append(card)
        self.moves += 1
        self.reveal_top_cards()

    @staticmethod
    def _indexed(stacks: list[Deck], index: int) -> Deck:
        if not 1 <= index <= len(stacks):
            raise IndexError(f"no pile number {index}")
        return stacks[index - 1]

    @staticmethod
    def _exists(ref: Pile) -> bool:
        if ref.type is PileType.WASTE:
            return ref.index == 1
        if ref.type is PileType.TABLEAU:
            return 1 <= ref.index <= TABLEAU_COUNT
        if ref.type is PileType.FOUNDATION:
            return 1 <= ref.index <= FOUNDATION_COUNT
        return False

    def _can_transfer(self, move: Move) -> bool:
        source = self.pile(move.source)
        if not 1 <= move.count <= len(source):
            return False
        card = source.peek(move.count)
        target = self.pile(move.destination)
        dst = move.destination
        if dst.type is PileType.TABLEAU:
            if target.is_empty():
                return card.value == KING
            top = target.peek()
            return card.color != top.color and card.value == top.value - 1 and card.face_up
        if dst.type is PileType.FOUNDATION:
            if card.suit is not foundation_suit(dst.index):
                return False
            if target.is_empty():
                return card.value == ACE
            return card.value == target.peek().value + 1 and card.face_up
        return False