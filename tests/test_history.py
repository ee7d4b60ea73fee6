import random

import pytest

from klondike.history import History, NoHistoryError, Snapshot
from klondike.position import Difficulty, Position


def _state(p):
    return (
        [s.listing() for s in p.tableau],
        [s.listing() for s in p.foundations],
        p.deck.listing(),
        p.waste.listing(),
        [[c.face_up for c in s] for s in p.tableau],
        p.moves,
        p.difficulty,
    )


@pytest.fixture
def position():
    p = Position(random.Random(17))
    p.difficulty = Difficulty.EASY
    return p


def test_undo_restores_previous_position(position):
    history = History(position)
    history.record(position)
    before = _state(position)
    position.draw_from_deck()
    history.record(position)
    assert _state(position) != before
    history.undo()
    assert _state(position) == before


def test_undo_without_history_raises(position):
    history = History(position)
    with pytest.raises(NoHistoryError):
        history.undo()
    history.record(position)
    with pytest.raises(NoHistoryError):
        history.undo()


def test_max_moves_survives_undo(position):
    history = History(position)
    history.record(position)
    for _ in range(3):
        position.draw_from_deck()
        history.record(position)
    history.undo()
    history.undo()
    assert position.moves == 1
    assert history.max_moves == 3


def test_max_undo_depth():
    p = Position(random.Random(1))
    assert History(p).max_undo_depth == 3
    assert History(p, 5).max_undo_depth == 5


def test_snapshot_is_independent_of_position(position):
    snapshot = Snapshot.capture(position)
    before = [s.listing() for s in snapshot.tableau]
    position.tableau[0].deal()
    position.deck.peek().face_up = True
    assert [s.listing() for s in snapshot.tableau] == before
    assert not snapshot.deck.peek().face_up


def test_restore_into_copies(position):
    snapshot = Snapshot.capture(position)
    other = Position(random.Random(99))
    snapshot.restore_into(other)
    assert _state(other) == _state(position)
    other.tableau[6].deal()
    assert len(snapshot.tableau[6]) == len(position.tableau[6])


def test_multiple_undos_walk_back(position):
    history = History(position)
    history.record(position)
    states = [_state(position)]
    for _ in range(2):
        position.draw_from_deck()
        history.record(position)
        states.append(_state(position))
    history.undo()
    assert _state(position) == states[1]
    history.undo()
    assert _state(position) == states[0]