import pytest

from klondike.moves import Move, MoveParseError, Pile, PileType, parse_move_command


@pytest.mark.parametrize(
    "text, expected",
    [
        ("T3", Pile(PileType.TABLEAU, 3)),
        ("t7", Pile(PileType.TABLEAU, 7)),
        ("F2", Pile(PileType.FOUNDATION, 2)),
        ("W", Pile(PileType.WASTE, 1)),
        ("w9", Pile(PileType.WASTE, 1)),
        ("", Pile(PileType.UNKNOWN, -1)),
        ("X1", Pile(PileType.UNKNOWN, -1)),
        ("T", Pile(PileType.TABLEAU, -1)),
        ("T2abc", Pile(PileType.TABLEAU, 2)),
        ("Tx", Pile(PileType.TABLEAU, -1)),
    ],
)
def test_pile_from_string(text, expected):
    assert Pile.from_string(text) == expected


def test_pile_from_string_overflow_is_invalid_index():
    assert Pile.from_string("T99999999999") == Pile(PileType.TABLEAU, -1)


@pytest.mark.parametrize(
    "pile, valid",
    [
        (Pile(PileType.TABLEAU, 1), True),
        (Pile(PileType.FOUNDATION, 4), True),
        (Pile(PileType.WASTE, 1), True),
        (Pile(PileType.TABLEAU, 0), False),
        (Pile(PileType.FOUNDATION, -1), False),
        (Pile(PileType.UNKNOWN, 1), False),
    ],
)
def test_pile_is_valid(pile, valid):
    assert pile.is_valid() is valid


def test_parse_defaults_to_one_card():
    move = parse_move_command("T1 F1")
    assert move == Move(Pile(PileType.TABLEAU, 1), Pile(PileType.FOUNDATION, 1), 1)


def test_parse_with_count():
    move = parse_move_command("T1 T2 3")
    assert move.count == 3
    assert move.source == Pile(PileType.TABLEAU, 1)
    assert move.destination == Pile(PileType.TABLEAU, 2)


def test_parse_non_numeric_count_falls_back_to_one():
    assert parse_move_command("W T4 abc").count == 1


def test_parse_waste_source():
    move = parse_move_command("  W   F3 ")
    assert move.source == Pile(PileType.WASTE, 1)
    assert move.destination == Pile(PileType.FOUNDATION, 3)


@pytest.mark.parametrize(
    "text",
    ["", "T1", "T1 T2 0", "T1 T2 -2", "Q1 T2", "T1 X2", "T0 F1", "T1 F"],
)
def test_parse_rejects(text):
    with pytest.raises(MoveParseError):
        parse_move_command(text)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_move_command("nonsense")