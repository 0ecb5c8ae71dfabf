import pytest

from battleship.game.core.models import Coord, Difficulty, Rule, Status, all_coords


def test_status_glyphs() -> None:
    assert [status.glyph for status in Status] == ["🚀", "❌", "💥", "💀", " "]


def test_resolved_statuses() -> None:
    assert {status for status in Status if status.is_resolved} == {Status.MISS, Status.HIT, Status.KILL}


def test_coord_orders_row_major() -> None:
    assert sorted({Coord(1, 0), Coord(0, 9), Coord(0, 1)}) == [Coord(0, 1), Coord(0, 9), Coord(1, 0)]
    assert all_coords()[0] == Coord(0, 0)
    assert all_coords()[-1] == Coord(9, 9)
    assert not Coord(10, 0).in_bounds()


def test_rule_and_difficulty_parse_case_insensitively() -> None:
    assert Rule.parse("fury") is Rule.FURY
    assert Rule.parse(" CHARGE ") is Rule.CHARGE
    assert Difficulty.parse("hard") is Difficulty.HARD


def test_parse_rejects_unknown_names() -> None:
    with pytest.raises(ValueError, match="Expected one of: Default, Fury, Charge"):
        Rule.parse("blitz")
    with pytest.raises(ValueError):
        Difficulty.parse("")
