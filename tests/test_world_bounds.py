import pytest

from dsfpuzzle.movement import Pos
from dsfpuzzle.world_bounds import MIN_DIMENSION, WorldBounds


def test_default_bounds():
    b = WorldBounds()
    assert (b.x(), b.y(), b.width(), b.height()) == (-20, -10, 40, 20)


def test_upper_bounds_invariant():
    b = WorldBounds(Pos(3, -5), Pos(7, 9))
    assert b.upper_x() == b.x() + b.width()
    assert b.upper_y() == b.y() + b.height()


def test_clamp_inside_is_identity():
    b = WorldBounds()
    p = Pos(b.x() + 1, b.y() + 1)
    assert b.clamp(p) == p


def test_clamp_outside():
    b = WorldBounds(Pos(0, 0), Pos(10, 5))
    assert b.clamp(Pos(100, 100)) == Pos(b.upper_x() - 1, b.upper_y() - 1)
    assert b.clamp(Pos(-100, -100)) == Pos(b.x(), b.y())
    clamped = b.clamp(Pos(50, -50))
    assert b.encloses(clamped, Pos(1, 1))


def test_encloses():
    b = WorldBounds(Pos(0, 0), Pos(10, 5))
    assert b.encloses(b.pos, b.dimens)
    assert not b.encloses(b.pos, b.dimens.append_x(1))
    assert not b.encloses(b.pos.append_y(-1), Pos(1, 1))
    assert not b.encloses(Pos(b.upper_x(), 0), Pos(1, 1))


def test_adjust_lower_x_border():
    b = WorldBounds(Pos(0, 0), Pos(10, 10))
    upper = b.upper_x()
    b.adjust_x(b.x(), 3)
    assert b.x() == 3
    assert b.upper_x() == upper


def test_adjust_upper_x_border():
    b = WorldBounds(Pos(0, 0), Pos(10, 10))
    lower = b.x()
    b.adjust_x(b.upper_x() - 1, 2)
    assert b.x() == lower
    assert b.width() == 10 + 2


def test_adjust_non_border_does_nothing():
    b = WorldBounds(Pos(0, 0), Pos(10, 10))
    before = WorldBounds(b.pos, b.dimens)
    b.adjust_x(5, 1)
    b.adjust_y(5, 1)
    assert b == before


def test_adjust_respects_min_dimension():
    b = WorldBounds(Pos(0, 0), Pos(MIN_DIMENSION, MIN_DIMENSION))
    before = WorldBounds(b.pos, b.dimens)
    b.adjust_x(b.x(), 1)
    b.adjust_y(b.y(), 1)
    b.adjust_x(b.upper_x() - 1, -1)
    b.adjust_y(b.upper_y() - 1, -1)
    assert b == before


def test_adjust_y_lower_and_upper():
    b = WorldBounds(Pos(0, 0), Pos(10, 10))
    upper = b.upper_y()
    b.adjust_y(b.y(), -4)
    assert b.y() == -4 and b.upper_y() == upper
    b.adjust_y(b.upper_y() - 1, 1)
    assert b.upper_y() == upper + 1


def test_dict_round_trip():
    b = WorldBounds(Pos(-3, 4), Pos(12, 8))
    assert WorldBounds.from_dict(b.to_dict()) == b


def test_from_dict_missing_field():
    with pytest.raises(ValueError):
        WorldBounds.from_dict({"pos": {"x": 0, "y": 0}})


def test_from_dict_unknown_pos_field():
    with pytest.raises(ValueError):
        WorldBounds.from_dict({"pos": {"x": 0, "y": 0, "z": 1}, "dimens": {"x": 2, "y": 2}})