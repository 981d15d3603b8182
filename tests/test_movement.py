import pytest

from dsfpuzzle.movement import (
    Climbing,
    Direction1D,
    Direction2D,
    Falling,
    Grounded,
    Jumping,
    Pos,
    Steering,
    SteeringIntent,
    Velocity,
)

NEG = Direction1D.NEGATIVE
POS = Direction1D.POSITIVE
NEU = Direction1D.NEUTRAL


@pytest.mark.parametrize(
    "signum, expected",
    [(1.0, POS), (0.5, POS), (-1.0, NEG), (-3.0, NEG), (0.0, NEU), (-0.0, NEU), (1e-9, NEU)],
)
def test_from_signum(signum, expected):
    assert Direction1D.from_signum(signum) is expected


def test_is_opposite_1d():
    assert NEG.is_opposite(POS)
    assert POS.is_opposite(NEG)
    assert not POS.is_opposite(POS)
    assert not NEU.is_opposite(POS)
    assert not NEG.is_opposite(NEU)


def test_predicates_1d():
    assert POS.is_positive() and not POS.is_negative() and not POS.is_neutral()
    assert NEG.is_negative() and not NEG.is_positive()
    assert NEU.is_neutral() and not NEU.is_positive()


def test_aligns_with():
    assert POS.aligns_with(2.0)
    assert NEG.aligns_with(-2.0)
    assert not POS.aligns_with(-2.0)
    assert not NEU.aligns_with(0.0)


def test_signum_values():
    assert POS.signum() == 1.0
    assert NEG.signum() == -1.0
    assert NEU.signum() == 0.0
    assert [d.signum_i() for d in (POS, NEG, NEU)] == [1, -1, 0]


def test_signum_round_trip():
    for direction in Direction1D:
        assert Direction1D.from_signum(direction.signum()) is direction


def test_direction2d():
    assert Direction2D().is_neutral()
    d = Direction2D.from_signums(1.0, -1.0)
    assert d == Direction2D(POS, NEG)
    assert not d.is_neutral()
    assert d.is_opposite(Direction2D(NEG, NEU))
    assert d.is_opposite(Direction2D(NEU, POS))
    assert not d.is_opposite(Direction2D(POS, NEU))


def test_velocity_default():
    v = Velocity()
    assert (v.x, v.y) == (0.0, 0.0)


def test_pos_arithmetic_invariants():
    a, b = Pos(3, -7), Pos(-2, 11)
    assert (a + b) - b == a
    assert a - a == Pos()
    assert a.append_x(5) == a + Pos(5, 0)
    assert a.append_y(5) == a + Pos(0, 5)
    assert a.append_xy(4, 9) == a.append_x(4).append_y(9)


def test_pos_ordering_and_hash():
    assert sorted([Pos(1, 0), Pos(0, 5), Pos(0, 1)]) == [Pos(0, 1), Pos(0, 5), Pos(1, 0)]
    assert len({Pos(1, 2), Pos(1, 2)}) == 1


def test_calc_delta_y():
    assert Jumping().calc_delta_y(0.209) == pytest.approx(2.2)
    assert Falling().calc_delta_y(1.0) == pytest.approx(-15.0)
    assert Grounded().calc_delta_y(1.0) == 0.0
    assert Climbing().calc_delta_y(1.0) == 0.0


def test_jump_curve_is_symmetric_around_peak():
    j = Jumping()
    assert j.calc_delta_y(0.109) == pytest.approx(j.calc_delta_y(0.309))
    assert j.calc_delta_y(0.209) > j.calc_delta_y(0.1)


def test_jump_to_fall():
    jump = Jumping(x_movement=POS, starting_y_pos=1.0, duration=0.5)
    fall = jump.jump_to_fall()
    assert isinstance(fall, Falling)
    assert fall.x_movement is POS
    assert fall.starting_y_pos == pytest.approx(1.0 + 2.2)
    assert fall.duration == pytest.approx(0.5 - 0.209)


@pytest.mark.parametrize("mode", [Grounded(), Climbing(), Falling()])
def test_jump_to_fall_rejected(mode):
    with pytest.raises(ValueError):
        mode.jump_to_fall()


def test_add_to_duration():
    jump = Jumping(x_movement=NEG, starting_y_pos=2.0, duration=0.5)
    longer = jump.add_to_duration(0.25)
    assert longer == Jumping(x_movement=NEG, starting_y_pos=2.0, duration=0.75)
    fall = Falling(duration=1.0).add_to_duration(0.5)
    assert isinstance(fall, Falling) and fall.duration == pytest.approx(1.5)


@pytest.mark.parametrize("mode", [Grounded(), Climbing()])
def test_add_to_duration_rejected(mode):
    with pytest.raises(ValueError):
        mode.add_to_duration(0.1)


def test_modes_compare_by_kind():
    assert Grounded() == Grounded()
    assert Grounded() != Climbing()
    assert Falling(duration=1.0) != Jumping(duration=1.0)


def test_steering_at():
    s = Steering.at(Pos(3, 4), Pos(2, 2))
    assert s.facing == Direction2D(POS, NEU)
    assert s.destination == Pos(3, 4)
    assert s.is_grounded()
    assert not s.is_mid_air() and not s.is_climbing()


def test_steering_mode_queries():
    s = Steering.at(Pos(), Pos(1, 1))
    s.mode = Jumping(duration=0.1)
    assert s.is_jumping() and s.is_mid_air() and not s.jump_has_peaked()
    s.mode = Jumping(duration=0.3)
    assert s.jump_has_peaked()
    s.mode = Falling(duration=0.3)
    assert s.is_falling() and s.is_mid_air() and not s.jump_has_peaked()
    s.mode = Climbing()
    assert s.is_climbing() and not s.is_grounded()


def test_centered_and_anchor_round_trip():
    s = Steering.at(Pos(), Pos(2, 3))
    p = Pos(-4, 7)
    cx, cy = s.to_centered_coords(p)
    assert s.to_anchor_coords((cx, cy, 0.0)) == (p.x, p.y)
    assert cx > p.x and cy > p.y


def test_steering_intent_defaults():
    intent = SteeringIntent()
    assert not intent.jump and not intent.walk_invalidated
    assert intent.walk is NEU and intent.jump_direction is NEU