"""Directions, discrete positions and the steering state of moving entities."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Sequence

# Machine epsilon of a 32-bit float, used as the dead zone around zero.
_F32_EPSILON = 1.1920929e-07

# Time in seconds after which a jump reaches its highest point.
JUMP_PEAK_TIME = 0.209


class Direction1D(Enum):
    """A direction along one axis."""

    NEGATIVE = "Negative"
    POSITIVE = "Positive"
    NEUTRAL = "Neutral"

    @classmethod
    def from_signum(cls, signum: float) -> Direction1D:
        """Direction of the sign of ``signum``; values near zero are neutral."""
        if abs(signum) <= _F32_EPSILON:
            return cls.NEUTRAL
        if math.copysign(1.0, signum) > 0:
            return cls.POSITIVE
        return cls.NEGATIVE

    def is_opposite(self, other: Direction1D) -> bool:
        return {self, other} == {Direction1D.NEGATIVE, Direction1D.POSITIVE}

    def is_positive(self) -> bool:
        return self is Direction1D.POSITIVE

    def is_negative(self) -> bool:
        return self is Direction1D.NEGATIVE

    def is_neutral(self) -> bool:
        return self is Direction1D.NEUTRAL

    def aligns_with(self, direction: float) -> bool:
        """True if this direction is not neutral and has the sign of ``direction``."""
        return self is not Direction1D.NEUTRAL and self is Direction1D.from_signum(direction)

    def signum(self) -> float:
        return {Direction1D.POSITIVE: 1.0, Direction1D.NEGATIVE: -1.0}.get(self, 0.0)

    def signum_i(self) -> int:
        return {Direction1D.POSITIVE: 1, Direction1D.NEGATIVE: -1}.get(self, 0)


@dataclass(frozen=True)
class Direction2D:
    """A direction along both the x-axis and the y-axis."""

    x: Direction1D = Direction1D.NEUTRAL
    y: Direction1D = Direction1D.NEUTRAL

    @classmethod
    def from_signums(cls, signum_x: float, signum_y: float) -> Direction2D:
        return cls(Direction1D.from_signum(signum_x), Direction1D.from_signum(signum_y))

    def is_opposite(self, other: Direction2D) -> bool:
        return self.x.is_opposite(other.x) or self.y.is_opposite(other.y)

    def is_neutral(self) -> bool:
        return self.x is Direction1D.NEUTRAL and self.y is Direction1D.NEUTRAL


@dataclass
class Velocity:
    """Velocity in meters per second."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True, order=True)
class Pos:
    """A discrete position on the grid; ordered by x, then y."""

    x: int = 0
    y: int = 0

    def append_x(self, x: int) -> Pos:
        return Pos(self.x + x, self.y)

    def append_y(self, y: int) -> Pos:
        return Pos(self.x, self.y + y)

    def append_xy(self, x: int, y: int) -> Pos:
        return Pos(self.x + x, self.y + y)

    def __add__(self, other: Pos) -> Pos:
        if not isinstance(other, Pos):
            return NotImplemented
        return Pos(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Pos) -> Pos:
        if not isinstance(other, Pos):
            return NotImplemented
        return Pos(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class SteeringMode:
    """How an entity currently moves; see the concrete subclasses."""

    def calc_delta_y(self, duration: float) -> float:
        """Vertical offset since the movement began; zero unless airborne."""
        if isinstance(self, Jumping):
            return -50.0 * (duration - JUMP_PEAK_TIME) ** 2 + 2.2
        if isinstance(self, Falling):
            return duration * -15.0
        return 0.0

    def jump_to_fall(self) -> Falling:
        raise ValueError(f"Cannot turn {type(self).__name__} into a fall.")

    def add_to_duration(self, delta_time: float) -> SteeringMode:
        raise ValueError(
            f"Cannot add to the duration of {type(self).__name__}; "
            "only Falling and Jumping have a duration."
        )


@dataclass(frozen=True)
class Grounded(SteeringMode):
    """Standing on flat ground; may walk or start a jump."""


@dataclass(frozen=True)
class Climbing(SteeringMode):
    """Climbing on a ladder."""


@dataclass(frozen=True)
class _Airborne(SteeringMode):
    x_movement: Direction1D = Direction1D.NEUTRAL
    starting_y_pos: float = 0.0
    duration: float = 0.0

    def add_to_duration(self, delta_time: float) -> SteeringMode:
        return replace(self, duration=self.duration + delta_time)


@dataclass(frozen=True)
class Falling(_Airborne):
    """Falling straight down, with a constant sideways movement."""


@dataclass(frozen=True)
class Jumping(_Airborne):
    """Jumping along a fixed curve, with a constant sideways movement."""

    def jump_to_fall(self) -> Falling:
        return Falling(
            x_movement=self.x_movement,
            starting_y_pos=self.starting_y_pos + self.calc_delta_y(JUMP_PEAK_TIME),
            duration=self.duration - JUMP_PEAK_TIME,
        )


@dataclass
class SteeringIntent:
    """How an entity intends to move this tick."""

    walk_invalidated: bool = False
    face: Direction1D = Direction1D.NEUTRAL
    walk: Direction1D = Direction1D.NEUTRAL
    climb: Direction1D = Direction1D.NEUTRAL
    jump: bool = False
    jump_direction: Direction1D = Direction1D.NEUTRAL


@dataclass
class Steering:
    """Discrete position, facing and movement mode of a grid-snapped entity."""

    pos: Pos = field(default_factory=Pos)
    dimens: Pos = field(default_factory=Pos)
    facing: Direction2D = field(default_factory=Direction2D)
    destination: Pos = field(default_factory=Pos)
    mode: SteeringMode = field(default_factory=Grounded)

    @classmethod
    def at(cls, pos: Pos, dimens: Pos) -> Steering:
        """Grounded steering at ``pos``, facing right, with no destination yet."""
        return cls(
            pos=pos,
            dimens=dimens,
            facing=Direction2D.from_signums(1.0, 0.0),
            destination=pos,
            mode=Grounded(),
        )

    def is_grounded(self) -> bool:
        return isinstance(self.mode, Grounded)

    def is_mid_air(self) -> bool:
        return isinstance(self.mode, (Falling, Jumping))

    def is_jumping(self) -> bool:
        return isinstance(self.mode, Jumping)

    def jump_has_peaked(self) -> bool:
        return isinstance(self.mode, Jumping) and self.mode.duration > JUMP_PEAK_TIME

    def is_falling(self) -> bool:
        return isinstance(self.mode, Falling)

    def is_climbing(self) -> bool:
        return isinstance(self.mode, Climbing)

    def to_centered_coords(self, pos: Pos) -> tuple[float, float]:
        """Centre point of the entity if its bottom-left corner were at ``pos``."""
        return (pos.x + 0.5 * self.dimens.x, pos.y + 0.5 * self.dimens.y)

    def to_anchor_coords(self, translation: Sequence[float]) -> tuple[float, float]:
        """Bottom-left corner for a centre translation; not rounded to the grid."""
        return (
            translation[0] - 0.5 * self.dimens.x,
            translation[1] - 0.5 * self.dimens.y,
        )