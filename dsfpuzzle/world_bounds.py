"""The rectangular borders of a level."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from dsfpuzzle.movement import Pos

# No level can be smaller than 2 by 2: the editor needs room for a cursor and
# must be able to move one border without moving the other.
MIN_DIMENSION = 2


def _pos_from_dict(data: Any, name: str) -> Pos:
    if not isinstance(data, Mapping):
        raise ValueError(f"{name} must be a mapping with x and y.")
    unknown = set(data) - {"x", "y"}
    if unknown:
        raise ValueError(f"Unknown fields in {name}: {sorted(unknown)}")
    try:
        return Pos(int(data["x"]), int(data["y"]))
    except KeyError as err:
        raise ValueError(f"{name} is missing field {err.args[0]!r}") from None


@dataclass
class WorldBounds:
    """Position of the bottom-left corner and dimensions of the level."""

    pos: Pos = field(default_factory=lambda: Pos(-20, -10))
    dimens: Pos = field(default_factory=lambda: Pos(40, 20))

    def x(self) -> int:
        """Inclusive lower bound."""
        return self.pos.x

    def y(self) -> int:
        """Inclusive lower bound."""
        return self.pos.y

    def width(self) -> int:
        return self.dimens.x

    def height(self) -> int:
        return self.dimens.y

    def upper_x(self) -> int:
        """Exclusive upper bound."""
        return self.pos.x + self.dimens.x

    def upper_y(self) -> int:
        """Exclusive upper bound."""
        return self.pos.y + self.dimens.y

    def clamp(self, pos: Pos) -> Pos:
        """The nearest position inside the world."""
        return Pos(
            min(max(pos.x, self.x()), self.upper_x() - 1),
            min(max(pos.y, self.y()), self.upper_y() - 1),
        )

    def encloses(self, pos: Pos, dimensions: Pos) -> bool:
        """True if the rectangle at ``pos`` lies wholly within the world."""
        return (
            self.x() <= pos.x
            and self.y() <= pos.y
            and self.upper_x() >= pos.x + dimensions.x
            and self.upper_y() >= pos.y + dimensions.y
        )

    def adjust_x(self, from_x: int, delta: int) -> None:
        """Move the horizontal border at ``from_x`` by ``delta``, if it is a border."""
        if from_x == self.x() and self.dimens.x - delta >= MIN_DIMENSION:
            self.pos = self.pos.append_x(delta)
            self.dimens = self.dimens.append_x(-delta)
        elif from_x == self.upper_x() - 1 and self.dimens.x + delta >= MIN_DIMENSION:
            self.dimens = self.dimens.append_x(delta)

    def adjust_y(self, from_y: int, delta: int) -> None:
        """Move the vertical border at ``from_y`` by ``delta``, if it is a border."""
        if from_y == self.y() and self.dimens.y - delta >= MIN_DIMENSION:
            self.pos = self.pos.append_y(delta)
            self.dimens = self.dimens.append_y(-delta)
        elif from_y == self.upper_y() - 1 and self.dimens.y + delta >= MIN_DIMENSION:
            self.dimens = self.dimens.append_y(delta)

    def to_dict(self) -> dict[str, dict[str, int]]:
        return {
            "pos": {"x": self.pos.x, "y": self.pos.y},
            "dimens": {"x": self.dimens.x, "y": self.dimens.y},
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> WorldBounds:
        try:
            pos, dimens = data["pos"], data["dimens"]
        except KeyError as err:
            raise ValueError(f"World bounds are missing field {err.args[0]!r}") from None
        return cls(_pos_from_dict(pos, "pos"), _pos_from_dict(dimens, "dimens"))