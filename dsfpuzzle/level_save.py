"""The stored form of a level: its borders and a map of tiles."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from os import PathLike
from typing import Any, Mapping, Union

from dsfpuzzle.movement import Pos
from dsfpuzzle.world_bounds import WorldBounds

PathArg = Union[str, "PathLike[str]"]


def _parse_pos(data: Any) -> Pos:
    if not isinstance(data, Mapping) or set(data) != {"x", "y"}:
        raise ValueError("A position must be a mapping with exactly x and y.")
    x, y = data["x"], data["y"]
    if any(isinstance(v, bool) or not isinstance(v, int) for v in (x, y)):
        raise ValueError(f"Position coordinates must be integers, not {x!r}, {y!r}")
    return Pos(x, y)


@dataclass
class LevelSave:
    """A complete level: world bounds and tile definition keys by position."""

    world_bounds: WorldBounds = field(default_factory=WorldBounds)
    tiles: dict[Pos, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Serialisable form; tiles are ordered by position for stable output."""
        return {
            "world_bounds": self.world_bounds.to_dict(),
            "tiles": [
                {"pos": {"x": pos.x, "y": pos.y}, "key": key}
                for pos, key in sorted(self.tiles.items())
            ],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LevelSave:
        """Parse a level; missing fields take their defaults."""
        if not isinstance(data, Mapping):
            raise ValueError("A level must be a mapping.")
        unknown = set(data) - {"world_bounds", "tiles"}
        if unknown:
            raise ValueError(f"Unknown fields in level: {sorted(unknown)}")
        level = cls()
        if "world_bounds" in data:
            level.world_bounds = WorldBounds.from_dict(data["world_bounds"])
        entries = data.get("tiles", [])
        if not isinstance(entries, list):
            raise ValueError("tiles must be a list.")
        for entry in entries:
            if not isinstance(entry, Mapping) or set(entry) != {"pos", "key"}:
                raise ValueError("Each tile must be a mapping with exactly pos and key.")
            if not isinstance(entry["key"], str):
                raise ValueError(f"Tile key must be a string, not {entry['key']!r}")
            level.tiles[_parse_pos(entry["pos"])] = entry["key"]
        return level

    @classmethod
    def load(cls, path: PathArg) -> LevelSave:
        """Read a level from a JSON file."""
        with open(path, encoding="utf-8") as file:
            return cls.from_dict(json.load(file))

    def write(self, path: PathArg) -> None:
        """Write the level to a JSON file."""
        with open(path, "w", encoding="utf-8") as file:
            json.dump(self.to_dict(), file, indent=2)
            file.write("\n")