"""Transient per-user values that make the game nicer to come back to."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from dsfpuzzle.movement import Pos

_log = logging.getLogger(__name__)


@dataclass
class UserCache:
    """Last cursor position for every adventure, by adventure file name.

    If ``path`` is set, every change is written to that file.
    """

    adventure_map_pos: dict[str, Pos] = field(default_factory=dict)
    path: Optional[Path] = field(default=None, compare=False)

    def save_adventure_map_pos(self, adventure_file_name: str, pos: Pos) -> None:
        """Remember the cursor position and write the cache; failures are logged."""
        self.adventure_map_pos[adventure_file_name] = pos
        if self.path is None:
            return
        try:
            self._write(self.path)
        except OSError as err:
            _log.error("Failed to save %r because error: %s", self, err)

    def get_initial_cursor_pos(self, adventure_file_name: str) -> Pos:
        """Last known cursor position, or the origin."""
        return self.adventure_map_pos.get(adventure_file_name, Pos())

    @classmethod
    def load(cls, path: Union[str, "PathLike[str]"]) -> UserCache:
        """Read the cache bound to ``path``; a missing file gives an empty cache."""
        path = Path(path)
        if not path.exists():
            return cls(path=path)
        with path.open(encoding="utf-8") as file:
            data = json.load(file)
        return cls(adventure_map_pos=_parse_positions(data), path=path)

    def _write(self, path: Path) -> None:
        data = {
            "adventure_map_pos": {
                name: {"x": pos.x, "y": pos.y}
                for name, pos in sorted(self.adventure_map_pos.items())
            }
        }
        with path.open("w", encoding="utf-8") as file:
            json.dump(data, file, indent=2)
            file.write("\n")


def _parse_positions(data: Any) -> dict[str, Pos]:
    if not isinstance(data, Mapping) or set(data) - {"adventure_map_pos"}:
        raise ValueError("The user cache must be a mapping with adventure_map_pos.")
    entries = data.get("adventure_map_pos", {})
    if not isinstance(entries, Mapping):
        raise ValueError("adventure_map_pos must be a mapping.")
    positions = {}
    for name, pos in entries.items():
        if not isinstance(pos, Mapping) or set(pos) != {"x", "y"}:
            raise ValueError(f"Position for {name!r} must have exactly x and y.")
        if any(isinstance(v, bool) or not isinstance(v, int) for v in pos.values()):
            raise ValueError(f"Position for {name!r} must have integer coordinates.")
        positions[str(name)] = Pos(pos["x"], pos["y"])
    return positions