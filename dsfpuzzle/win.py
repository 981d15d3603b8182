"""Tracking of the keys that must be collected to win a level."""

from __future__ import annotations

from dataclasses import dataclass, field

from dsfpuzzle.movement import Pos


@dataclass
class WinCondition:
    """Keys left in the level and whether the open exit door was reached."""

    keys: set[Pos] = field(default_factory=set)
    reached_open_door: bool = False

    def add_key(self, pos: Pos) -> None:
        """Register a key; only used while loading a level."""
        self.keys.add(pos)

    def nr_keys_left(self) -> int:
        return len(self.keys)

    def set_key_collected(self, pos: Pos) -> None:
        self.keys.discard(pos)

    def all_keys_collected(self) -> bool:
        """True once every key is collected and the door is open."""
        return not self.keys