"""Recorded game history used for rewinding."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

from dsfpuzzle.movement import Pos


@dataclass(frozen=True)
class Frame:
    """One recorded change in game state."""

    player_position: Pos


@dataclass
class History:
    """A stack of frames; a new frame is forced at the start and after rewinding."""

    force_key_frame: bool = True
    _frame_stack: list[Frame] = field(default_factory=list, repr=False)

    def push_frame(self, frame: Frame) -> None:
        self._frame_stack.append(frame)

    def pop_frame(self) -> Frame | None:
        """Remove and return the newest frame, or None if there is none."""
        return self._frame_stack.pop() if self._frame_stack else None

    def __len__(self) -> int:
        return len(self._frame_stack)


class CurrentState(Enum):
    """Whether the game runs normally or is rewinding."""

    RUNNING = "Running"
    REWINDING = "Rewinding"


@dataclass
class Rewind:
    """Cooldown in seconds until the next frame may be popped."""

    cooldown: float = 0.0

    def is_ready(self) -> bool:
        return math.copysign(1.0, self.cooldown) < 0