"""Detection of rising and falling edges of input signals."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class SignalEdge(Enum):
    """How a signal changed since it was last checked."""

    STILL_LOW = "StillLow"
    STILL_HIGH = "StillHigh"
    RISING = "Rising"
    FALLING = "Falling"


@dataclass
class SignalEdgeDetector:
    """Remembers each action's last signal to tell presses from releases."""

    _signals: dict[str, bool] = field(default_factory=dict)

    def edge(self, action_key: str, is_down: bool) -> SignalEdge:
        """Record the current signal of ``action_key``; call at most once a frame."""
        old = self._signals.get(action_key, False)
        current = bool(is_down)
        self._signals[action_key] = current
        if old and not current:
            return SignalEdge.FALLING
        if current and not old:
            return SignalEdge.RISING
        return SignalEdge.STILL_HIGH if old else SignalEdge.STILL_LOW