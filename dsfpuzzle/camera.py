"""The camera frame that carries the camera and its panning state."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CameraFrame:
    """Rough camera position; the camera itself is a child with an offset.

    ``pan`` is the current offset from the default position, ``max_pan`` the
    furthest the player may pan in meters, and the speeds are in meters per
    second. Recovery after letting go is faster than panning itself.
    """

    pan: tuple[float, float] = (0.0, 0.0)
    max_pan: float = 5.0
    panning_speed: float = 10.0
    panning_recovery_speed: float = 40.0