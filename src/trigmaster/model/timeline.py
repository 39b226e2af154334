"""
Time Parameter
==============
Helpers for the single scalar that drives every diagram: the angle θ (radians),
which doubles as the time variable of the physics demos.
"""
from __future__ import annotations

import math

SPEED_CHOICES: tuple[float, ...] = (0.5, 1.0, 2.0)
DEFAULT_SPEED: float = 1.0

# Radians per millisecond at speed 1 (i.e. 1 rad/s)
RADIANS_PER_MS: float = 0.001

# Past this the angle is folded back into one turn to keep float precision
WRAP_LIMIT: float = 100.0 * math.pi

SLIDER_MAX: float = 4.0 * math.pi
SLIDER_STEP: float = 0.01


def advance_angle(angle: float, dt_ms: float, speed: float) -> float:
    """
    Advance the angle by the elapsed wall-clock time.

    Args:
        angle: Current angle in radians.
        dt_ms: Elapsed time in milliseconds.
        speed: Playback speed multiplier.

    Returns:
        The new angle. Once it grows past 100π it is reduced modulo 2π.
    """
    new_angle = angle + dt_ms * RADIANS_PER_MS * speed
    if new_angle > WRAP_LIMIT:
        new_angle = math.fmod(new_angle, 2.0 * math.pi)
    return new_angle


def slider_position(angle: float) -> float:
    """Position of the angle on the [0, 4π) slider."""
    return angle % SLIDER_MAX


class DragGesture:
    """
    Converts a horizontal pointer drag into an angle offset.

    Dragging to the right by `units_per_radian` (in whatever units the caller
    measures `x`) adds exactly one radian to the angle the drag started from.
    """
    def __init__(self, units_per_radian: float) -> None:
        if not units_per_radian > 0:
            raise ValueError(f"units_per_radian must be positive, got {units_per_radian}.")
        self.units_per_radian = units_per_radian
        self._start_x: float | None = None
        self._start_angle: float = 0.0

    @property
    def active(self) -> bool:
        return self._start_x is not None

    def begin(self, x: float, angle: float) -> None:
        self._start_x = x
        self._start_angle = angle

    def update(self, x: float) -> float | None:
        """Return the angle for pointer position `x`, or None if no drag is in progress."""
        if self._start_x is None:
            return None
        return self._start_angle + (x - self._start_x) / self.units_per_radian

    def end(self) -> None:
        self._start_x = None
