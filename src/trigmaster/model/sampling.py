"""
Path Sampling
=============
Converts continuous functions of the angle into discrete polylines for display.

All polylines are returned as a pair of float arrays `(x, y)`. A NaN in either
array marks a gap: renderers draw them with `connect="finite"`, so the line is
broken there instead of jumping across a tangent asymptote.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, TYPE_CHECKING

import numpy as np

from trigmaster.model.trig import TrigFunction, evaluate

if TYPE_CHECKING:
    import numpy.typing as npt

    Polyline = tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]

DEFAULT_STEP: float = 0.1
WAVE_MAX_THETA: float = 4.0 * math.pi

# Progress curve: tangent samples beyond this break the line
TRACE_TAN_CLIP: float = 3.0
# Ghost curve: tangent samples beyond this are dropped
GHOST_TAN_CLIP: float = 4.0
# Half-height of the wave graph in function units (200 px at 120 px per unit)
WAVE_VALUE_LIMIT: float = 200.0 / 120.0


def sample_times(start: float, stop: float, step: float = DEFAULT_STEP) -> npt.NDArray[np.float64]:
    """
    Sample grid `start, start + step, ...` up to and including `stop`.

    The grid is built from integer multiples of `step`, so it does not drift the
    way repeated `t += step` does.

    Raises:
        ValueError: If the step is not positive.
    """
    if not step > 0:
        raise ValueError(f"Sampling step must be positive, got {step}.")
    if stop < start:
        return np.empty(0, dtype=np.float64)

    n = int(math.floor((stop - start) / step + 1e-9)) + 1
    return start + np.arange(n, dtype=np.float64) * step


def _empty() -> Polyline:
    return np.empty(0, dtype=np.float64), np.empty(0, dtype=np.float64)


def trace_curve(
    func: TrigFunction,
    angle: float,
    max_theta: float = WAVE_MAX_THETA,
    step: float = DEFAULT_STEP,
    tan_clip: float = TRACE_TAN_CLIP,
) -> Polyline:
    """
    The curve drawn so far: y = f(t) for t from 0 up to the current angle.

    Args:
        func: Function to plot.
        angle: Current angle; the curve stops here (clamped to `max_theta`).
        max_theta: Right end of the graph.
        step: Sampling step in radians.
        tan_clip: Tangent samples with a larger magnitude become gaps.

    Returns:
        (t, y) arrays; empty when the angle is negative.
    """
    limit = min(angle, max_theta)
    if limit < 0:
        return _empty()

    t = sample_times(0.0, limit, step)
    y = np.asarray(evaluate(func, t), dtype=np.float64)
    if func == TrigFunction.TAN:
        y = np.where(np.abs(y) > tan_clip, np.nan, y)
    return t, y


def ghost_curve(
    func: TrigFunction,
    max_theta: float = WAVE_MAX_THETA,
    step: float = DEFAULT_STEP,
    tan_clip: float = GHOST_TAN_CLIP,
    value_clip: float = WAVE_VALUE_LIMIT,
) -> Polyline:
    """The faint full-range guide curve behind the progress curve."""
    t = sample_times(0.0, max_theta, step)
    y = np.asarray(evaluate(func, t), dtype=np.float64)
    mask = np.abs(y) > value_clip
    if func == TrigFunction.TAN:
        mask |= np.abs(y) > tan_clip
    return t, np.where(mask, np.nan, y)


def clamp_display_value(func: TrigFunction, value: float, limit: float = WAVE_VALUE_LIMIT) -> float:
    """Keep the tangent tip inside the graph; sin and cos never leave it."""
    if func == TrigFunction.TAN:
        return max(-limit, min(limit, value))
    return value


@dataclass(frozen=True)
class GraphFrame:
    """
    A scrolling time-history graph in canvas units (y down).

    The newest sample sits at the right edge (`tip_x`), older samples scroll to
    the left until they fall off at `x_start`.
    """
    x_start: float = 300.0
    width: float = 400.0
    center_y: float = 150.0
    window: float = 2.5 * math.pi
    top: float = 40.0
    bottom: float = 260.0

    @property
    def units_per_radian(self) -> float:
        return self.width / self.window

    @property
    def tip_x(self) -> float:
        return self.x_start + self.width

    def to_y(self, value: float | npt.NDArray[np.float64], scale: float) -> float | npt.NDArray[np.float64]:
        return self.center_y - value * scale

    def history_curve(
        self,
        func: Callable[[npt.NDArray[np.float64]], npt.NDArray[np.float64]],
        angle: float,
        scale: float,
        step: float = DEFAULT_STEP,
    ) -> Polyline:
        """
        Sample `func(angle - t)` for t in [0, window] into graph coordinates.

        Args:
            func: Vectorized function of the phase, e.g. `np.sin`.
            angle: Current angle (the phase at the right edge).
            scale: Canvas units per function unit.
            step: Sampling step in radians.
        """
        t = sample_times(0.0, self.window, step)
        x = self.tip_x - t * self.units_per_radian
        keep = x >= self.x_start
        t, x = t[keep], x[keep]
        y = self.to_y(np.asarray(func(angle - t), dtype=np.float64), scale)
        return x, y
