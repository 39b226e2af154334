from __future__ import annotations

import math

import numpy as np
from PySide6.QtWidgets import QWidget

from trigmaster.app.state import Store
from trigmaster.app.ui.figures.base import FigureBase
from trigmaster.config import WAVE_Y_EXTENT
from trigmaster.model.sampling import WAVE_MAX_THETA, clamp_display_value, ghost_curve, trace_curve
from trigmaster.model.trig import (
    TRIG_CONFIGS, degree_label, evaluate, format_angle_readout, format_trig_value, radian_label,
)

AXIS_COLOR = "#cbd5e1"
MINOR_TICK_COLOR = "#e2e8f0"
GHOST_COLOR = "#e2e8f0"
MAJOR_LABEL_COLOR = "#475569"
MINOR_LABEL_COLOR = "#94a3b8"

# Where the value badge sits, left of the y axis (radians)
BADGE_X: float = -0.9


class WaveGraphView(FigureBase):
    """
    y = f(θ) drawn from 0 up to the current angle, over a faint full-range
    guide. The tip is projected back to a value badge left of the y axis.
    """
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)
        self.setMinimumSize(400, 320)
        self.set_view((-1.5, WAVE_MAX_THETA + 0.5), (-WAVE_Y_EXTENT, WAVE_Y_EXTENT))

        self._draw_axes()

        self.store.angle_changed.connect(self._on_state_changed)
        self.store.function_changed.connect(self._on_state_changed)
        self.refresh()

    def _draw_axes(self) -> None:
        e = WAVE_Y_EXTENT
        self.add_static_line([0.0, WAVE_MAX_THETA + 0.35], [0.0, 0.0], AXIS_COLOR, 1.5)
        self.add_static_line([0.0, 0.0], [-e, e], AXIS_COLOR, 1.5)
        self.add_static_text("θ", (WAVE_MAX_THETA + 0.4, 0.08), anchor=(0.0, 1.0))
        self.add_static_text("y", (0.1, e - 0.05), anchor=(0.0, 0.0))

        for v in (1.0, 0.5, -0.5, -1.0):
            self.add_static_line([-0.12, 0.0], [v, v], AXIS_COLOR, 1.5)
            self.add_static_text(f"{v:g}", (-0.15, v), anchor=(1.0, 0.5))

        for multiplier in np.arange(0.5, 4.01, 0.5):
            x = multiplier * math.pi
            major = float(multiplier).is_integer()
            self.add_static_line(
                [x, x], [-0.04, 0.04], AXIS_COLOR if major else MINOR_TICK_COLOR, 1.5 if major else 1.0
            )
            self.add_static_text(
                degree_label(multiplier), (x, -0.08), color=MAJOR_LABEL_COLOR if major else MINOR_LABEL_COLOR,
                anchor=(0.5, 0.0),
            )
            self.add_static_text(radian_label(multiplier), (x, -0.22), color=MINOR_LABEL_COLOR, anchor=(0.5, 0.0))

    def refresh(self) -> None:
        func = self.store.function
        angle = self.store.angle
        color = TRIG_CONFIGS[func].color

        gx, gy = ghost_curve(func)
        self.set_curve("ghost", gx, gy, GHOST_COLOR, width=2.0, z=-1.0)

        tx, ty = trace_curve(func, angle)
        self.set_curve("trace", tx, ty, color, width=3.0)

        value = evaluate(func, angle)
        tip_y = clamp_display_value(func, value)
        tip_x = min(angle, WAVE_MAX_THETA)

        self.set_curve(
            "connector", np.array([BADGE_X, tip_x]), np.array([tip_y, tip_y]), color, width=1.5, style="dash",
            opacity=0.5,
        )
        self.set_marker("tip", (tip_x, tip_y), 11, color, outline="white", outline_width=2.0)
        self.set_text("badge", format_trig_value(value), (BADGE_X, tip_y), anchor=(1.0, 0.5), fill=color)
        self.set_text(
            "readout", format_angle_readout(angle), (WAVE_MAX_THETA + 0.4, WAVE_Y_EXTENT - 0.05), color=MAJOR_LABEL_COLOR,
            anchor=(1.0, 0.0),
        )
