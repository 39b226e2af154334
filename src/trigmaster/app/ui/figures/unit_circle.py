from __future__ import annotations

import numpy as np
from PySide6.QtWidgets import QWidget

from trigmaster.app.state import Store
from trigmaster.app.ui.figures.base import FigureBase
from trigmaster.config import UNIT_CIRCLE_EXTENT
from trigmaster.model.trig import TRIG_CONFIGS
from trigmaster.model.unit_circle import unit_circle_figure

AXIS_COLOR = "#cbd5e1"
CIRCLE_COLOR = "#94a3b8"
RADIUS_COLOR = "#334155"
ARC_COLOR = "#6366f1"
LABEL_COLOR = "#4338ca"

# (color, width, style, opacity) per highlight role; a None color means the function color
ROLE_STYLES: dict[str, tuple[str | None, float, str, float]] = {
    "value": (None, 3.0, "solid", 1.0),
    "projection": (None, 1.5, "dash", 0.5),
    "guide": (CIRCLE_COLOR, 1.5, "dash", 1.0),
    "axis": (AXIS_COLOR, 1.5, "dash", 1.0),
}


class UnitCircleView(FigureBase):
    """
    The unit circle with the radius at θ and the selected function drawn as a
    line segment (sin: vertical leg, cos: horizontal leg, tan: tangent segment).
    """
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)
        self.setAspectLocked(True)
        self.setMinimumSize(320, 320)
        e = UNIT_CIRCLE_EXTENT
        self.set_view((-e, e), (-e, e))

        self._draw_static()

        self.store.angle_changed.connect(self._on_state_changed)
        self.store.function_changed.connect(self._on_state_changed)
        self.refresh()

    def _draw_static(self) -> None:
        reach = 190.0 / 120.0
        self.add_static_line([-reach, reach], [0.0, 0.0], AXIS_COLOR, 1.5)
        self.add_static_line([0.0, 0.0], [-reach, reach], AXIS_COLOR, 1.5)
        self.add_static_text("x", (reach + 0.05, 0.0), anchor=(0.0, 0.5))
        self.add_static_text("y", (0.0, reach + 0.05), anchor=(0.5, 1.0))

        tick = 0.035
        for v in (1.0, -1.0):
            self.add_static_line([v, v], [-tick, tick], AXIS_COLOR, 1.5)
            self.add_static_text(f"{v:g}", (v, -0.15))
            self.add_static_line([-tick, tick], [v, v], AXIS_COLOR, 1.5)
            self.add_static_text(f"{v:g}", (0.1, v), anchor=(0.0, 0.5))

        phi = np.linspace(0.0, 2.0 * np.pi, 241)
        self.add_static_line(np.cos(phi), np.sin(phi), CIRCLE_COLOR, 2.0)

    def refresh(self) -> None:
        figure = unit_circle_figure(self.store.angle, self.store.function)
        color = TRIG_CONFIGS[figure.func].color
        drawn: set[str] = set()

        self.set_curve("arc", figure.arc[:, 0], figure.arc[:, 1], ARC_COLOR, width=1.5)
        self.set_text("theta", "θ", (0.125, 0.125), color=ARC_COLOR)
        px, py = figure.point
        self.set_curve("radius", np.array([0.0, px]), np.array([0.0, py]), RADIUS_COLOR, width=2.0)
        drawn |= {"arc", "theta", "radius"}

        for i, seg in enumerate(figure.highlights):
            role_color, width, style, opacity = ROLE_STYLES[seg.role]
            key = f"highlight-{i}"
            self.set_curve(
                key,
                np.array([seg.start[0], seg.end[0]]),
                np.array([seg.start[1], seg.end[1]]),
                role_color or color,
                width=width,
                style=style,
                opacity=opacity,
                z=1.0 if seg.role == "value" else 0.5,
            )
            drawn.add(key)

        for i, pos in enumerate(figure.markers):
            key = f"marker-{i}"
            self.set_marker(key, pos, 9, color)
            drawn.add(key)

        self.set_marker("point", figure.point, 10, "#1e293b", outline="white", outline_width=1.5, z=11.0)
        drawn.add("point")

        for i, label in enumerate(figure.labels):
            key = f"label-{i}"
            self.set_text(key, label.text, label.pos, color=LABEL_COLOR)
            drawn.add(key)

        self.hide_items_except(drawn)
