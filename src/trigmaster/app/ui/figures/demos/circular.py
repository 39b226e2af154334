from __future__ import annotations

from trigmaster.app.ui.figures.demos.base import DemoView
from trigmaster.app.ui.figures.demos.registry import register_demo
from trigmaster.model.physics import DemoFigure, DisplayToggles, circular_motion


@register_demo
class CircularMotionDemo(DemoView):
    KEY = "circular"
    ORDER = 2

    def build_figure(self, angle: float, toggles: DisplayToggles) -> DemoFigure:
        return circular_motion(angle, toggles)
