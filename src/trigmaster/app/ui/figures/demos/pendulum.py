from __future__ import annotations

from trigmaster.app.ui.figures.demos.base import DemoView
from trigmaster.app.ui.figures.demos.registry import register_demo
from trigmaster.model.physics import DemoFigure, DisplayToggles, pendulum


@register_demo
class PendulumDemo(DemoView):
    KEY = "pendulum"
    ORDER = 3

    def build_figure(self, angle: float, toggles: DisplayToggles) -> DemoFigure:
        return pendulum(angle, toggles)
