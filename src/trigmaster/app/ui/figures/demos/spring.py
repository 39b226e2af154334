from __future__ import annotations

from trigmaster.app.ui.figures.demos.base import DemoView
from trigmaster.app.ui.figures.demos.registry import register_demo
from trigmaster.model.physics import DemoFigure, DisplayToggles, spring_mass


@register_demo
class SpringMassDemo(DemoView):
    KEY = "spring"
    ORDER = 1

    def build_figure(self, angle: float, toggles: DisplayToggles) -> DemoFigure:
        return spring_mass(angle, toggles)
