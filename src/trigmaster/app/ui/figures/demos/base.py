from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget

from trigmaster.app.state import Store
from trigmaster.app.ui.figures.base import FigureBase
from trigmaster.model.physics import CANVAS_HEIGHT, CANVAS_WIDTH, GRAPH_FRAME, DemoFigure, DisplayToggles
from trigmaster.model.timeline import DragGesture

logger = logging.getLogger(__name__)


class DemoView(FigureBase):
    """
    Base class for the physics demos: a mechanism on the left and its
    time-history graph on the right, both in canvas units (y down).

    Dragging horizontally anywhere on the view scrubs the shared angle: one
    graph-width of drag moves time by the graph's whole window.
    """
    KEY: str = "base"  # Override in subclass
    ORDER: int = 0

    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)
        self.invertY(True)
        self.setAspectLocked(True)
        self.setMinimumHeight(260)
        self.set_view((0.0, CANVAS_WIDTH), (0.0, CANVAS_HEIGHT))
        self.setCursor(Qt.CursorShape.SizeHorCursor)

        self._drag = DragGesture(GRAPH_FRAME.units_per_radian)
        self.figure: DemoFigure = self.build_figure(self.store.angle, self.store.toggles)

        self.store.angle_changed.connect(self._on_state_changed)
        self.store.toggles_changed.connect(self._on_state_changed)
        self.refresh()

    # ---- abstract API for subclasses ----

    def build_figure(self, angle: float, toggles: DisplayToggles) -> DemoFigure:
        """Return the declarative figure for the given state."""
        raise NotImplementedError("`build_figure` must be implemented in subclass.")

    # ---- rendering ----

    def refresh(self) -> None:
        self.figure = self.build_figure(self.store.angle, self.store.toggles)
        drawn: set[str] = set()

        for name, stroke in self.figure.strokes.items():
            key = f"stroke:{name}"
            self.set_curve(key, stroke.x, stroke.y, stroke.color, stroke.width, stroke.style, stroke.opacity)
            drawn.add(key)

        for name, arrow in self.figure.arrows.items():
            key = f"arrow:{name}"
            x, y = arrow.polyline()
            self.set_curve(key, x, y, arrow.color, width=2.0, z=5.0)
            drawn.add(key)

        for name, marker in self.figure.markers.items():
            key = f"marker:{name}"
            self.set_marker(
                key, marker.pos, 2.0 * marker.radius, marker.fill, marker.outline, marker.outline_width,
                px_mode=False,
            )
            drawn.add(key)

        for i, label in enumerate(self.figure.labels):
            key = f"label:{i}"
            self.set_text(key, label.text, label.pos, color=label.color)
            drawn.add(key)

        self.hide_items_except(drawn)

    # ---- drag to scrub time ----

    def _scene_x(self, event) -> float:
        scene_pos = self.mapToScene(event.position().toPoint())
        return self.getViewBox().mapSceneToView(scene_pos).x()

    def mousePressEvent(self, event) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        self.store.begin_drag()
        self._drag.begin(self._scene_x(event), self.store.angle)
        event.accept()

    def mouseMoveEvent(self, event) -> None:
        if not self._drag.active:
            super().mouseMoveEvent(event)
            return
        angle = self._drag.update(self._scene_x(event))
        if angle is not None:
            self.store.scrub_to(angle)
        event.accept()

    def mouseReleaseEvent(self, event) -> None:
        if self._drag.active:
            self._end_drag()
            event.accept()
            return
        super().mouseReleaseEvent(event)

    def leaveEvent(self, event) -> None:
        if self._drag.active:
            self._end_drag()
        super().leaveEvent(event)

    def _end_drag(self) -> None:
        self._drag.end()
        logger.debug(f"Drag ended at θ={self.store.angle:.3f}")
