from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

import numpy as np
import pyqtgraph as pg
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget

from trigmaster.app.state import Store

if TYPE_CHECKING:
    import numpy.typing as npt

PEN_STYLES = {
    "solid": Qt.PenStyle.SolidLine,
    "dash": Qt.PenStyle.DashLine,
    "dot": Qt.PenStyle.DotLine,
}


def make_pen(color: str, width: float = 1.0, style: str = "solid", opacity: float = 1.0):
    """pg.mkPen with opacity and a named dash style."""
    qcolor = pg.mkColor(color)
    qcolor.setAlphaF(opacity)
    pen = pg.mkPen(qcolor, width=width)
    pen.setStyle(PEN_STYLES[style])
    return pen


class FigureBase(pg.PlotWidget):
    """
    Base class for the diagrams. Holds a reference to the global store.

    A figure is static apart from a set of keyed items (curves, scatter markers,
    text) that subclasses update in `refresh()`. Items are created on first use
    and reused afterwards; `setData` is fast and flicker-free.
    """
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent=parent, background="w")
        self.store = store

        self.setMouseEnabled(x=False, y=False)
        self.setMenuEnabled(False)
        self.hideButtons()
        self.hideAxis("left")
        self.hideAxis("bottom")
        self.getViewBox().setDefaultPadding(0.0)

        self._curves: dict[str, pg.PlotDataItem] = {}
        self._scatters: dict[str, pg.ScatterPlotItem] = {}
        self._texts: dict[str, pg.TextItem] = {}

    # ---- abstract API for subclasses ----

    def refresh(self) -> None:
        """Redraw the dynamic items from the current store state."""
        raise NotImplementedError("`refresh` must be implemented in subclass.")

    def _on_state_changed(self, *_) -> None:
        # bound method, so Qt drops the connection when the view is destroyed
        self.refresh()

    # ---- utilities ----

    def set_view(self, x_range: tuple[float, float], y_range: tuple[float, float]) -> None:
        self.setXRange(*x_range, padding=0.0)
        self.setYRange(*y_range, padding=0.0)

    def add_static_line(
        self,
        x: Iterable[float],
        y: Iterable[float],
        color: str,
        width: float = 1.0,
        style: str = "solid",
        opacity: float = 1.0,
    ) -> pg.PlotDataItem:
        item = pg.PlotDataItem(
            np.asarray(list(x), dtype=np.float64),
            np.asarray(list(y), dtype=np.float64),
            pen=make_pen(color, width, style, opacity),
            connect="finite",
        )
        item.setZValue(-10)
        self.addItem(item)
        return item

    def add_static_text(self, text: str, pos: tuple[float, float], color: str = "#94a3b8",
                        anchor: tuple[float, float] = (0.5, 0.5)) -> pg.TextItem:
        item = pg.TextItem(text, color=color, anchor=anchor)
        item.setPos(*pos)
        self.addItem(item)
        return item

    def set_curve(
        self,
        key: str,
        x: npt.NDArray[np.float64],
        y: npt.NDArray[np.float64],
        color: str,
        width: float = 2.0,
        style: str = "solid",
        opacity: float = 1.0,
        z: float = 0.0,
    ) -> pg.PlotDataItem:
        item = self._curves.get(key)
        if item is None:
            item = pg.PlotDataItem(connect="finite")
            self._curves[key] = item
            self.addItem(item)
        item.setZValue(z)
        item.setPen(make_pen(color, width, style, opacity))
        item.setData(np.asarray(x, dtype=np.float64), np.asarray(y, dtype=np.float64), connect="finite")
        item.setVisible(True)
        return item

    def set_marker(
        self,
        key: str,
        pos: tuple[float, float],
        size: float,
        fill: str,
        outline: str | None = None,
        outline_width: float = 0.0,
        px_mode: bool = True,
        z: float = 10.0,
    ) -> pg.ScatterPlotItem:
        """Round marker at `pos`; `size` is a diameter in pixels, or in data units if not `px_mode`."""
        item = self._scatters.get(key)
        if item is None:
            item = pg.ScatterPlotItem(pxMode=px_mode)
            self._scatters[key] = item
            self.addItem(item)
        item.setZValue(z)
        pen = pg.mkPen(outline, width=outline_width) if outline else pg.mkPen(None)
        item.setData([pos[0]], [pos[1]], size=size, brush=pg.mkBrush(fill), pen=pen, symbol="o")
        item.setVisible(True)
        return item

    def set_text(
        self,
        key: str,
        text: str,
        pos: tuple[float, float],
        color: str = "#4338ca",
        anchor: tuple[float, float] = (0.5, 0.5),
        fill: str | None = None,
    ) -> pg.TextItem:
        item = self._texts.get(key)
        if item is None:
            item = pg.TextItem(anchor=anchor)
            self._texts[key] = item
            self.addItem(item)
        item.setAnchor(pg.Point(*anchor))
        item.setColor(pg.mkColor("white" if fill else color))
        item.fill = pg.mkBrush(fill) if fill else pg.mkBrush(None)
        item.setText(text)
        item.setPos(*pos)
        item.setZValue(20)
        item.setVisible(True)
        return item

    def hide_items_except(self, keep: set[str]) -> None:
        """Hide keyed items not drawn in this frame (they are kept for reuse)."""
        for items in (self._curves, self._scatters, self._texts):
            for key, item in items.items():
                if key not in keep:
                    item.setVisible(False)
