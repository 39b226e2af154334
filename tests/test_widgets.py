"""Smoke tests for the widgets on the offscreen platform.

Tests:
    - main window builds both tabs
    - function selector visibility follows the tab
    - angle controls drive the store and follow it
    - wave graph badge and tip for an undefined tangent
    - dragging a demo scrubs time and pauses playback

Every widget is created through the `track` fixture, which destroys it at teardown.

Run:
    pytest tests/test_widgets.py -v
"""

import math

import pytest
from PySide6.QtCore import QEvent, QPoint, QPointF, Qt
from PySide6.QtGui import QMouseEvent

from trigmaster.app.ui.figures.demos.registry import create_demo
from trigmaster.app.ui.figures.wave_graph import WaveGraphView
from trigmaster.app.ui.main_window import MainWindow
from trigmaster.app.ui.panels.controls import AngleControls, PlaybackBar
from trigmaster.app.ui.panels.physics import PhysicsPanel
from trigmaster.config import WAVE_Y_EXTENT
from trigmaster.model.physics import GRAPH_FRAME, Quantity
from trigmaster.model.timeline import SLIDER_MAX
from trigmaster.model.trig import TrigFunction


def _mouse(kind, x, y, buttons=Qt.MouseButton.LeftButton):
    button = Qt.MouseButton.NoButton if kind == QEvent.Type.MouseMove else Qt.MouseButton.LeftButton
    pos = QPointF(x, y)
    return QMouseEvent(kind, pos, pos, button, buttons, Qt.KeyboardModifier.NoModifier)


def _view_x(view, x, y=150):
    """Data x under a widget pixel."""
    return view.getViewBox().mapSceneToView(view.mapToScene(QPoint(x, y))).x()


@pytest.fixture
def window(track):
    win = track(MainWindow())
    yield win
    win.store.set_playing(False)


@pytest.fixture
def demo(qapp, store, track):
    view = track(create_demo("spring", store))
    view.resize(750, 300)
    view.show()
    qapp.processEvents()
    return view


def test_main_window_tabs(window):
    assert window.tabs.count() == 2
    assert window.tabs.tabText(0) == "Trig Visualization"
    assert window.tabs.tabText(1) == "Physics Lab"
    assert window.current_tab() == "visualization"


def test_function_selector_only_on_visualization_tab(window):
    window.show()
    assert all(b.isVisible() for b in window.function_buttons.values())

    window.tabs.setCurrentIndex(1)
    assert window.stack.currentIndex() == 1
    assert not any(b.isVisible() for b in window.function_buttons.values())


def test_start_tab(track):
    win = track(MainWindow(start_tab="physics"))
    assert win.current_tab() == "physics"
    assert win.stack.currentIndex() == 1


def test_unknown_start_tab(qapp):
    with pytest.raises(ValueError, match="Unknown tab"):
        MainWindow(start_tab="chemistry")


def test_function_buttons_select(window):
    window.function_buttons[TrigFunction.TAN].click()
    assert window.store.function == TrigFunction.TAN
    panel = window.panels["visualization"]
    assert panel.card_title.text() == "Tangent (tan)"


def test_visualization_texts_follow_angle(window):
    window.store.set_angle(math.pi / 6)
    panel = window.panels["visualization"]
    assert panel.value_label.text() == "sin(θ) = 1/2"
    assert panel.wave_graph._texts["readout"].toPlainText() == "θ = 30.0° (0.52 rad)"


# -------------------------------------------------------------------------------
# Wave graph
# -------------------------------------------------------------------------------

def test_wave_graph_tangent_at_quarter_turn(store, track):
    """tan(π/2) shows as undefined and its tip is pinned to the top of the graph."""
    view = track(WaveGraphView(store))
    store.select_function(TrigFunction.TAN)
    store.set_angle(math.pi / 2)

    assert view._texts["badge"].toPlainText() == "∞ (undefined)"
    _, ys = view._scatters["tip"].getData()
    assert ys[0] == pytest.approx(WAVE_Y_EXTENT)


# -------------------------------------------------------------------------------
# Controls
# -------------------------------------------------------------------------------

def test_slider_scrubs(store, track):
    controls = track(AngleControls(store))
    store.set_playing(True)
    controls.slider.setValue(100)
    assert store.angle == pytest.approx(1.0)
    assert not store.playing


def test_slider_end_stays_below_four_pi(store, track):
    """The last slider step is the largest step under 4π, so it never wraps to 0."""
    controls = track(AngleControls(store))
    assert controls.slider.maximum() == 1256

    controls.slider.setValue(controls.slider.maximum())
    assert store.angle <= SLIDER_MAX
    assert store.angle == pytest.approx(12.56)
    assert controls.slider.value() == controls.slider.maximum()


def test_slider_follows_store(store, track):
    controls = track(AngleControls(store))
    store.set_angle(4 * math.pi + 0.5)
    assert controls.slider.value() == 50
    assert controls.degree_input.text() == str(round(math.degrees(0.5)))


def test_degree_input_ignores_garbage(store, track):
    controls = track(AngleControls(store))
    controls.degree_input.textEdited.emit("45")
    assert store.angle == pytest.approx(math.pi / 4)
    controls.degree_input.textEdited.emit("4x")
    assert store.angle == pytest.approx(math.pi / 4)


def test_degree_input_kept_while_typing(store, track, monkeypatch):
    """A focused field keeps the user's text; it is normalized once editing finishes."""
    controls = track(AngleControls(store))
    monkeypatch.setattr(controls.degree_input, "hasFocus", lambda: True)

    controls.degree_input.setText("30.")
    controls.degree_input.textEdited.emit("30.")
    assert store.angle == pytest.approx(math.pi / 6)
    assert controls.degree_input.text() == "30."

    controls.degree_input.editingFinished.emit()
    assert controls.degree_input.text() == "30"


def test_playback_bar(store, track):
    bar = track(PlaybackBar(store))
    bar.play_button.click()
    assert store.playing
    assert "Pause" in bar.play_button.text()

    bar.speed_buttons[2.0].click()
    assert store.speed == 2.0

    bar.reset_button.click()
    assert not store.playing
    assert store.angle == 0.0


def test_physics_toggles(store, track):
    panel = track(PhysicsPanel(store))
    assert list(panel.demos) == ["spring", "circular", "pendulum"]
    assert not panel.toggle_buttons[Quantity.VELOCITY].isChecked()

    panel.toggle_buttons[Quantity.VELOCITY].click()
    assert store.toggles.velocity
    assert "velocity" in panel.demos["circular"].figure.arrows


# -------------------------------------------------------------------------------
# Drag to scrub
# -------------------------------------------------------------------------------

def test_drag_on_demo_scrubs_time(demo, store):
    store.set_playing(True)

    demo.mousePressEvent(_mouse(QEvent.Type.MouseButtonPress, 100, 150))
    assert not store.playing

    demo.mouseMoveEvent(_mouse(QEvent.Type.MouseMove, 300, 150))
    assert store.angle > 0.0

    demo.mouseReleaseEvent(_mouse(QEvent.Type.MouseButtonRelease, 300, 150, Qt.MouseButton.NoButton))
    assert not demo._drag.active


def test_drag_moves_one_radian_per_graph_unit(demo, store):
    """Dragging by `units_per_radian` canvas units adds one radian."""
    demo.mousePressEvent(_mouse(QEvent.Type.MouseButtonPress, 100, 150))
    demo.mouseMoveEvent(_mouse(QEvent.Type.MouseMove, 300, 150))

    expected = (_view_x(demo, 300) - _view_x(demo, 100)) / GRAPH_FRAME.units_per_radian
    assert expected > 0.0
    assert store.angle == pytest.approx(expected)


def test_leaving_view_ends_drag(demo, store):
    demo.mousePressEvent(_mouse(QEvent.Type.MouseButtonPress, 100, 150))
    assert demo._drag.active

    demo.leaveEvent(QEvent(QEvent.Type.Leave))
    assert not demo._drag.active

    demo.mouseMoveEvent(_mouse(QEvent.Type.MouseMove, 300, 150, Qt.MouseButton.NoButton))
    assert store.angle == 0.0
