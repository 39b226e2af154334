"""Test the central store.

Tests for trigmaster.app.state.Store:
    - signals fire only on change
    - direct manipulation pauses playback
    - invalid input is rejected or ignored
    - advancing while paused does nothing

Run:
    pytest tests/test_state.py -v
"""

import math

import pytest

from trigmaster.model.physics import DisplayToggles, Quantity
from trigmaster.model.trig import TrigFunction


class Recorder:
    """Collects signal payloads."""

    def __init__(self, signal):
        self.values = []
        signal.connect(self.values.append)


def test_initial_state(store):
    assert store.angle == 0.0
    assert not store.playing
    assert store.speed == 1.0
    assert store.function == TrigFunction.SIN
    assert store.toggles == DisplayToggles()


def test_set_angle_emits_once_per_change(store):
    rec = Recorder(store.angle_changed)
    store.set_angle(1.0)
    store.set_angle(1.0)
    store.set_angle(2.0)
    assert rec.values == [1.0, 2.0]


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_set_angle_rejects_non_finite(store, bad):
    with pytest.raises(ValueError, match="finite"):
        store.set_angle(bad)
    assert store.angle == 0.0


def test_scrub_pauses_playback(store):
    store.set_playing(True)
    store.scrub_to(1.5)
    assert not store.playing
    assert store.angle == 1.5


def test_degrees_text(store):
    assert store.set_degrees_text("90")
    assert store.angle == pytest.approx(math.pi / 2)

    assert not store.set_degrees_text("abc")
    assert store.angle == pytest.approx(math.pi / 2)


def test_advance_only_while_playing(store):
    store.advance(1000.0)
    assert store.angle == 0.0

    store.set_playing(True)
    store.advance(1000.0)
    assert store.angle == pytest.approx(1.0)


def test_advance_uses_speed(store):
    store.set_speed(2.0)
    store.set_playing(True)
    store.advance(500.0)
    assert store.angle == pytest.approx(1.0)


def test_begin_drag_pauses(store):
    store.set_playing(True)
    store.begin_drag()
    assert not store.playing


def test_toggle_playing_emits(store):
    rec = Recorder(store.playing_changed)
    store.toggle_playing()
    store.toggle_playing()
    assert rec.values == [True, False]


def test_reset(store):
    store.set_angle(3.0)
    store.set_playing(True)
    store.reset()
    assert store.angle == 0.0
    assert not store.playing


def test_set_speed_rejects_unknown(store):
    with pytest.raises(ValueError, match="Speed must be one of"):
        store.set_speed(3.0)
    assert store.speed == 1.0


def test_select_function(store):
    rec = Recorder(store.function_changed)
    store.select_function("COS")
    store.select_function(TrigFunction.COS)
    assert rec.values == [TrigFunction.COS]
    assert store.function == TrigFunction.COS


def test_select_function_rejects_unknown(store):
    with pytest.raises(ValueError, match="Unknown trigonometric function"):
        store.select_function("COT")


def test_toggle_quantity(store):
    rec = Recorder(store.toggles_changed)
    store.toggle_quantity(Quantity.VELOCITY)
    assert store.toggles.velocity
    assert rec.values == [store.toggles]
