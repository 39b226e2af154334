"""Test the time parameter helpers.

Tests for trigmaster.model.timeline:
    - angle advance by elapsed time and speed
    - folding of very large angles
    - slider position
    - drag gesture conversion (pixels → radians)

Run:
    pytest tests/test_timeline.py -v
"""

import math

import pytest

from trigmaster.model.timeline import (
    SLIDER_MAX,
    WRAP_LIMIT,
    DragGesture,
    advance_angle,
    slider_position,
)


def test_advance_one_second_at_normal_speed():
    """1000 ms at speed 1 is one radian."""
    assert advance_angle(0.0, 1000.0, 1.0) == pytest.approx(1.0)


@pytest.mark.parametrize("speed", [0.5, 1.0, 2.0])
def test_advance_scales_with_speed(speed):
    assert advance_angle(1.0, 500.0, speed) == pytest.approx(1.0 + 0.5 * speed)


def test_advance_zero_elapsed_is_identity():
    assert advance_angle(2.5, 0.0, 2.0) == 2.5


def test_advance_folds_past_wrap_limit():
    new = advance_angle(WRAP_LIMIT - 0.001, 16.0, 1.0)
    assert 0.0 <= new < 2 * math.pi
    assert math.sin(new) == pytest.approx(math.sin(WRAP_LIMIT - 0.001 + 0.016), abs=1e-9)


def test_advance_below_limit_is_not_folded():
    assert advance_angle(50.0, 1000.0, 1.0) == pytest.approx(51.0)


def test_slider_position_wraps_at_four_pi():
    assert slider_position(1.0) == pytest.approx(1.0)
    assert slider_position(SLIDER_MAX + 1.0) == pytest.approx(1.0)
    assert 0.0 <= slider_position(-1.0) < SLIDER_MAX


# -------------------------------------------------------------------------------
# DragGesture
# -------------------------------------------------------------------------------

def test_drag_full_graph_width_moves_whole_window():
    """Dragging 400 px moves time by 2.5π."""
    gesture = DragGesture(400.0 / (2.5 * math.pi))
    gesture.begin(100.0, 1.0)
    assert gesture.update(500.0) == pytest.approx(1.0 + 2.5 * math.pi)


def test_drag_to_the_left_goes_back_in_time():
    gesture = DragGesture(10.0)
    gesture.begin(50.0, 3.0)
    assert gesture.update(30.0) == pytest.approx(1.0)


def test_drag_inactive_returns_none():
    gesture = DragGesture(10.0)
    assert not gesture.active
    assert gesture.update(10.0) is None

    gesture.begin(0.0, 0.0)
    assert gesture.active
    gesture.end()
    assert not gesture.active
    assert gesture.update(10.0) is None


@pytest.mark.parametrize("bad", [0.0, -1.0])
def test_drag_rejects_non_positive_scale(bad):
    with pytest.raises(ValueError, match="must be positive"):
        DragGesture(bad)
