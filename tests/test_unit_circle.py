"""Test the unit circle diagram geometry.

Tests for trigmaster.model.unit_circle:
    - point on the circle
    - highlighted segment per function
    - tangent hidden when undefined
    - angle arc

Run:
    pytest tests/test_unit_circle.py -v
"""

import math

import numpy as np
import pytest

from trigmaster.model.unit_circle import ARC_RADIUS, arc_points, unit_circle_figure
from trigmaster.model.trig import TrigFunction


def _value_segment(figure):
    values = [s for s in figure.highlights if s.role == "value"]
    assert len(values) == 1
    return values[0]


def _label_texts(figure):
    return [label.text for label in figure.labels]


def test_point_on_circle():
    figure = unit_circle_figure(math.pi / 3, TrigFunction.SIN)
    x, y = figure.point
    assert x == pytest.approx(0.5)
    assert y == pytest.approx(math.sqrt(3) / 2)


def test_sine_is_vertical_leg():
    angle = math.radians(30)
    figure = unit_circle_figure(angle, TrigFunction.SIN)
    seg = _value_segment(figure)
    assert seg.start == pytest.approx((math.cos(angle), 0.0))
    assert seg.end == pytest.approx((math.cos(angle), 0.5))
    assert _label_texts(figure) == ["O", "P", "M"]
    assert figure.value_text == "sin(θ) = 1/2"


def test_cosine_is_horizontal_leg():
    angle = math.radians(60)
    figure = unit_circle_figure(angle, TrigFunction.COS)
    seg = _value_segment(figure)
    assert seg.start == (0.0, 0.0)
    assert seg.end == pytest.approx((0.5, 0.0))
    assert figure.markers == [pytest.approx((0.5, 0.0))]


def test_tangent_segment_on_tangent_line():
    angle = math.radians(45)
    figure = unit_circle_figure(angle, TrigFunction.TAN)
    assert figure.tan_defined
    seg = _value_segment(figure)
    assert seg.start == (1.0, 0.0)
    assert seg.end == pytest.approx((1.0, 1.0))
    assert {s.role for s in figure.highlights} == {"axis", "guide", "value", "projection"}
    assert _label_texts(figure) == ["O", "A", "T"]


def test_tangent_hidden_when_undefined():
    figure = unit_circle_figure(math.pi / 2, TrigFunction.TAN)
    assert not figure.tan_defined
    assert figure.highlights == []
    assert figure.markers == []
    assert _label_texts(figure) == ["O"]
    assert figure.value_text == "tan(θ) = ∞ (undefined)"


def test_arc_sweeps_reduced_angle():
    arc = arc_points(2 * math.pi + math.pi / 2)
    assert arc.shape[1] == 2
    np.testing.assert_allclose(arc[0], [ARC_RADIUS, 0.0])
    np.testing.assert_allclose(arc[-1], [0.0, ARC_RADIUS], atol=1e-12)
    np.testing.assert_allclose(np.hypot(arc[:, 0], arc[:, 1]), ARC_RADIUS)


def test_arc_at_zero_is_degenerate():
    arc = arc_points(0.0)
    np.testing.assert_allclose(arc, np.tile([ARC_RADIUS, 0.0], (len(arc), 1)))
