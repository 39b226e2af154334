"""
Unit Circle Geometry
====================
Computes everything the unit circle diagram shows for a given angle, in world
coordinates of a unit-radius circle (y up).

Point names follow the usual textbook figure:
    O: origin, P: point on the circle, M: projection of P on the x axis,
    A: (1, 0), T: intersection of the extended radius with the tangent x = 1.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from trigmaster.model.trig import TAU, TrigFunction, is_tan_defined, value_expression

if TYPE_CHECKING:
    import numpy.typing as npt

# Visible half-extent of the diagram (200 px at 120 px per unit)
VIEW_EXTENT: float = 200.0 / 120.0
ARC_RADIUS: float = 0.2
LABEL_OFFSET: float = 1.15


@dataclass(frozen=True)
class Segment:
    start: tuple[float, float]
    end: tuple[float, float]
    role: str  # "value" | "guide" | "projection" | "axis"


@dataclass(frozen=True)
class Label:
    text: str
    pos: tuple[float, float]


@dataclass(frozen=True, eq=False)
class UnitCircleFigure:
    angle: float
    func: TrigFunction
    point: tuple[float, float]
    arc: npt.NDArray[np.float64]
    tan_defined: bool
    value_text: str
    highlights: list[Segment] = field(default_factory=list)
    markers: list[tuple[float, float]] = field(default_factory=list)
    labels: list[Label] = field(default_factory=list)


def arc_points(angle: float, radius: float = ARC_RADIUS, n_points: int = 40) -> npt.NDArray[np.float64]:
    """
    The angle marker: an arc from the positive x axis to θ (reduced to one turn).

    Returns:
        (N, 2) array of points.
    """
    sweep = angle % TAU
    phi = np.linspace(0.0, sweep, n_points)
    return np.c_[radius * np.cos(phi), radius * np.sin(phi)]


def unit_circle_figure(angle: float, func: TrigFunction) -> UnitCircleFigure:
    """
    Build the unit circle diagram for the current angle and selected function.

    Args:
        angle: Angle θ in radians.
        func: The highlighted function.

    Returns:
        The figure description; drawing it is up to the view.
    """
    func = TrigFunction(func)
    x, y = math.cos(angle), math.sin(angle)
    tan_defined = is_tan_defined(angle)

    highlights: list[Segment] = []
    markers: list[tuple[float, float]] = []
    labels: list[Label] = [Label("O", (-0.1, -0.1))]

    match func:
        case TrigFunction.SIN:
            highlights.append(Segment((x, 0.0), (x, y), "value"))
            highlights.append(Segment((x, y), (VIEW_EXTENT, y), "projection"))
            markers.append((x, y))
        case TrigFunction.COS:
            highlights.append(Segment((0.0, 0.0), (x, 0.0), "value"))
            highlights.append(Segment((x, 0.0), (x, y), "guide"))
            markers.append((x, 0.0))
        case TrigFunction.TAN if tan_defined:
            t = math.tan(angle)
            highlights.append(Segment((1.0, -VIEW_EXTENT), (1.0, VIEW_EXTENT), "axis"))
            highlights.append(Segment((0.0, 0.0), (1.0, t), "guide"))
            highlights.append(Segment((1.0, 0.0), (1.0, t), "value"))
            highlights.append(Segment((1.0, t), (VIEW_EXTENT, t), "projection"))
            markers.append((1.0, t))

    if func in (TrigFunction.SIN, TrigFunction.COS):
        labels.append(Label("P", (x * LABEL_OFFSET, y * LABEL_OFFSET)))
        labels.append(Label("M", (x, -0.15)))
    elif tan_defined:
        labels.append(Label("A", (1.07, -0.15)))
        labels.append(Label("T", (1.07, math.tan(angle))))

    return UnitCircleFigure(
        angle=angle,
        func=func,
        point=(x, y),
        arc=arc_points(angle),
        tan_defined=tan_defined,
        value_text=value_expression(func, angle),
        highlights=highlights,
        markers=markers,
        labels=labels,
    )
