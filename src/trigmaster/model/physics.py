"""
Mechanical Analogues
====================
Geometry of the three physics demos. All of them are driven by the same angle θ,
which plays the role of ωt, so they move in lock-step with the trig diagrams.

Everything here is closed-form evaluation; nothing is integrated over time.

Coordinates are canvas units on a 750 x 300 canvas with y pointing DOWN (screen
convention), so "up" on screen means a smaller y.

Functions:
    spring_mass: Mass on a vertical spring, y = A sin(θ).
    circular_motion: Particle on a circle and its vertical projection.
    pendulum: Small-angle pendulum, φ = φ_max sin(θ).
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import StrEnum
from typing import TYPE_CHECKING

import numpy as np

from trigmaster.model.sampling import GraphFrame

if TYPE_CHECKING:
    import numpy.typing as npt

CANVAS_WIDTH: float = 750.0
CANVAS_HEIGHT: float = 300.0
CENTER_Y: float = CANVAS_HEIGHT / 2
AMPLITUDE: float = 80.0

# Minimum displacement (canvas units) for the displacement/force arrows to show
ARROW_THRESHOLD: float = 2.0

DISPLACEMENT_COLOR = "#10b981"
VELOCITY_COLOR = "#0ea5e9"
FORCE_COLOR = "#f43f5e"
GRAVITY_COLOR = "#94a3b8"
GUIDE_COLOR = "#cbd5e1"
STRUCTURE_COLOR = "#334155"
SPRING_COLOR = "#64748b"
FAINT_COLOR = "#e2e8f0"

GRAPH_FRAME = GraphFrame(x_start=300.0, width=400.0, center_y=CENTER_Y, window=2.5 * math.pi)


class Quantity(StrEnum):
    DISPLACEMENT = "displacement"
    VELOCITY = "velocity"
    ACCELERATION = "acceleration"


@dataclass(frozen=True)
class DisplayToggles:
    """Which kinematic quantities are drawn. Acceleration also stands for force."""
    displacement: bool = True
    velocity: bool = False
    acceleration: bool = True

    def is_on(self, quantity: Quantity) -> bool:
        return getattr(self, Quantity(quantity).value)

    def with_toggled(self, quantity: Quantity) -> DisplayToggles:
        name = Quantity(quantity).value
        return replace(self, **{name: not getattr(self, name)})


# -------------------------------------------------------------------------------
# Drawing primitives
# -------------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class Stroke:
    x: npt.NDArray[np.float64]
    y: npt.NDArray[np.float64]
    color: str
    width: float = 2.0
    style: str = "solid"  # "solid" | "dash" | "dot"
    opacity: float = 1.0


@dataclass(frozen=True)
class Arrow:
    start: tuple[float, float]
    end: tuple[float, float]
    color: str
    head: float = 8.0

    def polyline(self) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
        return arrow(self.start, self.end, self.head)


@dataclass(frozen=True)
class Marker:
    pos: tuple[float, float]
    radius: float
    fill: str
    outline: str | None = None
    outline_width: float = 0.0


@dataclass(frozen=True)
class TextLabel:
    text: str
    pos: tuple[float, float]
    color: str = "#475569"


@dataclass(frozen=True, eq=False)
class DemoFigure:
    """Declarative description of one demo frame."""
    title: str
    caption: str
    y_label: str
    frame: GraphFrame
    strokes: dict[str, Stroke] = field(default_factory=dict)
    arrows: dict[str, Arrow] = field(default_factory=dict)
    markers: dict[str, Marker] = field(default_factory=dict)
    labels: list[TextLabel] = field(default_factory=list)


def segment(
    p0: tuple[float, float],
    p1: tuple[float, float],
    color: str,
    width: float = 1.0,
    style: str = "solid",
    opacity: float = 1.0,
) -> Stroke:
    return Stroke(
        x=np.array([p0[0], p1[0]], dtype=np.float64),
        y=np.array([p0[1], p1[1]], dtype=np.float64),
        color=color,
        width=width,
        style=style,
        opacity=opacity,
    )


def arrow(
    start: tuple[float, float],
    end: tuple[float, float],
    head: float = 8.0,
    spread: float = math.radians(25.0),
) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """
    Polyline of an arrow: shaft plus two head strokes, separated by NaN gaps.

    Args:
        start: Tail point.
        end: Tip point.
        head: Length of the head strokes.
        spread: Half-angle between the shaft and each head stroke.

    Returns:
        (x, y) arrays. A zero-length arrow degenerates to its shaft.
    """
    x0, y0 = start
    x1, y1 = end
    dx, dy = x1 - x0, y1 - y0
    length = math.hypot(dx, dy)
    if length < 1e-12:
        return np.array([x0, x1], dtype=np.float64), np.array([y0, y1], dtype=np.float64)

    ux, uy = dx / length, dy / length
    xs = [x0, x1, np.nan]
    ys = [y0, y1, np.nan]
    for sgn in (1.0, -1.0):
        c, s = math.cos(sgn * spread), math.sin(sgn * spread)
        # back-pointing unit vector rotated by ±spread
        bx, by = -(ux * c - uy * s), -(ux * s + uy * c)
        xs += [x1, x1 + head * bx, np.nan]
        ys += [y1, y1 + head * by, np.nan]

    return np.array(xs[:-1], dtype=np.float64), np.array(ys[:-1], dtype=np.float64)


def cubic_bezier(
    p0: tuple[float, float],
    p1: tuple[float, float],
    p2: tuple[float, float],
    p3: tuple[float, float],
    n_points: int = 32,
) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """Sample a cubic Bézier curve into a polyline."""
    t = np.linspace(0.0, 1.0, n_points)[:, None]
    pts = np.array([p0, p1, p2, p3], dtype=np.float64)
    curve = (
        (1 - t) ** 3 * pts[0]
        + 3 * (1 - t) ** 2 * t * pts[1]
        + 3 * (1 - t) * t ** 2 * pts[2]
        + t ** 3 * pts[3]
    )
    return curve[:, 0], curve[:, 1]


def spring_zigzag(
    x: float,
    top: float,
    bottom: float,
    segments: int = 12,
    half_width: float = 10.0,
) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """Zig-zag spring hanging at `x` from `top` down to `bottom`."""
    seg_len = (bottom - top) / segments
    i = np.arange(1, segments + 1)
    xs = np.where(i % 2 == 0, x - half_width, x + half_width)
    ys = top + i * seg_len
    return np.r_[x, xs, x].astype(np.float64), np.r_[top, ys, bottom].astype(np.float64)


def circle_polyline(
    center: tuple[float, float],
    radius: float,
    n_segments: int = 120,
) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """Closed circle polyline in canvas coordinates."""
    cx, cy = center
    phi = np.linspace(0.0, 2.0 * np.pi, n_segments + 1)
    return cx + radius * np.cos(phi), cy + radius * np.sin(phi)


def _graph_axes(frame: GraphFrame) -> dict[str, Stroke]:
    return {
        "axis-t": segment((frame.x_start, frame.center_y), (frame.tip_x, frame.center_y), GUIDE_COLOR),
        "axis-y": segment((frame.x_start, frame.top), (frame.x_start, frame.bottom), GUIDE_COLOR),
    }


def _graph_labels(frame: GraphFrame, y_label: str) -> list[TextLabel]:
    return [
        TextLabel("t", (frame.tip_x + 10, frame.center_y), GRAVITY_COLOR),
        TextLabel(y_label, (frame.x_start, frame.top - 10), GRAVITY_COLOR),
    ]


# -------------------------------------------------------------------------------
# Demos
# -------------------------------------------------------------------------------

def spring_mass(angle: float, toggles: DisplayToggles | None = None) -> DemoFigure:
    """
    Spring-mass oscillator (simple harmonic motion).

    Displacement y = A sin(θ), velocity ~ cos(θ), acceleration ~ -sin(θ).
    """
    toggles = toggles or DisplayToggles()
    frame = GRAPH_FRAME
    sin_val, cos_val = math.sin(angle), math.cos(angle)

    displacement = sin_val * AMPLITUDE
    mass_y = CENTER_Y - displacement
    spring_top = 40.0
    spring_bottom = mass_y - 15.0

    fig = DemoFigure(
        title="Simple Harmonic Motion (spring oscillator)",
        caption="y(t) = A sin(ωt)",
        y_label="y",
        frame=frame,
    )
    strokes = fig.strokes
    strokes["ceiling"] = segment((60.0, spring_top), (140.0, spring_top), STRUCTURE_COLOR, width=4)
    sx, sy = spring_zigzag(100.0, spring_top, spring_bottom)
    strokes["spring"] = Stroke(sx, sy, SPRING_COLOR, width=2)
    strokes["equilibrium"] = segment((40.0, CENTER_Y), (160.0, CENTER_Y), GRAVITY_COLOR, style="dash")
    strokes.update(_graph_axes(frame))
    strokes["guide"] = segment((130.0, mass_y), (frame.tip_x, mass_y), GUIDE_COLOR, style="dash")

    if toggles.displacement:
        strokes["displacement"] = Stroke(*frame.history_curve(np.sin, angle, AMPLITUDE), DISPLACEMENT_COLOR)
    if toggles.velocity:
        strokes["velocity"] = Stroke(
            *frame.history_curve(np.cos, angle, AMPLITUDE * 0.6), VELOCITY_COLOR, style="dot", opacity=0.6
        )
    if toggles.acceleration:
        strokes["acceleration"] = Stroke(
            *frame.history_curve(lambda p: -np.sin(p), angle, AMPLITUDE * 0.6), FORCE_COLOR, style="dot", opacity=0.6
        )

    fig.markers["mass"] = Marker((100.0, mass_y), 20.0, "white", STRUCTURE_COLOR, 2.5)
    if toggles.displacement:
        fig.markers["tip"] = Marker((frame.tip_x, mass_y), 4.0, DISPLACEMENT_COLOR)
    fig.labels.append(TextLabel("m", (100.0, mass_y)))
    fig.labels.extend(_graph_labels(frame, fig.y_label))

    if abs(displacement) > ARROW_THRESHOLD:
        if toggles.displacement:
            fig.arrows["displacement"] = Arrow((80.0, CENTER_Y), (80.0, mass_y), DISPLACEMENT_COLOR)
        if toggles.acceleration:
            # restoring force points back to equilibrium
            fig.arrows["force"] = Arrow((120.0, mass_y), (120.0, mass_y + displacement * 0.8), FORCE_COLOR)
    if toggles.velocity and abs(cos_val) > 0.1:
        fig.arrows["velocity"] = Arrow((100.0, mass_y), (100.0, mass_y - cos_val * 50.0), VELOCITY_COLOR)

    return fig


def circular_motion(angle: float, toggles: DisplayToggles | None = None, radius: float = 70.0) -> DemoFigure:
    """
    Uniform circular motion; its vertical projection R sin(θ) is plotted over time.
    """
    toggles = toggles or DisplayToggles()
    frame = GRAPH_FRAME
    cx, cy = 130.0, CENTER_Y
    px = cx + radius * math.cos(angle)
    py = cy - radius * math.sin(angle)

    fig = DemoFigure(
        title="Uniform Circular Motion",
        caption="y projection = R sin(θ)",
        y_label="y",
        frame=frame,
    )
    strokes = fig.strokes
    strokes["axis-x"] = segment((cx - 90, cy), (cx + 90, cy), FAINT_COLOR)
    strokes["axis-vertical"] = segment((cx, cy - 90), (cx, cy + 90), FAINT_COLOR)
    strokes["circle"] = Stroke(*circle_polyline((cx, cy), radius), GUIDE_COLOR, width=1, style="dash")
    strokes["radius"] = segment((cx, cy), (px, py), GRAVITY_COLOR, width=1.5)
    strokes.update(_graph_axes(frame))
    strokes["guide"] = segment((px, py), (frame.tip_x, py), GUIDE_COLOR, style="dash")

    if toggles.displacement:
        strokes["projection"] = segment((px, py), (cx, py), DISPLACEMENT_COLOR, style="dot")
        strokes["projection-height"] = segment((cx, cy), (cx, py), DISPLACEMENT_COLOR, width=3, opacity=0.5)
        strokes["displacement"] = Stroke(*frame.history_curve(np.sin, angle, radius), DISPLACEMENT_COLOR)
        fig.markers["tip"] = Marker((frame.tip_x, py), 4.0, DISPLACEMENT_COLOR)

    fig.markers["particle"] = Marker((px, py), 8.0, STRUCTURE_COLOR)

    if toggles.velocity:
        # tangential, counter-clockwise on screen
        end = (px - math.sin(angle) * 50.0, py - math.cos(angle) * 50.0)
        fig.arrows["velocity"] = Arrow((px, py), end, VELOCITY_COLOR)
    if toggles.acceleration:
        # centripetal, towards the centre
        end = (px + math.cos(angle + math.pi) * 50.0, py - math.sin(angle + math.pi) * 50.0)
        fig.arrows["force"] = Arrow((px, py), end, FORCE_COLOR)

    fig.labels.extend(_graph_labels(frame, fig.y_label))
    return fig


def pendulum(
    angle: float,
    toggles: DisplayToggles | None = None,
    length: float = 160.0,
    max_swing: float = math.radians(25.0),
) -> DemoFigure:
    """
    Simple pendulum in the small-angle approximation: φ(t) = φ_max sin(θ).

    The graph shows the horizontal displacement x ≈ A sin(θ), mapping a swing to
    the right onto an upward graph value.
    """
    toggles = toggles or DisplayToggles()
    frame = GRAPH_FRAME
    ox, oy = 130.0, 50.0
    swing = max_swing * math.sin(angle)
    bob_x = ox + length * math.sin(swing)
    bob_y = oy + length * math.cos(swing)
    tip_y = CENTER_Y - math.sin(angle) * AMPLITUDE

    fig = DemoFigure(
        title="Simple Pendulum",
        caption="x(t) ≈ A sin(θ)",
        y_label="x (displacement)",
        frame=frame,
    )
    strokes = fig.strokes
    strokes["ceiling"] = segment((80.0, oy), (180.0, oy), STRUCTURE_COLOR, width=3)
    strokes["plumb"] = segment((ox, oy), (ox, oy + 220.0), FAINT_COLOR, style="dash")
    strokes["rod"] = segment((ox, oy), (bob_x, bob_y), SPRING_COLOR, width=2)
    strokes.update(_graph_axes(frame))

    fig.markers["bob"] = Marker((bob_x, bob_y), 12.0, "#f59e0b", "#b45309", 2.0)
    fig.arrows["gravity"] = Arrow((bob_x, bob_y), (bob_x, bob_y + 40.0), GRAVITY_COLOR)

    if toggles.acceleration:
        sign = math.copysign(1.0, swing) if swing != 0.0 else 0.0
        end = (bob_x - math.cos(swing) * 40.0 * sign, bob_y + math.sin(abs(swing)) * 40.0)
        fig.arrows["force"] = Arrow((bob_x, bob_y), end, FORCE_COLOR)

    if toggles.displacement:
        strokes["displacement"] = Stroke(*frame.history_curve(np.sin, angle, AMPLITUDE), DISPLACEMENT_COLOR)
        fig.markers["tip"] = Marker((frame.tip_x, tip_y), 4.0, DISPLACEMENT_COLOR)
        bx, by = cubic_bezier(
            (bob_x, bob_y), (bob_x + 50.0, bob_y), (frame.tip_x - 50.0, tip_y), (frame.tip_x, tip_y)
        )
        strokes["connector"] = Stroke(bx, by, GUIDE_COLOR, width=1, style="dot", opacity=0.5)

    fig.labels.extend(_graph_labels(frame, fig.y_label))
    return fig
