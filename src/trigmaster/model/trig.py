"""
Trigonometric Functions
=======================
The three functions the application teaches, their display configuration and
the helpers that turn raw values into text.

Classes:
    TrigFunction: Enumeration of the supported functions.
    TrigConfig: Color and texts shown for one function.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

TAU = 2.0 * math.pi

# Below this |cos(θ)| the tangent is treated as undefined
TAN_COS_EPSILON = 1e-3

# Tolerance used when matching exact forms like √2/2
EXACT_FORM_EPSILON = 0.005

# Anything larger is shown as infinity
LARGE_VALUE_LIMIT = 100.0


class TrigFunction(StrEnum):
    SIN = "SIN"
    COS = "COS"
    TAN = "TAN"


@dataclass(frozen=True)
class TrigConfig:
    color: str
    label: str
    description: str


TRIG_CONFIGS: dict[TrigFunction, TrigConfig] = {
    TrigFunction.SIN: TrigConfig(
        color="#06b6d4",  # cyan
        label="Sine (sin)",
        description="y = sin(θ)\nThe y coordinate (height) of the point on the unit circle.",
    ),
    TrigFunction.COS: TrigConfig(
        color="#d946ef",  # fuchsia
        label="Cosine (cos)",
        description="y = cos(θ)\nThe x coordinate (horizontal distance) of the point on the unit circle.",
    ),
    TrigFunction.TAN: TrigConfig(
        color="#f59e0b",  # amber
        label="Tangent (tan)",
        description=(
            "y = tan(θ)\nThe height where the extended radius meets the tangent line x = 1 "
            "(i.e. the slope)."
        ),
    ),
}

# (value, text) pairs checked in order after zero
_EXACT_FORMS: tuple[tuple[float, str], ...] = (
    (0.5, "1/2"),
    (math.sqrt(2.0) / 2.0, "√2/2"),
    (math.sqrt(3.0) / 2.0, "√3/2"),
    (1.0, "1"),
    (math.sqrt(3.0), "√3"),
    (math.sqrt(3.0) / 3.0, "√3/3"),
)


def evaluate(func: TrigFunction, theta: float | npt.NDArray[np.float64]) -> float | npt.NDArray[np.float64]:
    """
    Evaluate the given function for a scalar angle or an array of angles.

    Args:
        func: Which function to evaluate.
        theta: Angle(s) in radians.

    Returns:
        A float for scalar input, otherwise an array of the same shape.
    """
    match TrigFunction(func):
        case TrigFunction.SIN:
            values = np.sin(theta)
        case TrigFunction.COS:
            values = np.cos(theta)
        case TrigFunction.TAN:
            values = np.tan(theta)

    if np.ndim(values) == 0:
        return float(values)
    return values


def is_tan_defined(theta: float) -> bool:
    """The tangent is drawn only when the point is not (almost) on the y axis."""
    return abs(math.cos(theta)) > TAN_COS_EPSILON


def format_trig_value(value: float) -> str:
    """
    Format a function value, preferring the exact forms taught in school.

    Examples:
        0.7071 -> "√2/2", -0.5 -> "-1/2", 1e3 -> "∞ (undefined)", 0.123 -> "0.12"
    """
    magnitude = abs(value)
    sign = "-" if value < -EXACT_FORM_EPSILON else ""

    if magnitude > LARGE_VALUE_LIMIT:
        return "∞ (undefined)"

    if magnitude < EXACT_FORM_EPSILON:
        return "0"

    for exact, text in _EXACT_FORMS:
        if abs(magnitude - exact) < EXACT_FORM_EPSILON:
            return f"{sign}{text}"

    return f"{value:.2f}"


def radian_label(multiplier: float) -> str:
    """
    Label for the angle `multiplier * π`, e.g. 0.5 -> "π/2", 3 -> "3π".

    Only positive half-integer multipliers get a label, anything else returns "".
    """
    halves = multiplier * 2.0
    if multiplier <= 0 or not math.isclose(halves, round(halves)):
        return ""

    halves = int(round(halves))
    if halves % 2 == 1:
        numerator = "π" if halves == 1 else f"{halves}π"
        return f"{numerator}/2"

    whole = halves // 2
    return "π" if whole == 1 else f"{whole}π"


def degree_label(multiplier: float) -> str:
    """Label for the angle `multiplier * π` in degrees, e.g. 1.5 -> "270°"."""
    return f"{multiplier * 180:g}°"


def to_display_degrees(theta: float) -> int:
    """
    The angle reduced to one turn, in whole degrees.

    The reduction keeps the sign of the angle, so -90° stays -90 and 359.6° shows as 360.
    Halves round up.
    """
    return math.floor(math.degrees(math.fmod(theta, TAU)) + 0.5)


def format_angle_readout(theta: float) -> str:
    return f"θ = {math.degrees(theta):.1f}° ({theta:.2f} rad)"


def parse_degrees(text: str) -> float | None:
    """
    Parse user-typed degrees into radians.

    Args:
        text: Raw text from an input field.

    Returns:
        The angle in radians, or None when the text is not a finite number.
    """
    try:
        degrees = float(text.strip())
    except (AttributeError, ValueError):
        logger.debug(f"Ignoring non-numeric angle input: {text!r}")
        return None

    if not math.isfinite(degrees):
        logger.debug(f"Ignoring non-finite angle input: {text!r}")
        return None

    return math.radians(degrees)


def value_expression(func: TrigFunction, theta: float) -> str:
    """The readout under the unit circle, e.g. "sin(θ) = √3/2"."""
    name = TrigFunction(func).value.lower()
    return f"{name}(θ) = {format_trig_value(evaluate(func, theta))}"
