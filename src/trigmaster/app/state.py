from __future__ import annotations

import logging
import math

from PySide6.QtCore import QObject, Signal

from trigmaster.model.physics import DisplayToggles, Quantity
from trigmaster.model.timeline import DEFAULT_SPEED, SPEED_CHOICES, advance_angle
from trigmaster.model.trig import TrigFunction, parse_degrees

logger = logging.getLogger(__name__)


class Store(QObject):
    """
    Central state store with signals for panel/figure sync.

    Holds the shared angle θ, playback state and display toggles. Every figure
    is a pure function of this state and redraws on the change signals, which
    are emitted only when a value actually changes.
    """
    angle_changed = Signal(float)
    playing_changed = Signal(bool)
    speed_changed = Signal(float)
    function_changed = Signal(object)
    toggles_changed = Signal(object)

    def __init__(self) -> None:
        super().__init__()
        self._angle: float = 0.0
        self._playing: bool = False
        self._speed: float = DEFAULT_SPEED
        self._function: TrigFunction = TrigFunction.SIN
        self._toggles: DisplayToggles = DisplayToggles()

    # ---- read access ----

    @property
    def angle(self) -> float:
        return self._angle

    @property
    def playing(self) -> bool:
        return self._playing

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def function(self) -> TrigFunction:
        return self._function

    @property
    def toggles(self) -> DisplayToggles:
        return self._toggles

    # ---- angle ----

    def set_angle(self, angle: float) -> None:
        angle = float(angle)
        if not math.isfinite(angle):
            raise ValueError(f"Angle must be finite, got {angle}.")
        if angle != self._angle:
            self._angle = angle
            self.angle_changed.emit(self._angle)

    def scrub_to(self, angle: float) -> None:
        """Set the angle by direct manipulation (slider, drag); stops playback."""
        self.set_playing(False)
        self.set_angle(angle)

    def set_degrees_text(self, text: str) -> bool:
        """
        Set the angle from typed degrees.

        Returns:
            False if the text was not a number and has been ignored.
        """
        radians = parse_degrees(text)
        if radians is None:
            return False
        self.scrub_to(radians)
        return True

    def advance(self, dt_ms: float) -> None:
        """Advance the angle by elapsed animation time. Does nothing while paused."""
        if not self._playing:
            return
        self.set_angle(advance_angle(self._angle, dt_ms, self._speed))

    def begin_drag(self) -> None:
        logger.debug(f"Drag started at θ={self._angle:.3f}")
        self.set_playing(False)

    # ---- playback ----

    def set_playing(self, playing: bool) -> None:
        if playing != self._playing:
            self._playing = playing
            logger.info(f"Playback {'started' if playing else 'paused'}.")
            self.playing_changed.emit(self._playing)

    def toggle_playing(self) -> None:
        self.set_playing(not self._playing)

    def reset(self) -> None:
        logger.info("Reset angle.")
        self.set_playing(False)
        self.set_angle(0.0)

    def set_speed(self, speed: float) -> None:
        if speed not in SPEED_CHOICES:
            raise ValueError(f"Speed must be one of {SPEED_CHOICES}, got {speed}.")
        if speed != self._speed:
            self._speed = float(speed)
            logger.info(f"Speed set to {self._speed:g}x.")
            self.speed_changed.emit(self._speed)

    # ---- display ----

    def select_function(self, func: TrigFunction | str) -> None:
        try:
            func = TrigFunction(func)
        except ValueError:
            raise ValueError(f"Unknown trigonometric function '{func}'.") from None
        if func != self._function:
            self._function = func
            logger.info(f"Selected function: {func.value}")
            self.function_changed.emit(self._function)

    def toggle_quantity(self, quantity: Quantity | str) -> None:
        self._toggles = self._toggles.with_toggled(Quantity(quantity))
        self.toggles_changed.emit(self._toggles)
