from __future__ import annotations

import logging

from PySide6.QtCore import QElapsedTimer, QObject, QTimer, Slot

from trigmaster.app.state import Store
from trigmaster.config import FRAME_INTERVAL_MS

logger = logging.getLogger(__name__)


class AnimationDriver(QObject):
    """
    Advances the store's angle while it is playing.

    The timer only schedules frames; the angle step comes from the measured
    elapsed time, so a slow frame does not slow the animation down.
    """
    def __init__(self, store: Store, interval_ms: int = FRAME_INTERVAL_MS, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.store = store

        self._clock = QElapsedTimer()
        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._on_tick)

        self.store.playing_changed.connect(self._on_playing_changed)
        self._on_playing_changed(self.store.playing)

    @property
    def running(self) -> bool:
        return self._timer.isActive()

    @Slot(bool)
    def _on_playing_changed(self, playing: bool) -> None:
        if playing:
            # restart the clock so the pause is not counted as elapsed time
            self._clock.start()
            self._timer.start()
            logger.debug(f"Animation timer started ({self._timer.interval()} ms).")
        elif self._timer.isActive():
            self._timer.stop()
            self._clock.invalidate()
            logger.debug("Animation timer stopped.")

    @Slot()
    def _on_tick(self) -> None:
        self.step(self._clock.restart())

    def step(self, dt_ms: float) -> None:
        """Advance by `dt_ms` milliseconds; called by the timer, usable directly."""
        self.store.advance(dt_ms)
