"""
Configuration
=============
Central registry of application-wide constants.

Why is this file needed?
------------------------
1. Abstraction: It keeps identity strings, timings and canvas sizes out of the
   widgets that use them.
2. Environment: It resolves the default log level from `TRIGMASTER_LOG_LEVEL`
   so a developer can turn on debug output without touching code.

Exports:
    FRAME_INTERVAL_MS (int): Animation timer interval.
    DEFAULT_LOG_LEVEL (int): Level used when no CLI flag overrides it.
"""
import logging
import os

# Application identity (also used for QSettings)
ORG_ID = "trigmaster"
APP_ID = "trigmaster"
ORG_DOMAIN = "trigmaster.local"
VISIBLE_APP_NAME = "TrigMaster"

# Animation
FRAME_INTERVAL_MS: int = 16

# Unit circle view: the circle has radius 1, the view shows ±5/3 (200 px / 120 px)
UNIT_CIRCLE_EXTENT: float = 200.0 / 120.0

# Wave graph view: θ from 0 to 4π, values clipped to ±5/3
WAVE_Y_EXTENT: float = 200.0 / 120.0

# Window
WINDOW_SIZE: tuple[int, int] = (1280, 900)

LOG_LEVEL_ENV = "TRIGMASTER_LOG_LEVEL"


def get_log_level(default: int = logging.INFO) -> int:
    """
    Resolve the log level from the environment.

    Accepts level names ("DEBUG", "warning", ...). Unknown values fall back to `default`.
    """
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


DEFAULT_LOG_LEVEL: int = get_log_level()
