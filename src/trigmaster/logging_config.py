"""
Logging Configuration
=====================
Handlers for the `trigmaster` logger namespace and a hook that routes uncaught
exceptions into the same log.
"""
import logging
import sys
from typing import Optional

LOGGER_NAME = "trigmaster"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Send `trigmaster.*` records to stdout and, optionally, to a file.

    Existing handlers are closed and replaced, so calling this again (tests, `--debug`
    after startup) never duplicates output.

    Args:
        level: Logging level for the logger and every handler.
        log_file: Path of a UTF-8 log file, truncated on start.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for old in logger.handlers:
        old.close()
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Logging initialized at {logging.getLevelName(level)}.")


def install_excepthook() -> None:
    """
    Log uncaught exceptions.

    Qt prints exceptions raised inside slots to stderr and carries on; with this
    hook they end up in the application log as well. Ctrl+C is passed through.
    """
    def log_exception(exc_type, exc_value, exc_traceback):
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return

        logging.getLogger(LOGGER_NAME).critical(
            "Uncaught exception",
            exc_info=(exc_type, exc_value, exc_traceback)
        )

    sys.excepthook = log_exception
