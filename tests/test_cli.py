"""Test the command line, logging setup and environment config.

Tests:
    - argument parsing (--debug, --log-file, --tab)
    - log level from TRIGMASTER_LOG_LEVEL
    - setup_logging handlers and log file
    - excepthook routes uncaught exceptions to the log

Run:
    pytest tests/test_cli.py -v
"""

import logging
import sys

import pytest

from trigmaster.app.main import build_parser
from trigmaster.config import LOG_LEVEL_ENV, get_log_level
from trigmaster.logging_config import install_excepthook, setup_logging


@pytest.fixture
def restore_logging():
    logger = logging.getLogger("trigmaster")
    handlers, level = list(logger.handlers), logger.level
    hook = sys.excepthook
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
    sys.excepthook = hook


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert not args.debug
    assert args.log_file is None
    assert args.tab == "visualization"


def test_parser_options(tmp_path):
    log = str(tmp_path / "run.log")
    args = build_parser().parse_args(["--debug", "--log-file", log, "--tab", "physics"])
    assert args.debug
    assert args.log_file == log
    assert args.tab == "physics"


def test_parser_rejects_unknown_tab():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--tab", "chemistry"])


@pytest.mark.parametrize(
    "value, expected",
    [
        ("DEBUG", logging.DEBUG),
        ("warning", logging.WARNING),
        ("", logging.INFO),
        ("loud", logging.INFO),
    ],
)
def test_log_level_from_environment(monkeypatch, value, expected):
    monkeypatch.setenv(LOG_LEVEL_ENV, value)
    assert get_log_level(logging.INFO) == expected


def test_setup_logging_writes_file(tmp_path, restore_logging):
    log_file = tmp_path / "trigmaster.log"
    setup_logging(level=logging.DEBUG, log_file=str(log_file))
    setup_logging(level=logging.DEBUG, log_file=str(log_file))

    logger = restore_logging
    # calling twice does not duplicate handlers
    assert len(logger.handlers) == 2
    assert logger.level == logging.DEBUG

    logging.getLogger("trigmaster.test").debug("hello from test")
    for handler in logger.handlers:
        handler.flush()
    text = log_file.read_text(encoding="utf-8")
    assert "trigmaster.test - DEBUG - hello from test" in text


def test_setup_logging_announces_level(tmp_path, restore_logging):
    log_file = tmp_path / "trigmaster.log"
    setup_logging(level=logging.WARNING, log_file=str(log_file))
    setup_logging(level=logging.INFO, log_file=str(log_file))

    for handler in restore_logging.handlers:
        handler.flush()
    lines = log_file.read_text(encoding="utf-8").splitlines()
    # the file is truncated on each setup
    assert len(lines) == 1
    assert lines[0].endswith("trigmaster - INFO - Logging initialized at INFO.")


def test_excepthook_logs_critical(caplog, restore_logging):
    install_excepthook()
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        sys.excepthook(*sys.exc_info())

    records = [r for r in caplog.records if r.levelno == logging.CRITICAL]
    assert records
    assert records[0].exc_info[0] is RuntimeError
