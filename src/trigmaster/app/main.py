"""
Run with: python -m trigmaster
"""
from __future__ import annotations

import argparse
import logging
import sys

from trigmaster.app.application import create_app
from trigmaster.config import DEFAULT_LOG_LEVEL
from trigmaster.logging_config import install_excepthook, setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trigmaster",
        description="Interactive visualization of trigonometric functions and their physical analogues.",
    )
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    parser.add_argument(
        "--tab",
        choices=["visualization", "physics"],
        default="visualization",
        help="tab shown at start-up",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the application."""
    args = build_parser().parse_args(argv)

    setup_logging(level=logging.DEBUG if args.debug else DEFAULT_LOG_LEVEL, log_file=args.log_file)
    install_excepthook()

    app = create_app()

    # imported after pyqtgraph is configured by create_app()
    from trigmaster.app.ui.main_window import MainWindow

    win = MainWindow(start_tab=args.tab)
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
