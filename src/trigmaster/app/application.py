from __future__ import annotations

import os
import sys

import pyqtgraph as pg
from PySide6.QtCore import QCoreApplication, QSettings
from PySide6.QtWidgets import QApplication

from trigmaster.config import APP_ID, ORG_DOMAIN, ORG_ID, VISIBLE_APP_NAME


def configure_pyqtgraph() -> None:
    """Global plotting defaults: white canvas, black ink, smooth lines."""
    pg.setConfigOptions(background="w", foreground="k", antialias=True)


def create_app(argv: list[str] | None = None) -> QApplication:
    """
    Return the running QApplication, creating it on first use.

    Identity and pyqtgraph options are applied every time, so tests that share
    one session-wide application see the same setup as `main()`.
    """
    for key in ("QT_ENABLE_HIGHDPI_SCALING", "QT_AUTO_SCREEN_SCALE_FACTOR"):
        os.environ.setdefault(key, "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setOrganizationDomain(ORG_DOMAIN)
    QCoreApplication.setApplicationName(APP_ID)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication.instance() or QApplication(sys.argv if argv is None else argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)
    configure_pyqtgraph()
    return app
