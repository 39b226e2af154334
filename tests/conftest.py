"""Shared fixtures.

Widget tests run against the offscreen Qt platform so no display is needed.
Every widget a test creates goes through `track` and is destroyed at teardown,
so no wrapper outlives the session QApplication.
"""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QCoreApplication, QEvent


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for the whole session, configured like the real app."""
    from trigmaster.app.application import create_app

    app = create_app([])
    yield app


@pytest.fixture
def store(qapp):
    from trigmaster.app.state import Store

    return Store()


def dispose_widgets(widgets):
    """Close and delete widgets now, flushing the deferred deletes."""
    for widget in reversed(widgets):
        widget.close()
        widget.deleteLater()
    widgets.clear()
    QCoreApplication.sendPostedEvents(None, QEvent.Type.DeferredDelete)
    QCoreApplication.processEvents()


@pytest.fixture
def track(qapp):
    """Register a top-level widget for disposal; returns the widget."""
    created = []

    def _track(widget):
        created.append(widget)
        return widget

    yield _track
    dispose_widgets(created)
