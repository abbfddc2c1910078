"""Shared fixtures for the Thai Minima test suite."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def qt_app():
    """Timers, widgets and the clipboard need a Qt application object."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app
