"""Shared fixtures for the Qt parts of the test suite."""

import os

# no display needed for widgets
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for the whole run."""
    app = QApplication.instance() or QApplication([])
    yield app
