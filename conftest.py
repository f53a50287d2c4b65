"""
Shared Qt fixture.

Qt allows one application object per process, so every Qt test module uses
this QApplication instead of creating its own.
"""
import os

import pytest


@pytest.fixture(scope="session")
def qt_app():
    # Render without a display
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
