"""Shared fixtures. Qt tests run on the offscreen platform so no display is needed."""
from __future__ import annotations

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    """A QApplication shared by every Qt test, skipped when PySide6 is unavailable."""
    qt_widgets = pytest.importorskip("PySide6.QtWidgets")
    app = qt_widgets.QApplication.instance() or qt_widgets.QApplication([])
    yield app


@pytest.fixture
def qsettings(tmp_path, qapp):
    """An INI-backed QSettings isolated in a temporary directory."""
    from PySide6.QtCore import QSettings

    return QSettings(str(tmp_path / "imperialcalc.ini"), QSettings.Format.IniFormat)
