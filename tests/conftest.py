from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication

from fakes import FakeBuffer, FakeDialogs, FakeRunner
from textedit.domain.models import DocumentState
from textedit.services.file_service import FileService


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        # Don't forcibly quit a shared app; only close if we created it here.
        if created:
            app.quit()


# --- Other common fixtures ---


@pytest.fixture()
def file_service() -> FileService:
    return FileService()


@pytest.fixture()
def fake_state() -> DocumentState:
    return DocumentState(buffer=FakeBuffer())


@pytest.fixture()
def fake_dialogs() -> FakeDialogs:
    return FakeDialogs()


@pytest.fixture()
def fake_runner() -> FakeRunner:
    return FakeRunner()
