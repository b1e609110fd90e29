from __future__ import annotations

from .qt_dialogs import QtFileDialogService

__all__ = [
    "QtFileDialogService",
]
