"""
The file operations behind Open/Save.

Dialog helpers must run on the GUI thread; `load_file` and `save_buffer` are plain
blocking calls meant for a worker thread. Every failure leaves as an `EditorError`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import partial
from pathlib import Path
from typing import Any

from textedit.domain.errors import DialogCancelled, IoFailure
from textedit.domain.interfaces import IFileService
from textedit.domain.models import LoadedFile
from textedit.services.ui.ports.dialogs import IFileDialogService
from textedit.utils.constants import FILE_FILTER, OPEN_DIALOG_TITLE, SAVE_DIALOG_TITLE

_LOGGER = logging.getLogger(__name__)


def load_file(files: IFileService, path: Path) -> LoadedFile:
    try:
        text = files.read_text(path)
    except UnicodeDecodeError as e:
        raise IoFailure.from_decode_error(e) from e
    except OSError as e:
        raise IoFailure.from_os_error(e) from e
    _LOGGER.debug("Loaded %s (%d chars)", path, len(text))
    return LoadedFile(path=path, text=text)


def save_buffer(files: IFileService, path: Path, text: str) -> Path:
    try:
        files.write_text_atomic(path, text)
    except OSError as e:
        raise IoFailure.from_os_error(e) from e
    _LOGGER.debug("Saved %s", path)
    return path


def pick_open_path(dialogs: IFileDialogService, parent: Any | None = None) -> Path:
    path = dialogs.get_open_file(parent, OPEN_DIALOG_TITLE, None, FILE_FILTER)
    if path is None:
        raise DialogCancelled()
    return path


def resolve_save_path(
    dialogs: IFileDialogService, path: Path | None, parent: Any | None = None
) -> Path:
    """Return `path` as-is, or ask for one with a "save file" dialog."""
    if path is not None:
        return path
    chosen = dialogs.get_save_file(parent, SAVE_DIALOG_TITLE, None, FILE_FILTER)
    if chosen is None:
        raise DialogCancelled()
    return chosen


def pick_file_then_load(
    dialogs: IFileDialogService, files: IFileService, parent: Any | None = None
) -> Callable[[], LoadedFile]:
    """
    Ask for a file now and hand back the blocking load for it.

    The dialog has to run on the GUI thread; the returned call is meant for a worker.
    """
    return partial(load_file, files, pick_open_path(dialogs, parent))
