"""
State transitions. `update` is the only place DocumentState changes.

No I/O happens here: anything that needs the file system or a dialog is returned
as a task description and comes back later as FileOpened/FileSaved.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from textedit.domain.errors import EditorError
from textedit.domain.interfaces import ITextBuffer
from textedit.domain.messages import (
    Edit,
    Event,
    FileOpened,
    FileSaved,
    New,
    Open,
    Save,
    ThemeSelected,
)
from textedit.domain.models import DocumentState, HighlightTheme
from textedit.domain.tasks import LoadFile, PickFileThenLoad, SaveBuffer, Task
from textedit.services.text_buffer import TextBuffer

BufferFactory = Callable[[str], ITextBuffer]


def boot(
    default_file: Path,
    theme: HighlightTheme = HighlightTheme.SOLARIZED_DARK,
    *,
    new_buffer: BufferFactory = TextBuffer,
) -> tuple[DocumentState, Task]:
    """Startup state (empty, dirty) plus the initial load of `default_file`."""
    state = DocumentState(buffer=new_buffer(""), theme=theme, is_dirty=True)
    return state, LoadFile(default_file)


def update(
    state: DocumentState, event: Event, *, new_buffer: BufferFactory = TextBuffer
) -> Task | None:
    if isinstance(event, Edit):
        state.is_dirty = state.is_dirty or event.action.is_edit()
        state.buffer.perform(event.action)
        return None

    if isinstance(event, New):
        state.path = None
        state.buffer = new_buffer("")
        state.error = None
        return None

    if isinstance(event, Open):
        return PickFileThenLoad()

    if isinstance(event, Save):
        return SaveBuffer(path=state.path, text=state.buffer.text())

    if isinstance(event, FileOpened):
        if isinstance(event.result, EditorError):
            state.error = event.result
            return None
        state.path = event.result.path
        state.is_dirty = False
        state.buffer = new_buffer(event.result.text)
        state.error = None
        return None

    if isinstance(event, FileSaved):
        if isinstance(event.result, EditorError):
            state.error = event.result
            return None
        state.path = event.result
        state.is_dirty = False
        state.error = None
        return None

    if isinstance(event, ThemeSelected):
        state.theme = event.theme
        return None

    raise TypeError(f"Unknown event: {event!r}")
