from __future__ import annotations

from pathlib import Path

import pytest

from fakes import FakeBuffer, end_of
from textedit.domain.actions import (
    Backspace,
    Click,
    Enter,
    Insert,
    Motion,
    Move,
    Paste,
    Select,
    SelectAll,
    SelectWord,
    Undo,
)
from textedit.domain.errors import DialogCancelled, IoFailure
from textedit.domain.messages import (
    Edit,
    FileOpened,
    FileSaved,
    New,
    Open,
    Save,
    ThemeSelected,
)
from textedit.domain.models import DocumentState, HighlightTheme, LoadedFile
from textedit.domain.tasks import LoadFile, PickFileThenLoad, SaveBuffer
from textedit.services.dispatcher import boot, update
from textedit.services.text_buffer import TextBuffer

NON_EDITS = [
    Move(Motion.LEFT),
    Move(Motion.DOCUMENT_END),
    Select(Motion.WORD_RIGHT),
    SelectWord(),
    SelectAll(),
    Click(3),
]
EDITS = [Insert("x"), Paste("abc"), Enter(), Backspace(), Undo()]


def step(state: DocumentState, event):
    return update(state, event, new_buffer=FakeBuffer)


# ------------------------------
# startup
# ------------------------------


def test_boot_starts_dirty_and_schedules_default_load(tmp_path):
    default = tmp_path / "main.py"
    state, task = boot(default, HighlightTheme.MONOKAI, new_buffer=FakeBuffer)
    assert task == LoadFile(default)
    assert state.is_dirty is True
    assert state.path is None
    assert state.buffer.text() == ""
    assert state.theme is HighlightTheme.MONOKAI


# ------------------------------
# edit actions
# ------------------------------


@pytest.mark.parametrize("action", NON_EDITS)
@pytest.mark.parametrize("dirty", [True, False])
def test_cursor_moves_leave_dirty_flag_alone(action, dirty):
    state = DocumentState(buffer=FakeBuffer("hello"), is_dirty=dirty)
    assert step(state, Edit(action)) is None
    assert state.is_dirty is dirty
    assert state.buffer.performed == [action]


@pytest.mark.parametrize("action", EDITS)
@pytest.mark.parametrize("dirty", [True, False])
def test_edits_always_mark_dirty(action, dirty):
    state = DocumentState(buffer=FakeBuffer("hello"), is_dirty=dirty)
    assert step(state, Edit(action)) is None
    assert state.is_dirty is True


def test_typing_x_appends_and_marks_dirty(qapp):
    state = DocumentState(buffer=TextBuffer("hello"), is_dirty=False)
    end_of(state.buffer)
    update(state, Edit(Insert("x")))
    assert state.buffer.text() == "hellox"
    assert state.is_dirty is True


# ------------------------------
# new / open / save requests
# ------------------------------


def test_new_clears_path_buffer_and_error(tmp_path):
    state = DocumentState(
        buffer=FakeBuffer("old"),
        path=tmp_path / "a.txt",
        is_dirty=True,
        error=IoFailure(None, "boom"),
    )
    assert step(state, New()) is None
    assert state.path is None
    assert state.buffer.text() == ""
    assert state.error is None
    # dirty flag is not touched by New
    assert state.is_dirty is True


def test_open_spawns_pick_then_load(fake_state):
    assert step(fake_state, Open()) == PickFileThenLoad()
    assert fake_state.path is None


def test_save_spawns_save_with_current_path_and_text(tmp_path):
    p = tmp_path / "a.txt"
    state = DocumentState(buffer=FakeBuffer("text"), path=p)
    assert step(state, Save()) == SaveBuffer(path=p, text="text")


def test_save_without_path_asks_for_one(fake_state):
    fake_state.buffer.perform(Insert("abc"))
    assert step(fake_state, Save()) == SaveBuffer(path=None, text="abc")


# ------------------------------
# file results
# ------------------------------


def test_initial_load_scenario():
    state = DocumentState(buffer=FakeBuffer(""), path=None, is_dirty=True)
    step(state, FileOpened(LoadedFile(Path("/tmp/a.txt"), "hello")))
    assert state.path == Path("/tmp/a.txt")
    assert state.buffer.text() == "hello"
    assert state.is_dirty is False
    assert state.error is None


def test_successful_open_replaces_buffer_and_clears_error(tmp_path):
    old = FakeBuffer("old")
    state = DocumentState(buffer=old, error=DialogCancelled())
    step(state, FileOpened(LoadedFile(tmp_path / "b.txt", "new")))
    assert state.buffer is not old
    assert state.buffer.text() == "new"
    assert state.error is None


@pytest.mark.parametrize("error", [DialogCancelled(), IoFailure(2, "No such file or directory")])
def test_failed_open_only_sets_error(tmp_path, error):
    buffer = FakeBuffer("keep")
    p = tmp_path / "a.txt"
    state = DocumentState(buffer=buffer, path=p, is_dirty=True)
    step(state, FileOpened(error))
    assert state.error is error
    assert state.path == p
    assert state.buffer is buffer
    assert state.is_dirty is True


def test_save_as_scenario():
    state = DocumentState(buffer=FakeBuffer("draft"), path=None, is_dirty=True)
    assert step(state, Save()) == SaveBuffer(path=None, text="draft")
    step(state, FileSaved(Path("/tmp/b.txt")))
    assert state.path == Path("/tmp/b.txt")
    assert state.is_dirty is False


def test_save_cancelled_scenario():
    buffer = FakeBuffer("draft")
    state = DocumentState(buffer=buffer, path=None, is_dirty=True)
    step(state, Save())
    step(state, FileSaved(DialogCancelled()))
    assert state.path is None
    assert state.is_dirty is True
    assert state.buffer is buffer
    assert isinstance(state.error, DialogCancelled)


def test_failed_save_keeps_path_and_dirty(tmp_path):
    p = tmp_path / "a.txt"
    state = DocumentState(buffer=FakeBuffer("x"), path=p, is_dirty=True)
    err = IoFailure(28, "No space left on device")
    step(state, FileSaved(err))
    assert state.path == p
    assert state.is_dirty is True
    assert state.error is err


def test_successful_save_clears_previous_error(tmp_path):
    state = DocumentState(buffer=FakeBuffer("x"), error=IoFailure(13, "Permission denied"))
    step(state, FileSaved(tmp_path / "ok.txt"))
    assert state.error is None


# ------------------------------
# theme / unknown
# ------------------------------


def test_theme_selected(fake_state):
    assert step(fake_state, ThemeSelected(HighlightTheme.FRIENDLY)) is None
    assert fake_state.theme is HighlightTheme.FRIENDLY


def test_unknown_event_is_rejected(fake_state):
    with pytest.raises(TypeError):
        step(fake_state, "Open")
