from __future__ import annotations

import errno
from pathlib import Path

import pytest

from fakes import FakeDialogs
from textedit.domain.errors import DialogCancelled, IoFailure
from textedit.domain.messages import FileOpened, Save
from textedit.domain.models import LoadedFile
from textedit.domain.tasks import SaveBuffer
from textedit.services.dispatcher import boot, update
from textedit.services.file_ops import (
    load_file,
    pick_file_then_load,
    pick_open_path,
    resolve_save_path,
    save_buffer,
)
from textedit.utils.constants import OPEN_DIALOG_TITLE, SAVE_DIALOG_TITLE


class BrokenFiles:
    def read_text(self, path: Path) -> str:
        raise PermissionError(errno.EACCES, "Permission denied")

    def write_text_atomic(self, path: Path, text: str) -> None:
        raise OSError(errno.ENOSPC, "No space left on device")


def test_load_file_returns_path_and_text(tmp_path, file_service):
    p = tmp_path / "a.txt"
    p.write_text("hello", encoding="utf-8")
    assert load_file(file_service, p) == LoadedFile(path=p, text="hello")


def test_load_file_missing_maps_to_io_failure(tmp_path, file_service):
    with pytest.raises(IoFailure) as info:
        load_file(file_service, tmp_path / "nope.txt")
    assert info.value.code == errno.ENOENT


def test_load_file_not_utf8_maps_to_io_failure(tmp_path, file_service):
    p = tmp_path / "bin.dat"
    p.write_bytes(b"\x89PNG\r\n\x1a\n\xff\xff")
    with pytest.raises(IoFailure) as info:
        load_file(file_service, p)
    assert info.value.code == errno.EILSEQ


def test_load_file_permission_error_keeps_message(tmp_path):
    with pytest.raises(IoFailure) as info:
        load_file(BrokenFiles(), tmp_path / "a.txt")
    assert info.value.message == "Permission denied"


def test_save_buffer_writes_and_returns_path(tmp_path, file_service):
    p = tmp_path / "out.txt"
    assert save_buffer(file_service, p, "data\n") == p
    assert p.read_bytes() == b"data\n"


def test_save_buffer_failure_maps_to_io_failure(tmp_path):
    with pytest.raises(IoFailure) as info:
        save_buffer(BrokenFiles(), tmp_path / "out.txt", "x")
    assert info.value.code == errno.ENOSPC


def test_pick_open_path_cancel_raises_dialog_cancelled():
    dialogs = FakeDialogs(open_path=None)
    with pytest.raises(DialogCancelled):
        pick_open_path(dialogs)
    assert dialogs.calls == [("open", OPEN_DIALOG_TITLE)]


def test_resolve_save_path_known_path_skips_dialog(tmp_path):
    dialogs = FakeDialogs(save_path=tmp_path / "other.txt")
    p = tmp_path / "known.txt"
    assert resolve_save_path(dialogs, p) == p
    assert dialogs.calls == []


def test_resolve_save_path_prompts_when_missing(tmp_path):
    chosen = tmp_path / "b.txt"
    dialogs = FakeDialogs(save_path=chosen)
    assert resolve_save_path(dialogs, None) == chosen
    assert dialogs.calls == [("save", SAVE_DIALOG_TITLE)]


def test_resolve_save_path_cancel_raises():
    with pytest.raises(DialogCancelled):
        resolve_save_path(FakeDialogs(save_path=None), None)


def test_pick_file_then_load_defers_the_read(tmp_path, file_service):
    p = tmp_path / "picked.rs"
    dialogs = FakeDialogs(open_path=p)
    load = pick_file_then_load(dialogs, file_service)
    assert dialogs.calls == [("open", OPEN_DIALOG_TITLE)]

    # the file only has to exist once the load actually runs
    p.write_text("fn main() {}\n", encoding="utf-8")
    loaded = load()
    assert loaded.path == p
    assert loaded.text == "fn main() {}\n"


def test_pick_file_then_load_cancel_raises_before_reading(file_service):
    with pytest.raises(DialogCancelled):
        pick_file_then_load(FakeDialogs(open_path=None), file_service)


def test_save_into_missing_dir_reports_errno(tmp_path, file_service):
    with pytest.raises(IoFailure) as saved:
        save_buffer(file_service, tmp_path / "nodir" / "x.txt", "x")
    with pytest.raises(IoFailure) as loaded:
        load_file(file_service, tmp_path / "nodir" / "x.txt")

    assert saved.value.code == errno.ENOENT
    # reads and writes describe the same failure the same way
    assert saved.value.message == loaded.value.message


@pytest.mark.parametrize(
    "raw",
    [
        "first\r\nsecond\n\tthird ✓",
        "old mac\rline\rendings\r",
        "no trailing newline",
        "trailing\n\n",
        "crlf then lf\r\n\nthen cr\r\r\nend",
        "para\u2029sep and\u00a0nbsp kept",
        "",
    ],
)
def test_open_then_save_through_buffer_is_byte_identical(qapp, tmp_path, file_service, raw):
    src = tmp_path / "src.txt"
    src.write_bytes(raw.encode("utf-8"))

    state, _ = boot(src)
    update(state, FileOpened(load_file(file_service, src)))
    assert state.buffer.text() == raw

    task = update(state, Save())
    assert isinstance(task, SaveBuffer)
    dst = save_buffer(file_service, tmp_path / "dst.txt", task.text)
    assert dst.read_bytes() == raw.encode("utf-8")
