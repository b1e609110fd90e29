from __future__ import annotations

from pathlib import Path

from fakes import FakeBuffer, FakeRunner
from textedit.domain.actions import Insert
from textedit.domain.errors import DialogCancelled
from textedit.domain.messages import Edit, FileOpened, FileSaved, Open, Save
from textedit.domain.models import DocumentState, LoadedFile
from textedit.domain.tasks import LoadFile, PickFileThenLoad, SaveBuffer
from textedit.services.renderer import ViewModel
from textedit.services.ui.presenters import IMainView, MainPresenter


class FakeView:
    def __init__(self) -> None:
        self.frames: list[ViewModel] = []

    def apply(self, vm: ViewModel) -> None:
        self.frames.append(vm)

    @property
    def last(self) -> ViewModel:
        return self.frames[-1]


def make(state: DocumentState | None = None):
    view = FakeView()
    runner = FakeRunner()
    presenter = MainPresenter(
        view=view,
        runner=runner,
        state=state or DocumentState(buffer=FakeBuffer()),
        default_grammar="txt",
        new_buffer=FakeBuffer,
    )
    return presenter, view, runner


def test_fake_view_satisfies_port():
    assert isinstance(FakeView(), IMainView)


def test_start_renders_then_spawns_initial_task():
    presenter, view, runner = make()
    presenter.start(LoadFile(Path("/tmp/a.txt")))
    assert len(view.frames) == 1
    assert runner.spawned == [LoadFile(Path("/tmp/a.txt"))]
    assert view.last.editor.grammar == "txt"


def test_every_dispatch_renders_once():
    presenter, view, runner = make()
    presenter.dispatch(Edit(Insert("a")))
    presenter.dispatch(Edit(Insert("b")))
    assert len(view.frames) == 2
    assert runner.spawned == []
    assert view.last.status.position == "1:3"


def test_open_spawns_picker_and_result_updates_view():
    presenter, view, runner = make()
    presenter.dispatch(Open())
    assert runner.spawned == [PickFileThenLoad()]

    presenter.dispatch(FileOpened(LoadedFile(Path("/tmp/a.rs"), "fn main() {}")))
    assert view.last.status.text == str(Path("/tmp/a.rs"))
    assert view.last.editor.grammar == "rs"
    assert view.last.toolbar.can_save is False


def test_save_as_round_trip_through_presenter():
    presenter, view, runner = make(DocumentState(buffer=FakeBuffer("draft"), is_dirty=True))
    presenter.dispatch(Save())
    assert runner.spawned == [SaveBuffer(path=None, text="draft")]

    presenter.dispatch(FileSaved(Path("/tmp/b.txt")))
    assert presenter.state.path == Path("/tmp/b.txt")
    assert view.last.toolbar.can_save is False


def test_cancelled_save_keeps_save_enabled():
    presenter, view, _ = make(DocumentState(buffer=FakeBuffer("draft"), is_dirty=True))
    presenter.dispatch(Save())
    presenter.dispatch(FileSaved(DialogCancelled()))
    assert view.last.toolbar.can_save is True
    assert view.last.status.is_error is False
