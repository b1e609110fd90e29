from __future__ import annotations

import logging
from collections.abc import Callable
from functools import partial
from typing import Any

from PyQt6.QtCore import QObject, QRunnable, QThreadPool, QTimer, pyqtSignal

from textedit.domain.errors import DialogCancelled, EditorError
from textedit.domain.interfaces import IFileService
from textedit.domain.messages import Event, FileOpened, FileSaved
from textedit.domain.tasks import LoadFile, PickFileThenLoad, SaveBuffer, Task
from textedit.services.file_ops import (
    load_file,
    pick_file_then_load,
    resolve_save_path,
    save_buffer,
)
from textedit.services.ui.ports.dialogs import IFileDialogService

_LOGGER = logging.getLogger(__name__)


class _WorkerSignals(QObject):
    done = pyqtSignal(object)


class _Worker(QRunnable):
    """Runs one blocking call on the pool and emits its outcome wrapped as an event."""

    def __init__(self, fn: Callable[[], Any], wrap: Callable[[Any], Event]) -> None:
        super().__init__()
        self._fn = fn
        self._wrap = wrap
        self.signals = _WorkerSignals()

    def run(self) -> None:
        try:
            result = self._fn()
        except EditorError as e:
            result = e
        except Exception:
            _LOGGER.exception("Background task failed unexpectedly")
            return
        self.signals.done.emit(self._wrap(result))


class QtTaskRunner(QObject):
    """
    Executes task descriptions from the dispatcher.

    Native dialogs run on the GUI thread (Qt requirement); file reads and writes run on
    a QThreadPool. Every task ends in exactly one `completed` event (unless it crashed).
    """

    completed = pyqtSignal(object)

    def __init__(
        self,
        files: IFileService,
        dialogs: IFileDialogService,
        *,
        pool: QThreadPool | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._files = files
        self._dialogs = dialogs
        self._pool = pool or QThreadPool(self)
        self._dialog_parent: Any | None = None

    @property
    def pool(self) -> QThreadPool:
        return self._pool

    def set_dialog_parent(self, widget: Any | None) -> None:
        self._dialog_parent = widget

    def spawn(self, task: Task) -> None:
        _LOGGER.debug("Spawning %s", type(task).__name__)
        # never run inside the dispatch that requested it
        QTimer.singleShot(0, partial(self.run_now, task))

    def run_now(self, task: Task) -> None:
        if isinstance(task, LoadFile):
            self._submit(partial(load_file, self._files, task.path), FileOpened)
        elif isinstance(task, PickFileThenLoad):
            try:
                load = pick_file_then_load(self._dialogs, self._files, self._dialog_parent)
            except DialogCancelled as e:
                self.completed.emit(FileOpened(e))
                return
            self._submit(load, FileOpened)
        elif isinstance(task, SaveBuffer):
            try:
                path = resolve_save_path(self._dialogs, task.path, self._dialog_parent)
            except DialogCancelled as e:
                self.completed.emit(FileSaved(e))
                return
            self._submit(partial(save_buffer, self._files, path, task.text), FileSaved)
        else:
            raise TypeError(f"Unknown task: {task!r}")

    def _submit(self, fn: Callable[[], Any], wrap: Callable[[Any], Event]) -> None:
        worker = _Worker(fn, wrap)
        worker.signals.done.connect(self.completed)
        self._pool.start(worker)
