from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from textedit.domain.interfaces import ITaskRunner
from textedit.domain.messages import Event
from textedit.domain.models import DocumentState
from textedit.domain.tasks import Task
from textedit.services.dispatcher import BufferFactory, update
from textedit.services.renderer import ViewModel, render
from textedit.services.text_buffer import TextBuffer
from textedit.utils.constants import DEFAULT_GRAMMAR

_LOGGER = logging.getLogger(__name__)


@runtime_checkable
class IMainView(Protocol):
    """Very small surface for a passive view (implemented by the Qt MainWindow)."""

    def apply(self, vm: ViewModel) -> None: ...


class MainPresenter:
    """
    Owns the DocumentState and runs the dispatch loop:
    event -> update() -> render() -> view.apply() -> spawn follow-up task.
    """

    def __init__(
        self,
        view: IMainView,
        runner: ITaskRunner,
        state: DocumentState,
        *,
        default_grammar: str = DEFAULT_GRAMMAR,
        new_buffer: BufferFactory = TextBuffer,
    ) -> None:
        self.view = view
        self.runner = runner
        self.state = state
        self.default_grammar = default_grammar
        self._new_buffer = new_buffer

    def start(self, initial: Task | None = None) -> None:
        self.render()
        if initial is not None:
            self.runner.spawn(initial)

    def dispatch(self, event: Event) -> None:
        _LOGGER.debug("Dispatching %s", type(event).__name__)
        task = update(self.state, event, new_buffer=self._new_buffer)
        self.render()
        if task is not None:
            self.runner.spawn(task)

    def render(self) -> None:
        self.view.apply(render(self.state, default_grammar=self.default_grammar))
