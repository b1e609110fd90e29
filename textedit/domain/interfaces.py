from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from textedit.domain.actions import Action
    from textedit.domain.models import HighlightTheme
    from textedit.domain.tasks import Task


class IFileService(Protocol):
    """Read/write UTF-8 text files. Writes should be atomic when possible."""

    def read_text(self, path: Path) -> str: ...
    def write_text_atomic(self, path: Path, text: str) -> None: ...


class ITextBuffer(Protocol):
    """Opaque handle to the text being edited (owned by the widget library)."""

    def perform(self, action: Action) -> None: ...
    def text(self) -> str: ...
    def cursor_position(self) -> tuple[int, int]:
        """Zero-based (line, column) of the cursor."""
        ...


class ITaskRunner(Protocol):
    """Runs a follow-up task off the dispatch path and reports back with an event."""

    def spawn(self, task: Task) -> None: ...


class IConfigService(Protocol):
    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def as_dict(self) -> Mapping[str, Mapping[str, str]]: ...
    def app_version(self) -> str: ...


class IAppConfig(IConfigService, Protocol):
    @property
    def loaded_from(self) -> Path | None: ...

    def get_version(self) -> str: ...
    def default_file(self) -> Path: ...
    def default_grammar(self) -> str: ...
    def initial_theme_name(self) -> str: ...
    def initial_theme(self) -> HighlightTheme: ...
    def log_level(self) -> str: ...
