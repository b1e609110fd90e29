"""Events consumed by the dispatcher."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from textedit.domain.actions import Action
from textedit.domain.errors import EditorError
from textedit.domain.models import HighlightTheme, LoadedFile


@dataclass(frozen=True)
class Edit:
    action: Action


@dataclass(frozen=True)
class New:
    pass


@dataclass(frozen=True)
class Open:
    pass


@dataclass(frozen=True)
class Save:
    pass


@dataclass(frozen=True)
class FileOpened:
    result: LoadedFile | EditorError


@dataclass(frozen=True)
class FileSaved:
    result: Path | EditorError


@dataclass(frozen=True)
class ThemeSelected:
    theme: HighlightTheme


Event = Union[Edit, New, Open, Save, FileOpened, FileSaved, ThemeSelected]
