from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from textedit.domain.errors import EditorError
from textedit.domain.interfaces import ITextBuffer


class HighlightTheme(Enum):
    """Highlight themes offered by the picker, backed by Pygments styles."""

    SOLARIZED_DARK = ("solarized-dark", "Solarized Dark", True)
    SOLARIZED_LIGHT = ("solarized-light", "Solarized Light", False)
    MONOKAI = ("monokai", "Monokai", True)
    GITHUB_DARK = ("github-dark", "GitHub Dark", True)
    FRIENDLY = ("friendly", "Friendly", False)
    DEFAULT = ("default", "Default", False)

    def __init__(self, style: str, label: str, dark: bool) -> None:
        self.style = style
        self.label = label
        self.dark = dark

    def is_dark(self) -> bool:
        return self.dark

    def __str__(self) -> str:
        return self.label

    @classmethod
    def from_style(cls, name: str) -> HighlightTheme:
        key = name.strip().lower()
        for theme in cls:
            if theme.style == key:
                return theme
        raise ValueError(f"Unknown highlight theme: {name!r}")


@dataclass(frozen=True)
class LoadedFile:
    path: Path
    text: str


@dataclass
class DocumentState:
    """
    Everything the window shows. Owned by the dispatch loop and mutated in place.

    `is_dirty` starts out True: the initial load is still in flight.
    """

    buffer: ITextBuffer
    path: Path | None = None
    theme: HighlightTheme = HighlightTheme.SOLARIZED_DARK
    is_dirty: bool = True
    error: EditorError | None = None
