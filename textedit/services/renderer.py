"""Pure mapping from DocumentState to what the window should show."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from textedit.domain.errors import IoFailure
from textedit.domain.interfaces import ITextBuffer
from textedit.domain.models import DocumentState, HighlightTheme
from textedit.utils.constants import APP_NAME, DEFAULT_GRAMMAR, NEW_FILE_LABEL


@dataclass(frozen=True)
class ToolbarModel:
    can_new: bool
    can_open: bool
    can_save: bool
    theme: HighlightTheme
    themes: tuple[HighlightTheme, ...]


@dataclass(frozen=True)
class EditorModel:
    buffer: ITextBuffer
    grammar: str
    theme: HighlightTheme


@dataclass(frozen=True)
class StatusModel:
    text: str
    is_error: bool
    position: str


@dataclass(frozen=True)
class ViewModel:
    title: str
    dark: bool
    toolbar: ToolbarModel
    editor: EditorModel
    status: StatusModel


def grammar_for(path: Path | None, default: str = DEFAULT_GRAMMAR) -> str:
    if path is None:
        return default
    return path.suffix.lstrip(".") or default


def status_for(state: DocumentState) -> StatusModel:
    line, column = state.buffer.cursor_position()
    position = f"{line + 1}:{column + 1}"
    # cancelled dialogs are not worth a message
    if isinstance(state.error, IoFailure):
        return StatusModel(text=state.error.message, is_error=True, position=position)
    text = str(state.path) if state.path is not None else NEW_FILE_LABEL
    return StatusModel(text=text, is_error=False, position=position)


def render(state: DocumentState, *, default_grammar: str = DEFAULT_GRAMMAR) -> ViewModel:
    return ViewModel(
        title=APP_NAME,
        dark=state.theme.is_dark(),
        toolbar=ToolbarModel(
            can_new=True,
            can_open=True,
            can_save=state.is_dirty,
            theme=state.theme,
            themes=tuple(HighlightTheme),
        ),
        editor=EditorModel(
            buffer=state.buffer,
            grammar=grammar_for(state.path, default_grammar),
            theme=state.theme,
        ),
        status=status_for(state),
    )
