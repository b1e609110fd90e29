from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Motion(Enum):
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    WORD_LEFT = auto()
    WORD_RIGHT = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    DOCUMENT_START = auto()
    DOCUMENT_END = auto()


class Action:
    """Something the user did inside the editor pane."""

    def is_edit(self) -> bool:
        return False


class EditAction(Action):
    """An action that changes the buffer text."""

    def is_edit(self) -> bool:
        return True


# ---- cursor / selection ----


@dataclass(frozen=True)
class Move(Action):
    motion: Motion


@dataclass(frozen=True)
class Select(Action):
    motion: Motion


@dataclass(frozen=True)
class SelectWord(Action):
    pass


@dataclass(frozen=True)
class SelectLine(Action):
    pass


@dataclass(frozen=True)
class SelectAll(Action):
    pass


@dataclass(frozen=True)
class Click(Action):
    position: int


@dataclass(frozen=True)
class Drag(Action):
    position: int


# ---- edits ----


@dataclass(frozen=True)
class Insert(EditAction):
    text: str


@dataclass(frozen=True)
class Paste(EditAction):
    text: str


@dataclass(frozen=True)
class Enter(EditAction):
    pass


@dataclass(frozen=True)
class Backspace(EditAction):
    pass


@dataclass(frozen=True)
class Delete(EditAction):
    pass


@dataclass(frozen=True)
class Undo(EditAction):
    pass


@dataclass(frozen=True)
class Redo(EditAction):
    pass
