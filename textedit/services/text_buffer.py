from __future__ import annotations

import re

from PyQt6.QtGui import QTextBlock, QTextBlockUserData, QTextCursor, QTextDocument
from PyQt6.QtWidgets import QPlainTextDocumentLayout

from textedit.domain.actions import (
    Action,
    Backspace,
    Click,
    Delete,
    Drag,
    Enter,
    Insert,
    Motion,
    Move,
    Paste,
    Redo,
    Select,
    SelectAll,
    SelectLine,
    SelectWord,
    Undo,
)
from textedit.domain.interfaces import ITextBuffer

PAGE_LINES = 20

# everything QTextDocument.setPlainText() turns into a block boundary
_BREAK_RE = re.compile("(\r\n|[\r\n\u2029\ufdd0\ufdd1])")

_Op = QTextCursor.MoveOperation

_MOTIONS: dict[Motion, tuple[QTextCursor.MoveOperation, int]] = {
    Motion.LEFT: (_Op.Left, 1),
    Motion.RIGHT: (_Op.Right, 1),
    Motion.UP: (_Op.Up, 1),
    Motion.DOWN: (_Op.Down, 1),
    Motion.WORD_LEFT: (_Op.WordLeft, 1),
    Motion.WORD_RIGHT: (_Op.WordRight, 1),
    Motion.HOME: (_Op.StartOfBlock, 1),
    Motion.END: (_Op.EndOfBlock, 1),
    Motion.PAGE_UP: (_Op.Up, PAGE_LINES),
    Motion.PAGE_DOWN: (_Op.Down, PAGE_LINES),
    Motion.DOCUMENT_START: (_Op.Start, 1),
    Motion.DOCUMENT_END: (_Op.End, 1),
}


class _LineBreak(QTextBlockUserData):
    """The line break that preceded this block in the loaded text."""

    def __init__(self, sep: str) -> None:
        super().__init__()
        self.sep = sep


class TextBuffer(ITextBuffer):
    """
    Text buffer backed by a QTextDocument plus the editing cursor.

    The document is what the editor widget displays; all edits go through `perform`
    so the dispatcher stays in control of the dirty flag.
    """

    def __init__(self, text: str = "") -> None:
        breaks = _BREAK_RE.split(text)[1::2]
        # line breaks typed by the user follow the first one in the file
        self._newline = breaks[0] if breaks and breaks[0] in ("\r\n", "\r") else "\n"
        self._loaded = text

        self._doc = QTextDocument()
        self._doc.setDocumentLayout(QPlainTextDocumentLayout(self._doc))
        self._doc.setPlainText(text)
        # QTextDocument only keeps blocks; each block remembers the break in front of it
        block = self._doc.firstBlock().next()
        for sep in breaks:
            if not block.isValid():
                break
            block.setUserData(_LineBreak(sep))
            block = block.next()
        self._doc.setModified(False)
        self._cursor = QTextCursor(self._doc)

    # ---------- ITextBuffer ----------

    def perform(self, action: Action) -> None:
        c = self._cursor
        if isinstance(action, Move):
            op, n = _MOTIONS[action.motion]
            c.movePosition(op, QTextCursor.MoveMode.MoveAnchor, n)
        elif isinstance(action, Select):
            op, n = _MOTIONS[action.motion]
            c.movePosition(op, QTextCursor.MoveMode.KeepAnchor, n)
        elif isinstance(action, SelectWord):
            c.select(QTextCursor.SelectionType.WordUnderCursor)
        elif isinstance(action, SelectLine):
            c.movePosition(_Op.StartOfBlock)
            c.movePosition(_Op.EndOfBlock, QTextCursor.MoveMode.KeepAnchor)
        elif isinstance(action, SelectAll):
            c.select(QTextCursor.SelectionType.Document)
        elif isinstance(action, Click):
            c.setPosition(self._clamp(action.position))
        elif isinstance(action, Drag):
            c.setPosition(self._clamp(action.position), QTextCursor.MoveMode.KeepAnchor)
        elif isinstance(action, (Insert, Paste)):
            c.insertText(action.text)
        elif isinstance(action, Enter):
            c.insertBlock()
        elif isinstance(action, Backspace):
            if c.hasSelection():
                c.removeSelectedText()
            else:
                c.deletePreviousChar()
        elif isinstance(action, Delete):
            if c.hasSelection():
                c.removeSelectedText()
            else:
                c.deleteChar()
        elif isinstance(action, Undo):
            self._doc.undo(c)
        elif isinstance(action, Redo):
            self._doc.redo(c)
        else:
            raise TypeError(f"Unsupported editor action: {action!r}")

    def text(self) -> str:
        if not self._doc.isModified():
            return self._loaded
        # QTextBlock.text() is raw: non-breaking spaces are kept
        block = self._doc.firstBlock()
        pieces = [block.text()]
        block = block.next()
        while block.isValid():
            pieces.append(self._break_before(block))
            pieces.append(block.text())
            block = block.next()
        return "".join(pieces)

    def cursor_position(self) -> tuple[int, int]:
        """Line and column in characters; Qt counts the column in UTF-16 units."""
        line_text = self._cursor.block().text()
        units = self._cursor.positionInBlock()
        head = line_text.encode("utf-16-le")[: 2 * units].decode("utf-16-le", errors="ignore")
        return self._cursor.blockNumber(), len(head)

    # ---------- widget binding ----------

    def document(self) -> QTextDocument:
        return self._doc

    def cursor(self) -> QTextCursor:
        """A copy of the editing cursor, for mirroring into the view."""
        return QTextCursor(self._cursor)

    def selected_text(self) -> str:
        return self._cursor.selectedText().replace("\u2029", self._newline)

    def _break_before(self, block: QTextBlock) -> str:
        data = block.userData()
        return data.sep if isinstance(data, _LineBreak) else self._newline

    def _clamp(self, position: int) -> int:
        last = max(0, self._doc.characterCount() - 1)
        return max(0, min(position, last))
