from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFontDatabase, QInputMethodEvent, QKeyEvent, QKeySequence, QMouseEvent
from PyQt6.QtWidgets import QApplication, QPlainTextEdit, QWidget

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
    SelectWord,
    Undo,
)

_Mod = Qt.KeyboardModifier

_NAV_KEYS: dict[Qt.Key, Motion] = {
    Qt.Key.Key_Left: Motion.LEFT,
    Qt.Key.Key_Right: Motion.RIGHT,
    Qt.Key.Key_Up: Motion.UP,
    Qt.Key.Key_Down: Motion.DOWN,
    Qt.Key.Key_Home: Motion.HOME,
    Qt.Key.Key_End: Motion.END,
    Qt.Key.Key_PageUp: Motion.PAGE_UP,
    Qt.Key.Key_PageDown: Motion.PAGE_DOWN,
}

# with Ctrl held
_CTRL_NAV: dict[Motion, Motion] = {
    Motion.LEFT: Motion.WORD_LEFT,
    Motion.RIGHT: Motion.WORD_RIGHT,
    Motion.HOME: Motion.DOCUMENT_START,
    Motion.END: Motion.DOCUMENT_END,
}


def action_for_key(key: Qt.Key, modifiers: Qt.KeyboardModifier, text: str) -> Action | None:
    """Translate a key press into an editor action; None if the editor should ignore it."""
    ctrl = bool(modifiers & _Mod.ControlModifier)
    shift = bool(modifiers & _Mod.ShiftModifier)

    motion = _NAV_KEYS.get(key)
    if motion is not None:
        if ctrl:
            motion = _CTRL_NAV.get(motion, motion)
        return Select(motion) if shift else Move(motion)

    if key in (Qt.Key.Key_Return, Qt.Key.Key_Enter):
        return Enter()
    if key == Qt.Key.Key_Backspace:
        return Backspace()
    if key == Qt.Key.Key_Delete:
        return Delete()
    if key == Qt.Key.Key_Tab:
        return Insert("\t")

    if ctrl or modifiers & _Mod.AltModifier:
        return None
    if text and text.isprintable():
        return Insert(text)
    return None


class EditorView(QPlainTextEdit):
    """
    Editor pane. It never edits its document directly: keyboard, mouse and input-method
    input is turned into actions and emitted for the dispatcher to apply.
    """

    action_requested = pyqtSignal(object)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setFont(QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont))
        self.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)
        self.setTabStopDistance(4 * self.fontMetrics().horizontalAdvance(" "))
        # these paths would change the text behind the dispatcher's back
        self.setContextMenuPolicy(Qt.ContextMenuPolicy.NoContextMenu)
        self.setAcceptDrops(False)
        self.setAttribute(Qt.WidgetAttribute.WA_InputMethodEnabled, True)

    # ---------- keyboard ----------

    def keyPressEvent(self, e: QKeyEvent | None) -> None:
        if e is None:
            return
        action = self._standard_key_action(e)
        if action is None:
            try:
                key = Qt.Key(e.key())
            except ValueError:
                e.ignore()
                return
            action = action_for_key(key, e.modifiers(), e.text())
        if action is None:
            e.ignore()
            return
        e.accept()
        self.action_requested.emit(action)

    def _standard_key_action(self, e: QKeyEvent) -> Action | None:
        Std = QKeySequence.StandardKey
        if e.matches(Std.SelectAll):
            return SelectAll()
        if e.matches(Std.Undo):
            return Undo()
        if e.matches(Std.Redo):
            return Redo()
        if e.matches(Std.Paste):
            clip = QApplication.clipboard()
            text = clip.text() if clip is not None else ""
            return Paste(text) if text else None
        if e.matches(Std.Copy):
            self.copy()
            return None
        if e.matches(Std.Cut):
            if not self.textCursor().hasSelection():
                return None
            self.copy()
            return Delete()
        return None

    def inputMethodEvent(self, e: QInputMethodEvent | None) -> None:
        if e is None:
            return
        if e.commitString():
            self.action_requested.emit(Insert(e.commitString()))
        e.accept()

    # ---------- mouse ----------

    def mousePressEvent(self, e: QMouseEvent | None) -> None:
        if e is None or e.button() != Qt.MouseButton.LeftButton:
            return
        self.setFocus(Qt.FocusReason.MouseFocusReason)
        pos = self.cursorForPosition(e.position().toPoint()).position()
        if e.modifiers() & _Mod.ShiftModifier:
            self.action_requested.emit(Drag(pos))
        else:
            self.action_requested.emit(Click(pos))

    def mouseMoveEvent(self, e: QMouseEvent | None) -> None:
        if e is None or not (e.buttons() & Qt.MouseButton.LeftButton):
            return
        pos = self.cursorForPosition(e.position().toPoint()).position()
        self.action_requested.emit(Drag(pos))

    def mouseDoubleClickEvent(self, e: QMouseEvent | None) -> None:
        if e is None or e.button() != Qt.MouseButton.LeftButton:
            return
        pos = self.cursorForPosition(e.position().toPoint()).position()
        self.action_requested.emit(Click(pos))
        self.action_requested.emit(SelectWord())

    def mouseReleaseEvent(self, e: QMouseEvent | None) -> None:
        if e is not None:
            e.accept()
