from __future__ import annotations

from PyQt6.QtCore import QSignalBlocker, pyqtSignal
from PyQt6.QtGui import QAction, QKeySequence, QPalette
from PyQt6.QtWidgets import (
    QComboBox,
    QLabel,
    QMainWindow,
    QSizePolicy,
    QStatusBar,
    QStyle,
    QToolBar,
    QWidget,
)

from textedit.domain.messages import Edit, New, Open, Save, ThemeSelected
from textedit.domain.models import HighlightTheme
from textedit.services.highlighter import PygmentsHighlighter, editor_colors
from textedit.services.renderer import ViewModel
from textedit.services.text_buffer import TextBuffer
from textedit.services.ui.editor_view import EditorView
from textedit.services.ui.palette import apply_app_palette


class MainWindow(QMainWindow):
    """
    Thin PyQt window. It owns no document state: user input leaves as events through
    `event_emitted`, and `apply()` makes the widgets match a rendered ViewModel.
    """

    event_emitted = pyqtSignal(object)

    def __init__(self, *, app_title: str = "TextEditor") -> None:
        super().__init__()
        self.setWindowTitle(app_title)
        self.resize(1100, 700)

        self.presenter = None
        self._buffer: TextBuffer | None = None
        self._theme: HighlightTheme | None = None
        self._dark: bool | None = None

        # Widgets
        self.editor = EditorView(self)
        self.editor.action_requested.connect(lambda a: self.event_emitted.emit(Edit(a)))
        self.setCentralWidget(self.editor)
        self.highlighter = PygmentsHighlighter()

        self.theme_picker = QComboBox(self)
        for theme in HighlightTheme:
            self.theme_picker.addItem(theme.label, theme)
        self.theme_picker.currentIndexChanged.connect(self._on_theme_index)

        # UI
        self._build_actions()
        self._build_toolbar()
        self._build_status_bar()

    # ---------- UI creation ----------
    def _build_actions(self):
        style = self.style()
        self.act_new = QAction("New", self, shortcut=QKeySequence.StandardKey.New)
        self.act_new.setToolTip("new file")
        self.act_new.triggered.connect(lambda: self.event_emitted.emit(New()))

        self.act_open = QAction("Open…", self, shortcut=QKeySequence.StandardKey.Open)
        self.act_open.setToolTip("open file")
        self.act_open.triggered.connect(lambda: self.event_emitted.emit(Open()))

        self.act_save = QAction("Save", self, shortcut=QKeySequence.StandardKey.Save)
        self.act_save.setToolTip("save file")
        self.act_save.triggered.connect(lambda: self.event_emitted.emit(Save()))

        if style is not None:
            self.act_new.setIcon(style.standardIcon(QStyle.StandardPixmap.SP_FileIcon))
            self.act_open.setIcon(style.standardIcon(QStyle.StandardPixmap.SP_DialogOpenButton))
            self.act_save.setIcon(style.standardIcon(QStyle.StandardPixmap.SP_DialogSaveButton))

    def _build_toolbar(self):
        tb = QToolBar("Main", self)
        tb.setMovable(False)
        for a in (self.act_new, self.act_open, self.act_save):
            tb.addAction(a)

        spacer = QWidget(tb)
        spacer.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred)
        tb.addWidget(spacer)
        tb.addWidget(self.theme_picker)
        self.toolbar = tb
        self.addToolBar(tb)

    def _build_status_bar(self):
        sb = QStatusBar(self)
        self.status_label = QLabel(sb)
        self.position_label = QLabel(sb)
        sb.addWidget(self.status_label, 1)
        sb.addPermanentWidget(self.position_label)
        self.setStatusBar(sb)

    # ---------- Presenter wiring ----------
    def attach_presenter(self, presenter) -> None:
        self.presenter = presenter
        self.event_emitted.connect(presenter.dispatch)

    # ---------- Rendering ----------
    def apply(self, vm: ViewModel) -> None:
        if self.windowTitle() != vm.title:
            self.setWindowTitle(vm.title)

        # toolbar
        self.act_new.setEnabled(vm.toolbar.can_new)
        self.act_open.setEnabled(vm.toolbar.can_open)
        self.act_save.setEnabled(vm.toolbar.can_save)
        idx = self.theme_picker.findText(vm.toolbar.theme.label)
        if idx != self.theme_picker.currentIndex():
            blocker = QSignalBlocker(self.theme_picker)
            self.theme_picker.setCurrentIndex(idx)
            blocker.unblock()

        # editor pane
        if vm.editor.buffer is not self._buffer:
            # keep a reference so the old document outlives the rebinding
            self._buffer = vm.editor.buffer
            doc = vm.editor.buffer.document()
            self.editor.setDocument(doc)
            self.highlighter.setDocument(doc)
        self.highlighter.configure(vm.editor.grammar, vm.editor.theme)
        self.editor.setTextCursor(vm.editor.buffer.cursor())
        self.editor.ensureCursorVisible()
        self._apply_colors(vm.editor.theme, vm.dark)

        # status bar
        self.status_label.setText(vm.status.text)
        self.status_label.setStyleSheet("color: #e5484d;" if vm.status.is_error else "")
        self.position_label.setText(vm.status.position)

    def _apply_colors(self, theme: HighlightTheme, dark: bool) -> None:
        if dark != self._dark:
            self._dark = dark
            apply_app_palette(dark)
        if theme is self._theme:
            return
        self._theme = theme
        background, foreground = editor_colors(theme)
        pal = self.editor.palette()
        pal.setColor(QPalette.ColorRole.Base, background)
        pal.setColor(QPalette.ColorRole.Text, foreground)
        self.editor.setPalette(pal)

    # ---------- Slots ----------
    def _on_theme_index(self, index: int) -> None:
        theme = self.theme_picker.itemData(index)
        if isinstance(theme, HighlightTheme):
            self.event_emitted.emit(ThemeSelected(theme))
