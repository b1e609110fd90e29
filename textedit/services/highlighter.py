from __future__ import annotations

import logging

from pygments.lexer import Lexer
from pygments.lexers import get_lexer_for_filename
from pygments.lexers.special import TextLexer
from pygments.styles import get_style_by_name
from pygments.token import Token, _TokenType
from pygments.util import ClassNotFound
from PyQt6.QtGui import QColor, QFont, QSyntaxHighlighter, QTextCharFormat, QTextDocument

from textedit.domain.models import HighlightTheme

_LOGGER = logging.getLogger(__name__)

# style_for_token() keys that actually change how a token looks
_FORMAT_KEYS = ("color", "bgcolor", "bold", "italic", "underline")


def lexer_for_grammar(grammar: str) -> Lexer:
    """Pick a Pygments lexer from a file extension ("py", "rs", ...); plain text if unknown."""
    opts = {"stripnl": False, "ensurenl": False}
    try:
        return get_lexer_for_filename(f"file.{grammar}", **opts)
    except ClassNotFound:
        _LOGGER.debug("No lexer for extension %r, using plain text", grammar)
        return TextLexer(**opts)


def editor_colors(theme: HighlightTheme) -> tuple[QColor, QColor]:
    """(background, foreground) for the editor pane under `theme`."""
    style = get_style_by_name(theme.style)
    background = QColor(style.background_color or "#ffffff")
    fg = style.style_for_token(Token.Text).get("color")
    if fg:
        foreground = QColor(f"#{fg}")
    else:
        foreground = QColor("#e6e6e6" if theme.is_dark() else "#111111")
    return background, foreground


def _utf16_len(s: str) -> int:
    return len(s.encode("utf-16-le")) // 2


LineSpans = list[tuple[int, int, _TokenType]]


def lex_lines(lexer: Lexer, text: str) -> list[tuple[LineSpans, _TokenType | None]]:
    """
    Lex `text` in one go and cut the tokens at line breaks.

    Each line gets its (start, length, token type) spans in UTF-16 offsets, plus the
    token type its line break belongs to (None for the last line). Constructs that span
    lines, such as docstrings, are therefore coloured correctly on every line.
    """
    pos = 0
    if text.startswith("\ufeff"):
        text, pos = text[1:], 1
    lines: list[tuple[LineSpans, _TokenType | None]] = []
    spans: LineSpans = []
    for ttype, value in lexer.get_tokens(text):
        for i, part in enumerate(value.split("\n")):
            if i:
                lines.append((spans, ttype))
                spans, pos = [], 0
            if part:
                n = _utf16_len(part)
                spans.append((pos, n, ttype))
                pos += n
    lines.append((spans, None))
    return lines


class PygmentsHighlighter(QSyntaxHighlighter):
    """Per-block syntax colouring driven by a Pygments lexer and style."""

    def __init__(self, document: QTextDocument | None = None) -> None:
        super().__init__(document)
        self._grammar: str | None = None
        self._theme: HighlightTheme | None = None
        self._lexer: Lexer = TextLexer(stripnl=False, ensurenl=False)
        self._formats: dict[_TokenType, QTextCharFormat | None] = {}
        # whole-document lex, reused until the document's revision moves on
        self._lines: list[tuple[LineSpans, _TokenType | None]] | None = None
        self._lines_key: tuple[int, int] | None = None
        self._states: dict[_TokenType, int] = {}

    @property
    def grammar(self) -> str | None:
        return self._grammar

    @property
    def theme(self) -> HighlightTheme | None:
        return self._theme

    def configure(self, grammar: str, theme: HighlightTheme) -> None:
        changed = False
        if grammar != self._grammar:
            self._grammar = grammar
            self._lexer = lexer_for_grammar(grammar)
            self._lines = None
            changed = True
        if theme is not self._theme:
            self._theme = theme
            self._formats.clear()
            changed = True
        if changed and self.document() is not None:
            self.rehighlight()

    def format_for(self, ttype: _TokenType) -> QTextCharFormat | None:
        if ttype in self._formats:
            return self._formats[ttype]
        fmt = self._build_format(ttype)
        self._formats[ttype] = fmt
        return fmt

    def setDocument(self, doc: QTextDocument | None) -> None:
        self._lines = None
        super().setDocument(doc)

    def highlightBlock(self, text: str | None) -> None:
        if self._theme is None:
            return
        lines = self._document_lines()
        n = self.currentBlock().blockNumber()
        if n >= len(lines):
            return
        spans, carry = lines[n]
        for start, length, ttype in spans:
            fmt = self.format_for(ttype)
            if fmt is not None:
                self.setFormat(start, length, fmt)
        # a different token across the line break makes Qt re-highlight the next block
        self.setCurrentBlockState(self._state_for(carry))

    def _state_for(self, carry: _TokenType | None) -> int:
        if carry is None:
            return -1
        return self._states.setdefault(carry, len(self._states))

    def _document_lines(self) -> list[tuple[LineSpans, _TokenType | None]]:
        doc = self.document()
        if doc is None:
            return []
        key = (doc.revision(), doc.characterCount())
        if self._lines is None or key != self._lines_key:
            self._lines = lex_lines(self._lexer, doc.toRawText().replace("\u2029", "\n"))
            self._lines_key = key
        return self._lines

    def _build_format(self, ttype: _TokenType) -> QTextCharFormat | None:
        assert self._theme is not None
        style = get_style_by_name(self._theme.style).style_for_token(ttype)
        if not any(style.get(k) for k in _FORMAT_KEYS):
            return None
        fmt = QTextCharFormat()
        if style.get("color"):
            fmt.setForeground(QColor(f"#{style['color']}"))
        if style.get("bgcolor"):
            fmt.setBackground(QColor(f"#{style['bgcolor']}"))
        if style.get("bold"):
            fmt.setFontWeight(QFont.Weight.Bold)
        if style.get("italic"):
            fmt.setFontItalic(True)
        if style.get("underline"):
            fmt.setFontUnderline(True)
        return fmt
