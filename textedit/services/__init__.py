"""Concrete service implementations: buffer, highlighter, file I/O, dispatch and rendering."""

from .file_service import FileService
from .highlighter import PygmentsHighlighter
from .task_runner import QtTaskRunner
from .text_buffer import TextBuffer

__all__ = ["FileService", "PygmentsHighlighter", "QtTaskRunner", "TextBuffer"]
