"""TextEditor: a small PyQt6 text editor driven by a single dispatch loop."""

__version__ = "0.1.0"
