from __future__ import annotations

from PyQt6.QtGui import QColor, QPalette
from PyQt6.QtWidgets import QApplication

_DARK = {
    QPalette.ColorRole.Window: "#1f2229",
    QPalette.ColorRole.WindowText: "#e7e9ee",
    QPalette.ColorRole.Base: "#15171c",
    QPalette.ColorRole.AlternateBase: "#1a1d24",
    QPalette.ColorRole.Text: "#e7e9ee",
    QPalette.ColorRole.Button: "#2a2f3a",
    QPalette.ColorRole.ButtonText: "#e7e9ee",
    QPalette.ColorRole.ToolTipBase: "#2a2f3a",
    QPalette.ColorRole.ToolTipText: "#e7e9ee",
    QPalette.ColorRole.Highlight: "#7aa2ff",
    QPalette.ColorRole.HighlightedText: "#0f1115",
}

_LIGHT = {
    QPalette.ColorRole.Window: "#f4f6f8",
    QPalette.ColorRole.WindowText: "#111111",
    QPalette.ColorRole.Base: "#ffffff",
    QPalette.ColorRole.AlternateBase: "#f4f6f8",
    QPalette.ColorRole.Text: "#111111",
    QPalette.ColorRole.Button: "#e8eaee",
    QPalette.ColorRole.ButtonText: "#111111",
    QPalette.ColorRole.ToolTipBase: "#ffffff",
    QPalette.ColorRole.ToolTipText: "#111111",
    QPalette.ColorRole.Highlight: "#0b6bfd",
    QPalette.ColorRole.HighlightedText: "#ffffff",
}


def build_palette(dark: bool) -> QPalette:
    pal = QPalette()
    for role, color in (_DARK if dark else _LIGHT).items():
        pal.setColor(role, QColor(color))
    return pal


def apply_app_palette(dark: bool) -> None:
    """Switch the whole application between the dark and light chrome."""
    if QApplication.instance() is None:
        return
    QApplication.setPalette(build_palette(dark))
