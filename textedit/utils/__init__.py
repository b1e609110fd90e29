"""App constants and utilities."""

from .constants import (
    APP_NAME,
    APP_ORG,
    DEFAULT_GRAMMAR,
    DEFAULT_LOG_LEVEL,
    DEFAULT_THEME,
    FILE_FILTER,
    NEW_FILE_LABEL,
    OPEN_DIALOG_TITLE,
    SAVE_DIALOG_TITLE,
)

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "NEW_FILE_LABEL",
    "OPEN_DIALOG_TITLE",
    "SAVE_DIALOG_TITLE",
    "FILE_FILTER",
    "DEFAULT_GRAMMAR",
    "DEFAULT_THEME",
    "DEFAULT_LOG_LEVEL",
]
