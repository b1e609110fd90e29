"""Domain layer: interfaces, models, events and task descriptions."""

from .errors import DialogCancelled, EditorError, IoFailure
from .interfaces import IAppConfig, IConfigService, IFileService, ITaskRunner, ITextBuffer
from .models import DocumentState, HighlightTheme, LoadedFile

__all__ = [
    "IFileService",
    "ITextBuffer",
    "ITaskRunner",
    "IConfigService",
    "IAppConfig",
    "EditorError",
    "DialogCancelled",
    "IoFailure",
    "DocumentState",
    "HighlightTheme",
    "LoadedFile",
]
