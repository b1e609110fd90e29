from __future__ import annotations

import errno


class EditorError(Exception):
    """Failure of a file operation; stored on the document state until replaced."""


class DialogCancelled(EditorError):
    """The user closed a native file dialog without choosing a path."""

    def __init__(self) -> None:
        super().__init__("dialog closed")


class IoFailure(EditorError):
    """An OS-level read/write error. `message` is shown verbatim in the status bar."""

    def __init__(self, code: int | None, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    @classmethod
    def from_os_error(cls, exc: OSError) -> IoFailure:
        return cls(exc.errno, exc.strerror or str(exc))

    @classmethod
    def from_decode_error(cls, exc: UnicodeDecodeError) -> IoFailure:
        return cls(errno.EILSEQ, f"stream did not contain valid UTF-8 ({exc.reason})")
