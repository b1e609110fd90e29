from __future__ import annotations

import errno
import os
from pathlib import Path

from PyQt6.QtCore import QFileDevice, QIODevice, QSaveFile

from textedit.domain.interfaces import IFileService

# Qt reports strerror() text for file errors; map it back to the errno it came from
_ERRNO_BY_MESSAGE = {
    os.strerror(code): code
    for code in (
        errno.ENOENT,
        errno.EACCES,
        errno.EPERM,
        errno.ENOSPC,
        errno.EROFS,
        errno.EISDIR,
        errno.ENOTDIR,
        errno.EEXIST,
        errno.ENAMETOOLONG,
    )
}

_ERRNO_BY_FILE_ERROR = {
    QFileDevice.FileError.PermissionsError: errno.EACCES,
    QFileDevice.FileError.ResourceError: errno.ENOSPC,
}


def _save_error(sf: QSaveFile, path: Path) -> OSError:
    message = sf.errorString() or os.strerror(errno.EIO)
    code = _ERRNO_BY_MESSAGE.get(message) or _ERRNO_BY_FILE_ERROR.get(sf.error(), errno.EIO)
    return OSError(code, message, str(path))


class FileService(IFileService):
    """Atomic reads/writes for UTF-8 text files."""

    def read_text(self, path: Path) -> str:
        # newline="" keeps line endings byte-for-byte
        with path.open("r", encoding="utf-8", newline="") as fh:
            return fh.read()

    def write_text_atomic(self, path: Path, text: str) -> None:
        sf = QSaveFile(str(path))
        if not sf.open(QIODevice.OpenModeFlag.WriteOnly):
            raise _save_error(sf, path)
        sf.write(text.encode("utf-8"))
        if not sf.commit():
            raise _save_error(sf, path)
