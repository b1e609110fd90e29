"""Follow-up work requested by the dispatcher. Descriptions only; the runner does the I/O."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union


@dataclass(frozen=True)
class LoadFile:
    path: Path


@dataclass(frozen=True)
class PickFileThenLoad:
    pass


@dataclass(frozen=True)
class SaveBuffer:
    path: Path | None
    text: str


Task = Union[LoadFile, PickFileThenLoad, SaveBuffer]
