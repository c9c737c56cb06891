"""Core data models shared across fileinventory components."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional


class FileKind(str, Enum):
    """File formats recognised by their leading bytes."""

    JPEG = "jpg"
    PDF = "pdf"


@dataclass(frozen=True)
class FileRecord:
    """A classified file and its content digest."""

    path: str
    kind: FileKind
    digest: str


@dataclass(frozen=True)
class SkippedFile:
    """A classified file that could not be hashed."""

    path: str
    reason: str


class RunStatus(str, Enum):
    """Terminal result of an inventory run."""

    EMPTY = "empty"
    WRITTEN = "written"


@dataclass
class RunOutcome:
    """What an inventory run produced."""

    status: RunStatus
    records: List[FileRecord] = field(default_factory=list)
    skipped: List[SkippedFile] = field(default_factory=list)
    output_path: Optional[Path] = None
