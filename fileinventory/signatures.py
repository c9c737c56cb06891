"""Magic-number classification of files by their leading bytes."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Mapping, Optional

from .logging import get_logger
from .models import FileKind

SIGNATURE_LENGTH = 4

SIGNATURES: Mapping[bytes, FileKind] = {
    b"\xff\xd8\xff\xe0": FileKind.JPEG,
    b"%PDF": FileKind.PDF,
}

_LOGGER = get_logger("signatures")


class ShortReadError(ValueError):
    """Raised when a file holds fewer bytes than a signature needs."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"Expected {expected} signature bytes, read {actual}")
        self.expected = expected
        self.actual = actual


def read_signature(handle: BinaryIO, length: int = SIGNATURE_LENGTH) -> bytes:
    """Read exactly ``length`` leading bytes from ``handle``."""
    prefix = handle.read(length)
    if len(prefix) < length:
        raise ShortReadError(length, len(prefix))
    return prefix


def classify_stream(handle: BinaryIO) -> Optional[FileKind]:
    """Return the kind whose signature starts ``handle``, or None."""
    try:
        prefix = read_signature(handle)
    except ShortReadError:
        return None
    return SIGNATURES.get(prefix)


def classify_file(path: Path) -> Optional[FileKind]:
    """Open ``path`` and classify it; unreadable files are treated as no match."""
    try:
        with path.open("rb") as handle:
            kind = classify_stream(handle)
    except OSError as exc:
        _LOGGER.debug("Unable to read signature of %s: %s", path, exc)
        return None
    if kind is None:
        _LOGGER.debug("No signature match for %s", path)
    return kind


__all__ = [
    "SIGNATURES",
    "SIGNATURE_LENGTH",
    "ShortReadError",
    "classify_file",
    "classify_stream",
    "read_signature",
]
