"""Directory enumeration filtered through the signature classifier."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Iterator, Optional, Tuple

from .logging import get_logger
from .models import FileKind
from .signatures import classify_file

Classifier = Callable[[Path], Optional[FileKind]]


def resolve_root(root: str | Path) -> Path:
    """Return ``root`` as an absolute directory path or raise."""
    root_path = Path(root).expanduser().resolve()
    if not root_path.exists():
        raise FileNotFoundError(f"Directory not found: {root}")
    if not root_path.is_dir():
        raise NotADirectoryError(f"Path is not a directory: {root}")
    return root_path


def _raise_walk_error(exc: OSError) -> None:
    raise exc


def iter_files(root: str | Path, recursive: bool = False) -> Iterator[Path]:
    """Yield absolute paths of files under ``root`` in enumeration order.

    Only direct children are yielded unless ``recursive`` is set. Directory
    symlinks are not followed. A directory that cannot be listed raises
    OSError instead of being skipped.
    """
    root_path = resolve_root(root)
    for dirpath, dirnames, filenames in os.walk(root_path, onerror=_raise_walk_error):
        current_dir = Path(dirpath)
        if not recursive:
            dirnames[:] = []
        for filename in filenames:
            path = current_dir / filename
            if path.is_file():
                yield path


class DirectoryWalker:
    """Walks a directory and yields only files with a known signature."""

    def __init__(self, classifier: Classifier | None = None) -> None:
        self.classifier = classifier or classify_file
        self.logger = get_logger("walker")

    def walk(self, root: str | Path, recursive: bool = False) -> Iterator[Tuple[Path, FileKind]]:
        for path in iter_files(root, recursive):
            kind = self.classifier(path)
            if kind is None:
                continue
            self.logger.debug("Matched %s as %s", path, kind.value)
            yield path, kind


__all__ = ["DirectoryWalker", "iter_files", "resolve_root"]
