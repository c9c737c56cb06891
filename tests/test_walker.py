"""Tests for fileinventory.walker."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from fileinventory.models import FileKind
from fileinventory.walker import DirectoryWalker, iter_files
from tests._fixtures.tree_builder import JPEG_BYTES, PDF_BYTES, TEXT_BYTES, TreeBuilder


def _seed(tree_builder: TreeBuilder) -> None:
    tree_builder.write(
        {
            "a.jpg": JPEG_BYTES,
            "b.pdf": PDF_BYTES,
            "c.txt": TEXT_BYTES,
            "nested/d.pdf": PDF_BYTES,
            "nested/deeper/e.jpg": JPEG_BYTES,
            "nested/deeper/f.txt": TEXT_BYTES,
        }
    )


def test_iter_files_top_level_only(tree_builder: TreeBuilder) -> None:
    _seed(tree_builder)

    paths = list(iter_files(tree_builder.root, recursive=False))

    assert sorted(paths) == sorted(
        tree_builder.path(name) for name in ("a.jpg", "b.pdf", "c.txt")
    )
    assert all(path.is_absolute() for path in paths)


def test_iter_files_recursive_yields_each_file_once(tree_builder: TreeBuilder) -> None:
    _seed(tree_builder)

    paths = list(iter_files(tree_builder.root, recursive=True))

    assert len(paths) == len(set(paths)) == 6
    assert tree_builder.path("nested/deeper/f.txt") in paths


def test_iter_files_rejects_missing_root(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        list(iter_files(tmp_path / "missing"))


def test_iter_files_rejects_file_root(tmp_path: Path) -> None:
    target = tmp_path / "file.pdf"
    target.write_bytes(PDF_BYTES)
    with pytest.raises(NotADirectoryError):
        list(iter_files(target))


def test_walker_drops_unclassified_files(tree_builder: TreeBuilder) -> None:
    _seed(tree_builder)

    found = dict(DirectoryWalker().walk(tree_builder.root, recursive=False))

    assert found == {
        tree_builder.path("a.jpg"): FileKind.JPEG,
        tree_builder.path("b.pdf"): FileKind.PDF,
    }


def test_walker_recursive_classifies_nested_files(tree_builder: TreeBuilder) -> None:
    _seed(tree_builder)

    found = dict(DirectoryWalker().walk(tree_builder.root, recursive=True))

    assert set(found) == {
        tree_builder.path("a.jpg"),
        tree_builder.path("b.pdf"),
        tree_builder.path("nested/d.pdf"),
        tree_builder.path("nested/deeper/e.jpg"),
    }


def test_walker_uses_injected_classifier(tree_builder: TreeBuilder) -> None:
    _seed(tree_builder)
    seen: list[Path] = []

    def _only_text(path: Path) -> FileKind | None:
        seen.append(path)
        return FileKind.PDF if path.suffix == ".txt" else None

    found = list(DirectoryWalker(_only_text).walk(tree_builder.root))

    assert found == [(tree_builder.path("c.txt"), FileKind.PDF)]
    assert len(seen) == 3


def _deny_listing(monkeypatch: pytest.MonkeyPatch, denied: Path) -> None:
    real_scandir = os.scandir

    def _scandir(path=None):
        if Path(path).resolve() == denied:
            raise PermissionError(13, "Permission denied", str(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", _scandir)


def test_iter_files_raises_when_root_cannot_be_listed(
    tree_builder: TreeBuilder, monkeypatch: pytest.MonkeyPatch
) -> None:
    tree_builder.write({"a.jpg": JPEG_BYTES})
    _deny_listing(monkeypatch, tree_builder.path())

    with pytest.raises(PermissionError):
        list(iter_files(tree_builder.root, recursive=False))


def test_iter_files_raises_when_subdirectory_cannot_be_listed(
    tree_builder: TreeBuilder, monkeypatch: pytest.MonkeyPatch
) -> None:
    tree_builder.write({"a.jpg": JPEG_BYTES, "secret/b.pdf": PDF_BYTES})
    _deny_listing(monkeypatch, tree_builder.path("secret"))

    with pytest.raises(PermissionError):
        list(DirectoryWalker().walk(tree_builder.root, recursive=True))
