"""Pipeline orchestration: walk, classify, hash, then write once."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import List

from .config import InventoryConfig
from .hashing import ContentHasher
from .logging import get_logger
from .models import FileRecord, RunOutcome, RunStatus, SkippedFile
from .walker import DirectoryWalker, resolve_root
from .writer import InventoryWriter


class RunState(str, Enum):
    START = "start"
    WALKING = "walking"
    EMPTY = "empty"
    WRITING = "writing"
    DONE = "done"


class InventoryPipeline:
    """Coordinates a single inventory run over one directory."""

    def __init__(
        self,
        walker: DirectoryWalker | None = None,
        hasher: ContentHasher | None = None,
        writer: InventoryWriter | None = None,
    ) -> None:
        self.walker = walker or DirectoryWalker()
        self.hasher = hasher or ContentHasher()
        self.writer = writer or InventoryWriter()
        self.logger = get_logger("pipeline")
        self.state = RunState.START

    @classmethod
    def from_config(cls, config: InventoryConfig) -> "InventoryPipeline":
        return cls(
            hasher=ContentHasher(config.hash.algorithm, config.hash.chunk_size),
            writer=InventoryWriter(config.output.style),
        )

    def run(self, directory: str | Path, output: str | Path, recursive: bool = False) -> RunOutcome:
        """Inventory ``directory`` into ``output``.

        The writer is only invoked when at least one file matched. Files that
        cannot be hashed are reported as skipped rather than written.
        """
        self._transition(RunState.START)
        output_path = Path(output).expanduser()
        if output_path.exists():
            raise FileExistsError(f"Output file already exists: {output_path}")
        root = resolve_root(directory)
        self.logger.info(
            "Scanning %s (%s)", root, "recursive" if recursive else "top level only"
        )

        self._transition(RunState.WALKING)
        records: List[FileRecord] = []
        skipped: List[SkippedFile] = []
        for path, kind in self.walker.walk(root, recursive):
            try:
                digest = self.hasher.hash_file(path)
            except OSError as exc:
                self.logger.warning("Skipping %s: %s", path, exc)
                skipped.append(SkippedFile(path=str(path), reason=str(exc)))
                continue
            records.append(FileRecord(path=str(path), kind=kind, digest=digest))

        if not records:
            self._transition(RunState.EMPTY)
            self.logger.info("No matching files found under %s", root)
            self._transition(RunState.DONE)
            return RunOutcome(status=RunStatus.EMPTY, skipped=skipped)

        self._transition(RunState.WRITING)
        written = self.writer.write(records, output_path)
        self.logger.info(
            "Inventory written to %s (%d files, %d skipped)", written, len(records), len(skipped)
        )
        self._transition(RunState.DONE)
        return RunOutcome(
            status=RunStatus.WRITTEN,
            records=records,
            skipped=skipped,
            output_path=written,
        )

    def _transition(self, state: RunState) -> None:
        self.logger.debug("State %s -> %s", self.state.value, state.value)
        self.state = state


__all__ = ["InventoryPipeline", "RunState"]
