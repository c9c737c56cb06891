"""Serialization of inventory records to CSV and back."""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import Iterable, List, Sequence

from .logging import get_logger
from .models import FileKind, FileRecord

LEGACY_STYLE = "legacy"
QUOTED_STYLE = "quoted"
STYLES = (LEGACY_STYLE, QUOTED_STYLE)

_LEGACY_SEPARATOR = ", "


class WriteError(RuntimeError):
    """Raised when the inventory destination cannot be written."""


def _check_style(style: str) -> str:
    if style not in STYLES:
        raise ValueError(f"Unknown inventory style: {style}")
    return style


def format_record(record: FileRecord, style: str = LEGACY_STYLE) -> str:
    """Return one newline-terminated inventory line for ``record``."""
    _check_style(style)
    fields = [record.path, record.kind.value, record.digest]
    if style == LEGACY_STYLE:
        return _LEGACY_SEPARATOR.join(fields) + "\n"
    buffer = io.StringIO()
    csv.writer(buffer, lineterminator="\n").writerow(fields)
    return buffer.getvalue()


def render_inventory(records: Iterable[FileRecord], style: str = LEGACY_STYLE) -> str:
    return "".join(format_record(record, style) for record in records)


def parse_line(line: str, style: str = LEGACY_STYLE) -> FileRecord:
    """Parse a single inventory line back into a record."""
    _check_style(style)
    stripped = line.rstrip("\r\n")
    if style == LEGACY_STYLE:
        # Path comes first and may itself contain the separator.
        fields = stripped.rsplit(_LEGACY_SEPARATOR, 2)
    else:
        rows = list(csv.reader([stripped]))
        fields = rows[0] if rows else []
    if len(fields) != 3:
        raise ValueError(f"Malformed inventory line: {line!r}")
    path, kind, digest = fields
    try:
        file_kind = FileKind(kind)
    except ValueError as exc:
        raise ValueError(f"Unknown file kind {kind!r} in line: {line!r}") from exc
    return FileRecord(path=path, kind=file_kind, digest=digest)


def read_inventory(path: Path, style: str = LEGACY_STYLE) -> List[FileRecord]:
    """Load every record from an inventory file."""
    text = path.read_text(encoding="utf-8")
    return [parse_line(line, style) for line in text.splitlines() if line.strip()]


class InventoryWriter:
    """Writes a complete inventory in a single operation."""

    def __init__(self, style: str = LEGACY_STYLE) -> None:
        self.style = _check_style(style)
        self.logger = get_logger("writer")

    def write(self, records: Sequence[FileRecord], destination: Path) -> Path:
        """Create ``destination`` holding ``records``; never overwrites."""
        content = render_inventory(records, self.style)
        try:
            handle = destination.open("x", encoding="utf-8", newline="")
        except OSError as exc:
            raise WriteError(f"Cannot create inventory {destination}: {exc}") from exc

        try:
            with handle:
                handle.write(content)
        except OSError as exc:
            destination.unlink(missing_ok=True)
            raise WriteError(f"Failed writing inventory {destination}: {exc}") from exc
        except BaseException:
            destination.unlink(missing_ok=True)
            raise

        self.logger.debug("Wrote %d records to %s", len(records), destination)
        return destination


__all__ = [
    "InventoryWriter",
    "LEGACY_STYLE",
    "QUOTED_STYLE",
    "STYLES",
    "WriteError",
    "format_record",
    "parse_line",
    "read_inventory",
    "render_inventory",
]
