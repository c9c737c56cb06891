"""Tests for fileinventory.logging."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from fileinventory.logging import configure_logging, console_level, get_logger


@pytest.mark.parametrize(
    ("verbose", "quiet", "expected"),
    [
        (False, False, logging.INFO),
        (True, False, logging.DEBUG),
        (False, True, logging.WARNING),
        (True, True, logging.DEBUG),
    ],
)
def test_console_level(verbose: bool, quiet: bool, expected: int) -> None:
    assert console_level(verbose=verbose, quiet=quiet) == expected


def test_configure_logging_resets_handlers(tmp_path: Path) -> None:
    configure_logging()
    logger = configure_logging(verbose=True, log_file=tmp_path / "run.log")

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2

    configure_logging()
    assert len(logger.handlers) == 1


def test_log_file_records_debug_while_console_is_quiet(tmp_path: Path) -> None:
    log_file = tmp_path / "run.log"
    logger = configure_logging(quiet=True, log_file=log_file)
    stream_handler = next(h for h in logger.handlers if not isinstance(h, logging.FileHandler))

    get_logger("walker").debug("Matched sample.pdf as pdf")
    for handler in logger.handlers:
        handler.flush()

    assert stream_handler.level == logging.WARNING
    assert "Matched sample.pdf as pdf" in log_file.read_text(encoding="utf-8")
    configure_logging()


def test_unopenable_log_file_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        configure_logging(log_file=tmp_path / "missing" / "run.log")
    configure_logging()
