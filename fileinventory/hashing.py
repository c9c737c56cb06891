"""Streaming content digests for inventoried files."""

from __future__ import annotations

import hashlib
from pathlib import Path

DEFAULT_ALGORITHM = "md5"
DEFAULT_CHUNK_SIZE = 1024 * 1024


def is_supported_algorithm(name: str) -> bool:
    """Return True when ``name`` is a fixed-length hashlib algorithm."""
    normalised = name.strip().lower()
    if not normalised or normalised.startswith("shake_"):
        return False
    try:
        hashlib.new(normalised)
    except (ValueError, TypeError):
        return False
    return True


class ContentHasher:
    """Computes hex digests of whole files without loading them into memory."""

    def __init__(
        self, algorithm: str = DEFAULT_ALGORITHM, chunk_size: int = DEFAULT_CHUNK_SIZE
    ) -> None:
        if not is_supported_algorithm(algorithm):
            raise ValueError(f"Unsupported digest algorithm: {algorithm}")
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self.algorithm = algorithm.strip().lower()
        self.chunk_size = chunk_size

    @property
    def digest_size_hex(self) -> int:
        return hashlib.new(self.algorithm).digest_size * 2

    def hash_file(self, path: Path) -> str:
        """Return the lowercase hex digest of ``path``.

        Raises OSError when the file cannot be opened or read to the end.
        """
        digest = hashlib.new(self.algorithm)
        with path.open("rb") as handle:
            for chunk in iter(lambda: handle.read(self.chunk_size), b""):
                digest.update(chunk)
        return digest.hexdigest()


__all__ = ["ContentHasher", "DEFAULT_ALGORITHM", "DEFAULT_CHUNK_SIZE", "is_supported_algorithm"]
