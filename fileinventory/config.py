"""Configuration loading for fileinventory (.fileinventory.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .hashing import DEFAULT_ALGORITHM, DEFAULT_CHUNK_SIZE, is_supported_algorithm
from .writer import LEGACY_STYLE, STYLES

CONFIG_FILENAME = ".fileinventory.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class HashConfig:
    """Digest settings."""

    algorithm: str = DEFAULT_ALGORITHM
    chunk_size: int = DEFAULT_CHUNK_SIZE


@dataclass
class OutputConfig:
    """Inventory file settings."""

    style: str = LEGACY_STYLE


@dataclass
class InventoryConfig:
    """Effective settings for an inventory run."""

    source: Optional[Path] = None
    hash: HashConfig = field(default_factory=HashConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    recursive: bool = False

    def with_overrides(
        self,
        *,
        algorithm: Optional[str] = None,
        style: Optional[str] = None,
        recursive: Optional[bool] = None,
    ) -> "InventoryConfig":
        """Return a copy with command-line values applied and validated."""
        hash_config = replace(self.hash)
        output_config = replace(self.output)
        if algorithm is not None:
            hash_config.algorithm = _validate_algorithm(algorithm)
        if style is not None:
            output_config.style = _validate_style(style)
        return replace(
            self,
            hash=hash_config,
            output=output_config,
            recursive=self.recursive if recursive is None else recursive,
        )


def load_config(config_path: Path) -> InventoryConfig:
    """Load configuration from disk; a missing file yields defaults."""
    config_file = _resolve_config_path(config_path)
    if not config_file.exists():
        return InventoryConfig()

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    hash_config = HashConfig()
    hash_data = _section(data, "hash")
    if "algorithm" in hash_data:
        algorithm = _as_str(hash_data.get("algorithm"))
        if algorithm is None:
            raise ConfigError("hash.algorithm must be a string")
        hash_config.algorithm = _validate_algorithm(algorithm)
    if "chunk_size" in hash_data:
        chunk_size = _as_int(hash_data.get("chunk_size"))
        if chunk_size is None or chunk_size <= 0:
            raise ConfigError("hash.chunk_size must be a positive integer")
        hash_config.chunk_size = chunk_size

    output_config = OutputConfig()
    output_data = _section(data, "output")
    if "style" in output_data:
        style = _as_str(output_data.get("style"))
        if style is None:
            raise ConfigError("output.style must be a string")
        output_config.style = _validate_style(style)

    recursive = False
    if "recursive" in data:
        parsed = _as_bool(data.get("recursive"))
        if parsed is None:
            raise ConfigError("recursive must be true or false")
        recursive = parsed

    return InventoryConfig(
        source=config_file,
        hash=hash_config,
        output=output_config,
        recursive=recursive,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _validate_algorithm(value: str) -> str:
    normalised = value.strip().lower()
    if not is_supported_algorithm(normalised):
        raise ConfigError(f"Unsupported digest algorithm: {value}")
    return normalised


def _validate_style(value: str) -> str:
    normalised = value.strip().lower()
    if normalised not in STYLES:
        raise ConfigError(f"Unknown output style {value!r}; expected one of {', '.join(STYLES)}")
    return normalised


def _section(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"{key} must be a mapping")
    return value


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "y", "1"}:
            return True
        if lowered in {"false", "no", "n", "0"}:
            return False
    return None


__all__ = ["CONFIG_FILENAME", "ConfigError", "HashConfig", "InventoryConfig", "OutputConfig", "load_config"]
