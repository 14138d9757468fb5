"""
pgscript.config.loader - Options file discovery and loading.

An options file lists the input directories to convert and the output
directory to write into. JSON (options.json) and TOML (pgscript.toml)
are both accepted; TOML is read with tomlkit.
"""

from __future__ import annotations

import copy
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomlkit
from tomlkit.exceptions import TOMLKitError

from pgscript.config.defaults import CONFIG_FILE_NAMES, DEFAULT_CONFIG


PARSER_STRING_KEYS = ("entity_type", "default_name", "default_version")


class ConfigError(ValueError):
    """The options file is missing, unreadable or invalid."""


@dataclass(frozen=True)
class DirectoryPair:
    """An input directory and the directory its scripts are written to."""

    input: Path
    output: Path


class ConfigLoader:
    """Read-only view over a merged configuration dict.

    Supports dotted-key lookup, e.g. ``config.get("parser.strict")``.
    """

    def __init__(self, data: dict[str, Any], path: Path | None = None) -> None:
        self._data = data
        self.path = path

    @classmethod
    def from_dict(cls, data: dict[str, Any], path: Path | None = None) -> ConfigLoader:
        return cls(merge_configs(DEFAULT_CONFIG, data), path=path)

    @property
    def base_dir(self) -> Path:
        """Directory relative paths are resolved against."""
        if self.path is not None:
            return self.path.parent
        return Path.cwd()

    def get(self, key: str, default: Any = None) -> Any:
        value: Any = self._data
        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                return default
            value = value[part]
        return value

    def get_raw(self) -> dict[str, Any]:
        return copy.deepcopy(self._data)


def merge_configs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge override into a copy of base.

    Nested tables merge key by key; any other value in override replaces
    the base value.
    """
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _parse_file(path: Path) -> dict[str, Any]:
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read options file {path}: {e}") from e

    try:
        if path.suffix.lower() == ".json":
            data = json.loads(content)
        else:
            data = tomlkit.parse(content).unwrap()
    except (json.JSONDecodeError, TOMLKitError) as e:
        raise ConfigError(f"Invalid options file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Options file {path} must contain an object/table")
    return data


def _local_override_path(path: Path) -> Path:
    """pgscript.toml -> pgscript.local.toml"""
    return path.with_name(f"{path.stem}.local{path.suffix}")


def load_config(path: Path) -> ConfigLoader:
    """Load an options file merged over the defaults.

    A sibling ``<stem>.local<suffix>`` file, when present, is merged on
    top of the main file.

    Raises:
        ConfigError: If the file cannot be read or has invalid content.
    """
    path = path.resolve()
    if not path.exists():
        raise ConfigError(f"Options file not found: {path}")

    data = merge_configs(DEFAULT_CONFIG, _parse_file(path))

    local_path = _local_override_path(path)
    if local_path.exists():
        data = merge_configs(data, _parse_file(local_path))

    _check_shape(data, path)
    return ConfigLoader(data, path=path)


def _check_shape(data: dict[str, Any], path: Path) -> None:
    inputs = data.get("input")
    if not isinstance(inputs, list) or not all(isinstance(i, str) for i in inputs):
        raise ConfigError(f"'input' in {path} must be a list of directory names")
    if not isinstance(data.get("output"), str):
        raise ConfigError(f"'output' in {path} must be a directory name")
    parser = data.get("parser")
    if not isinstance(parser, dict):
        raise ConfigError(f"'parser' in {path} must be a table")
    if not isinstance(parser.get("strict"), bool):
        raise ConfigError(f"'parser.strict' in {path} must be true or false")
    for key in PARSER_STRING_KEYS:
        if not isinstance(parser.get(key), str):
            raise ConfigError(f"'parser.{key}' in {path} must be a string")


def find_config_file(start_path: Path) -> Path | None:
    """Find an options file by walking up from start_path.

    Returns:
        Path to the first pgscript.toml or options.json found, or None.
    """
    current = start_path.resolve()
    while True:
        for name in CONFIG_FILE_NAMES:
            candidate = current / name
            if candidate.is_file():
                return candidate
        if current == current.parent:
            return None
        current = current.parent


def get_directory_pairs(config: ConfigLoader) -> list[DirectoryPair]:
    """Resolve the configured input directories to (input, output) pairs.

    Each input directory ``<base>/<name>`` is written to
    ``<base>/<output>/<name>``.
    """
    base = config.base_dir
    output_root = base / config.get("output", "output")
    return [
        DirectoryPair(input=base / name, output=output_root / name)
        for name in config.get("input", [])
    ]
