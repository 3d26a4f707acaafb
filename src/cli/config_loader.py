"""Discovery and strict decoding of bracecheck configuration files."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import cast

import msgspec

from cli.config_models import (
    DEFAULT_CONFIG,
    ConfigEntry,
    ConfigOrigin,
    ResolvedConfig,
    RootConfigSpec,
)
from core_types import JsonValue

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "bracecheck.toml"
PYPROJECT_FILENAME = "pyproject.toml"
TOOL_KEY = "bracecheck"


class ConfigError(ValueError):
    """Raised when a configuration file cannot be read or validated."""


def resolve_config(config_file: str | None, *, start: Path | None = None) -> ResolvedConfig:
    """Resolve settings from one config file laid over the built-in defaults.

    An explicit file wins. Otherwise ``bracecheck.toml`` is searched for from
    ``start`` upwards, then ``[tool.bracecheck]`` in the nearest ``pyproject.toml``.

    Parameters
    ----------
    config_file
        Optional explicit TOML config file path.
    start
        Directory to start the parent search from (defaults to the cwd).

    Returns
    -------
    ResolvedConfig
        Settings keyed by dotted name, each with its origin.

    Raises
    ------
    ConfigError
        Raised when an explicit config file does not exist.
    """
    found: tuple[Mapping[str, JsonValue], str] | None
    if config_file:
        path = Path(config_file)
        if not path.is_file():
            msg = f"Config file not found: {config_file!r}."
            raise ConfigError(msg)
        found = _read_explicit(path)
    else:
        found = _discover(start or Path.cwd())

    entries: dict[str, ConfigEntry] = {}
    if found is not None:
        raw, location = found
        logger.debug("Using configuration from %s", location)
        for key, value in _flatten(_decode_root_config(raw, location=location)).items():
            entries[key] = ConfigEntry(value=value, origin=ConfigOrigin.FILE, location=location)
    for key, value in DEFAULT_CONFIG.items():
        entries.setdefault(key, ConfigEntry(value=value, origin=ConfigOrigin.DEFAULT))
    return ResolvedConfig(entries=dict(sorted(entries.items())))


def _discover(start: Path) -> tuple[Mapping[str, JsonValue], str] | None:
    config_path = _find_in_parents(CONFIG_FILENAME, start=start)
    if config_path is not None:
        return _read_toml(config_path), str(config_path)
    pyproject_path = _find_in_parents(PYPROJECT_FILENAME, start=start)
    if pyproject_path is None:
        return None
    nested = _tool_section(_read_toml(pyproject_path))
    if nested is None:
        return None
    return nested, f"{pyproject_path}:tool.{TOOL_KEY}"


def _read_explicit(path: Path) -> tuple[Mapping[str, JsonValue], str]:
    raw = _read_toml(path)
    if path.name != PYPROJECT_FILENAME:
        return raw, str(path)
    nested = _tool_section(raw)
    if nested is None:
        msg = f"Config validation failed for {path}: missing [tool.{TOOL_KEY}] section."
        raise ConfigError(msg)
    return nested, f"{path}:tool.{TOOL_KEY}"


def _find_in_parents(filename: str, *, start: Path) -> Path | None:
    path = start.resolve()
    for directory in (path, *path.parents):
        candidate = directory / filename
        if candidate.is_file():
            return candidate
    return None


def _read_toml(path: Path) -> dict[str, JsonValue]:
    try:
        payload = msgspec.toml.decode(path.read_bytes(), type=dict[str, object], strict=True)
    except msgspec.DecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise ConfigError(msg) from exc
    return cast("dict[str, JsonValue]", payload)


def _tool_section(raw: Mapping[str, JsonValue]) -> dict[str, JsonValue] | None:
    tool = raw.get("tool")
    nested = tool.get(TOOL_KEY) if isinstance(tool, dict) else None
    if not isinstance(nested, dict):
        logger.debug("No [tool.%s] section in pyproject.toml", TOOL_KEY)
        return None
    return cast("dict[str, JsonValue]", nested)


def _decode_root_config(raw: Mapping[str, JsonValue], *, location: str) -> RootConfigSpec:
    try:
        return msgspec.convert(dict(raw), type=RootConfigSpec, strict=True)
    except msgspec.ValidationError as exc:
        msg = f"Config validation failed for {location}: {exc}"
        raise ConfigError(msg) from exc


def _flatten(config: RootConfigSpec) -> dict[str, JsonValue]:
    flat: dict[str, JsonValue] = {}
    sections = cast("dict[str, dict[str, JsonValue]]", msgspec.to_builtins(config))
    for section, values in sections.items():
        for key, value in values.items():
            flat[f"{section}.{key}"] = value
    return flat


__all__ = ["CONFIG_FILENAME", "ConfigError", "resolve_config"]
