"""Typed configuration models for bracecheck."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Literal

from core_types import EncodingStr, JsonValue
from serde_msgspec import StructBaseStrict


class CheckConfig(StructBaseStrict, frozen=True):
    """Scan-related configuration values."""

    format: Literal["text", "json"] | None = None
    fail_on_findings: bool | None = None
    encoding: EncodingStr | None = None


class RootConfigSpec(StructBaseStrict, frozen=True):
    """Root configuration payload for ``bracecheck.toml`` and ``[tool.bracecheck]``."""

    check: CheckConfig | None = None


DEFAULT_CONFIG: dict[str, str | bool] = {
    "check.format": "text",
    "check.fail_on_findings": True,
    "check.encoding": "utf-8",
}


class ConfigOrigin(StrEnum):
    """Where a resolved setting came from."""

    FILE = "file"
    DEFAULT = "default"


@dataclass(frozen=True)
class ConfigEntry:
    """One resolved setting; ``location`` names the file for ``FILE`` entries."""

    value: JsonValue
    origin: ConfigOrigin
    location: str | None = None


@dataclass(frozen=True)
class ResolvedConfig:
    """Dotted-key settings after file values are laid over ``DEFAULT_CONFIG``."""

    entries: Mapping[str, ConfigEntry]

    def get(self, key: str, default: JsonValue = None) -> JsonValue:
        """Return the value for ``key``, or ``default`` when it is not set.

        Returns
        -------
        JsonValue
            Resolved value.
        """
        entry = self.entries.get(key)
        return default if entry is None else entry.value

    def flat(self) -> dict[str, JsonValue]:
        """Return ``{dotted_key: value}`` for every entry.

        Returns
        -------
        dict[str, JsonValue]
            Values without origin information.
        """
        return {key: entry.value for key, entry in self.entries.items()}

    def describe(self) -> dict[str, dict[str, JsonValue]]:
        """Return each value together with its origin, for ``config show --with-sources``.

        Returns
        -------
        dict[str, dict[str, JsonValue]]
            ``{key: {"value": ..., "source": ..., "location": ...}}``; the
            location is omitted for defaults.
        """
        described: dict[str, dict[str, JsonValue]] = {}
        for key, entry in self.entries.items():
            item: dict[str, JsonValue] = {"value": entry.value, "source": str(entry.origin)}
            if entry.location is not None:
                item["location"] = entry.location
            described[key] = item
        return described


__all__ = [
    "DEFAULT_CONFIG",
    "CheckConfig",
    "ConfigEntry",
    "ConfigOrigin",
    "ResolvedConfig",
    "RootConfigSpec",
]
