"""Shared type aliases and small typing helpers."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import StrEnum
from typing import Annotated

from msgspec import Meta

type JsonPrimitive = str | int | float | bool | None
type JsonValue = JsonPrimitive | Mapping[str, JsonValue] | Sequence[JsonValue]

NonNegativeInt = Annotated[int, Meta(ge=0)]

EncodingStr = Annotated[
    str,
    Meta(
        min_length=1,
        title="Encoding",
        description="Text encoding used to decode scanned sources.",
    ),
]


class OutputFormatName(StrEnum):
    """Supported renderings for scan results."""

    TEXT = "text"
    JSON = "json"


def parse_output_format(value: OutputFormatName | str | None) -> OutputFormatName | None:
    """Parse an output format name.

    Returns
    -------
    OutputFormatName | None
        Parsed format, or ``None`` when the value is unknown.
    """
    if value is None:
        return None
    if isinstance(value, OutputFormatName):
        return value
    normalized = value.strip().lower()
    try:
        return OutputFormatName(normalized)
    except ValueError:
        return None


__all__ = [
    "EncodingStr",
    "JsonPrimitive",
    "JsonValue",
    "NonNegativeInt",
    "OutputFormatName",
    "parse_output_format",
]
