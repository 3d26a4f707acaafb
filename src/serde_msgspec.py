"""msgspec struct bases and JSON encoding shared by bracecheck."""

from __future__ import annotations

from enum import Enum

import msgspec


class StructBaseStrict(
    msgspec.Struct,
    frozen=True,
    kw_only=True,
    omit_defaults=True,
    repr_omit_defaults=True,
    forbid_unknown_fields=True,
):
    """Immutable record that rejects unknown fields when decoded."""


class StructBaseHotPath(
    msgspec.Struct,
    frozen=True,
    kw_only=True,
    gc=False,
    cache_hash=True,
):
    """Immutable record created once per scanned bracket; untracked by the GC."""


def _enc_hook(obj: object) -> object:
    if isinstance(obj, Enum):
        return obj.value
    msg = f"Cannot encode {type(obj).__name__}"
    raise TypeError(msg)


JSON_ENCODER = msgspec.json.Encoder(enc_hook=_enc_hook, order="deterministic")


def dumps_json(obj: object, *, pretty: bool = False) -> bytes:
    """Encode ``obj`` as JSON with sorted mapping keys.

    Returns
    -------
    bytes
        JSON document, indented by two spaces when ``pretty`` is set.
    """
    raw = JSON_ENCODER.encode(obj)
    return msgspec.json.format(raw, indent=2) if pretty else raw


def to_builtins(obj: object) -> object:
    """Convert structs, tuples and enums into JSON-compatible builtins.

    Returns
    -------
    object
        Builtin representation of ``obj``.
    """
    return msgspec.to_builtins(obj, enc_hook=_enc_hook, order="deterministic")


__all__ = ["JSON_ENCODER", "StructBaseHotPath", "StructBaseStrict", "dumps_json", "to_builtins"]
