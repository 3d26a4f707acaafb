"""Tests for diagnostic construction, rendering, and serialization."""

from __future__ import annotations

import json

import pytest

from braces.diagnostics import DiagnosticKind, build_diagnostic
from braces.tokens import BracketKind, BracketOccurrence
from serde_msgspec import dumps_json, to_builtins

_CLOSER = BracketOccurrence(
    kind=BracketKind.ROUND,
    is_open=False,
    indent_level=2,
    line=2,
    column=5,
)
_OPENER = BracketOccurrence(
    kind=BracketKind.SQUARE,
    is_open=True,
    indent_level=2,
    line=1,
    column=3,
)


def test_unmatched_close_render() -> None:
    """Ensure an unmatched closer renders with its location and hint."""
    diagnostic = build_diagnostic(DiagnosticKind.UNMATCHED_CLOSE, _CLOSER)

    assert diagnostic.render() == (
        "2,5: Missing open brace for closing ')'. Did you forget an open brace?"
    )
    assert diagnostic.related_line is None


def test_type_mismatch_render() -> None:
    """Ensure a type mismatch names the opener and its location."""
    diagnostic = build_diagnostic(DiagnosticKind.TYPE_MISMATCH, _CLOSER, _OPENER)

    assert str(diagnostic) == (
        "2,5: Closing brace ')' does not match open brace '[' at 1,3. "
        "Did you use the wrong brace type, or transpose braces?"
    )
    assert (diagnostic.related_line, diagnostic.related_column) == (1, 3)


def test_unclosed_open_has_no_hint() -> None:
    """Ensure unclosed openers render without a trailing hint."""
    diagnostic = build_diagnostic(DiagnosticKind.UNCLOSED_OPEN, _OPENER)

    assert diagnostic.hint is None
    assert diagnostic.render() == "1,3: Open brace '[' has no matching close brace"
    assert (diagnostic.related_line, diagnostic.related_column) == (None, None)


@pytest.mark.parametrize(
    ("kind", "expected"),
    [
        (DiagnosticKind.OVER_INDENTED_CLOSE, (1, 3)),
        (DiagnosticKind.UNDER_INDENTED_CLOSE, (1, 3)),
        (DiagnosticKind.TYPE_MISMATCH, (1, 3)),
        (DiagnosticKind.UNMATCHED_CLOSE, (None, None)),
        (DiagnosticKind.UNCLOSED_OPEN, (None, None)),
    ],
)
def test_related_location_only_for_closer_opener_pairs(
    kind: DiagnosticKind,
    expected: tuple[int | None, int | None],
) -> None:
    """Ensure only the three closer-versus-opener kinds carry the opener's location."""
    diagnostic = build_diagnostic(kind, _CLOSER, _OPENER)

    assert (diagnostic.related_line, diagnostic.related_column) == expected


@pytest.mark.parametrize(
    "kind",
    [
        DiagnosticKind.OVER_INDENTED_CLOSE,
        DiagnosticKind.UNDER_INDENTED_CLOSE,
        DiagnosticKind.TYPE_MISMATCH,
    ],
)
def test_opener_kinds_require_opener(kind: DiagnosticKind) -> None:
    """Ensure comparison findings cannot be built without an opener."""
    with pytest.raises(ValueError, match="requires the opener"):
        build_diagnostic(kind, _CLOSER)


def test_diagnostic_builtins_omit_empty_fields() -> None:
    """Ensure serialized diagnostics use enum values and skip unset locations."""
    diagnostic = build_diagnostic(DiagnosticKind.UNMATCHED_CLOSE, _CLOSER)

    assert to_builtins(diagnostic) == {
        "line": 2,
        "column": 5,
        "kind": "unmatched_close",
        "message": "Missing open brace for closing ')'",
        "hint": "Did you forget an open brace?",
    }


def test_diagnostic_json() -> None:
    """Ensure diagnostics encode to JSON with related locations."""
    diagnostic = build_diagnostic(DiagnosticKind.OVER_INDENTED_CLOSE, _CLOSER, _OPENER)
    payload = json.loads(dumps_json(diagnostic))

    assert payload["kind"] == "over_indented_close"
    assert payload["related_line"] == 1
    assert payload["related_column"] == 3
