"""Diagnostic records emitted by the bracket matcher."""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum

from braces.tokens import BracketOccurrence
from core_types import NonNegativeInt
from serde_msgspec import StructBaseStrict


class DiagnosticKind(StrEnum):
    """Classification of bracket findings."""

    UNMATCHED_CLOSE = "unmatched_close"
    OVER_INDENTED_CLOSE = "over_indented_close"
    UNDER_INDENTED_CLOSE = "under_indented_close"
    TYPE_MISMATCH = "type_mismatch"
    UNCLOSED_OPEN = "unclosed_open"


class Diagnostic(StructBaseStrict, frozen=True):
    """Single bracket finding.

    Parameters
    ----------
    line
        Zero-based line of the offending occurrence.
    column
        Zero-based column of the offending occurrence.
    kind
        Finding classification.
    message
        Human-readable description.
    hint
        Optional follow-up suggestion.
    related_line
        Line of the opener the closer was compared against, when there is one.
    related_column
        Column of the opener the closer was compared against, when there is one.
    """

    line: NonNegativeInt
    column: NonNegativeInt
    kind: DiagnosticKind
    message: str
    hint: str | None = None
    related_line: NonNegativeInt | None = None
    related_column: NonNegativeInt | None = None

    @property
    def location(self) -> str:
        """Return the ``line,column`` location string.

        Returns
        -------
        str
            Zero-based location.
        """
        return f"{self.line},{self.column}"

    def render(self) -> str:
        """Render the diagnostic as a single text line.

        Returns
        -------
        str
            ``"<line>,<column>: <message>"`` followed by the hint when present.
        """
        text = f"{self.location}: {self.message}"
        if self.hint:
            return f"{text}. {self.hint}"
        return text

    def __str__(self) -> str:
        """Return the rendered diagnostic.

        Returns
        -------
        str
            Rendered diagnostic text.
        """
        return self.render()


type _MessageFormatter = Callable[[BracketOccurrence, BracketOccurrence | None], str]


def _require_opener(opener: BracketOccurrence | None, kind: DiagnosticKind) -> BracketOccurrence:
    if opener is None:
        msg = f"Diagnostic {kind.value!r} requires the opener it was compared against."
        raise ValueError(msg)
    return opener


def _format_unmatched_close(closer: BracketOccurrence, _opener: BracketOccurrence | None) -> str:
    return f"Missing open brace for closing '{closer.glyph}'"


def _format_over_indented(closer: BracketOccurrence, opener: BracketOccurrence | None) -> str:
    top = _require_opener(opener, DiagnosticKind.OVER_INDENTED_CLOSE)
    return (
        f"Closing brace '{closer.glyph}' is indented more than open brace "
        f"'{top.glyph}' at {top.location}"
    )


def _format_under_indented(closer: BracketOccurrence, opener: BracketOccurrence | None) -> str:
    top = _require_opener(opener, DiagnosticKind.UNDER_INDENTED_CLOSE)
    return (
        f"Closing brace '{closer.glyph}' is indented less than open brace "
        f"'{top.glyph}' at {top.location}"
    )


def _format_type_mismatch(closer: BracketOccurrence, opener: BracketOccurrence | None) -> str:
    top = _require_opener(opener, DiagnosticKind.TYPE_MISMATCH)
    return (
        f"Closing brace '{closer.glyph}' does not match open brace "
        f"'{top.glyph}' at {top.location}"
    )


def _format_unclosed_open(occurrence: BracketOccurrence, _opener: BracketOccurrence | None) -> str:
    return f"Open brace '{occurrence.glyph}' has no matching close brace"


_MESSAGE_FORMATTERS: dict[DiagnosticKind, _MessageFormatter] = {
    DiagnosticKind.UNMATCHED_CLOSE: _format_unmatched_close,
    DiagnosticKind.OVER_INDENTED_CLOSE: _format_over_indented,
    DiagnosticKind.UNDER_INDENTED_CLOSE: _format_under_indented,
    DiagnosticKind.TYPE_MISMATCH: _format_type_mismatch,
    DiagnosticKind.UNCLOSED_OPEN: _format_unclosed_open,
}

_HINTS: dict[DiagnosticKind, str] = {
    DiagnosticKind.UNMATCHED_CLOSE: "Did you forget an open brace?",
    DiagnosticKind.OVER_INDENTED_CLOSE: "Did you forget an open brace or indent too far?",
    DiagnosticKind.UNDER_INDENTED_CLOSE: "Did you forget to close a brace or indent too little?",
    DiagnosticKind.TYPE_MISMATCH: "Did you use the wrong brace type, or transpose braces?",
}

_OPENER_KINDS: frozenset[DiagnosticKind] = frozenset(
    {
        DiagnosticKind.OVER_INDENTED_CLOSE,
        DiagnosticKind.UNDER_INDENTED_CLOSE,
        DiagnosticKind.TYPE_MISMATCH,
    }
)


def build_diagnostic(
    kind: DiagnosticKind,
    occurrence: BracketOccurrence,
    opener: BracketOccurrence | None = None,
) -> Diagnostic:
    """Build a diagnostic for an offending occurrence.

    Parameters
    ----------
    kind
        Finding classification.
    occurrence
        Occurrence the diagnostic is reported at.
    opener
        Opener the closer was compared against, for indentation and type findings.

    Returns
    -------
    Diagnostic
        Populated diagnostic record.

    Raises
    ------
    ValueError
        Raised when ``kind`` needs an opener and none was supplied.
    """
    message = _MESSAGE_FORMATTERS[kind](occurrence, opener)
    related = opener if kind in _OPENER_KINDS else None
    return Diagnostic(
        line=occurrence.line,
        column=occurrence.column,
        kind=kind,
        message=message,
        hint=_HINTS.get(kind),
        related_line=related.line if related is not None else None,
        related_column=related.column if related is not None else None,
    )


__all__ = ["Diagnostic", "DiagnosticKind", "build_diagnostic"]
