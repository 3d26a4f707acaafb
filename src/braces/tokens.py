"""Bracket kinds and occurrence records."""

from __future__ import annotations

from enum import StrEnum

from core_types import NonNegativeInt
from serde_msgspec import StructBaseHotPath


class BracketKind(StrEnum):
    """Structural bracket families."""

    ROUND = "round"
    CURLY = "curly"
    SQUARE = "square"


_GLYPHS: dict[tuple[BracketKind, bool], str] = {
    (BracketKind.ROUND, True): "(",
    (BracketKind.ROUND, False): ")",
    (BracketKind.CURLY, True): "{",
    (BracketKind.CURLY, False): "}",
    (BracketKind.SQUARE, True): "[",
    (BracketKind.SQUARE, False): "]",
}

_CLASSIFY: dict[str, tuple[BracketKind, bool]] = {glyph: key for key, glyph in _GLYPHS.items()}


def classify_glyph(char: str) -> tuple[BracketKind, bool] | None:
    """Classify a single character as a bracket glyph.

    Parameters
    ----------
    char
        Character to classify.

    Returns
    -------
    tuple[BracketKind, bool] | None
        ``(kind, is_open)`` for bracket glyphs, otherwise ``None``.
    """
    return _CLASSIFY.get(char)


def glyph_for(kind: BracketKind, *, is_open: bool) -> str:
    """Return the glyph for a bracket kind and direction.

    Returns
    -------
    str
        One of ``( ) { } [ ]``.
    """
    return _GLYPHS[kind, is_open]


class BracketOccurrence(StructBaseHotPath, frozen=True):
    """One bracket character found in the input.

    ``indent_level`` is shared by every occurrence on the same line.
    """

    kind: BracketKind
    is_open: bool
    indent_level: NonNegativeInt
    line: NonNegativeInt
    column: NonNegativeInt

    @property
    def glyph(self) -> str:
        """Return the bracket character for this occurrence.

        Returns
        -------
        str
            Bracket glyph.
        """
        return glyph_for(self.kind, is_open=self.is_open)

    @property
    def location(self) -> str:
        """Return the ``line,column`` location string.

        Returns
        -------
        str
            Zero-based location.
        """
        return f"{self.line},{self.column}"


__all__ = [
    "BracketKind",
    "BracketOccurrence",
    "classify_glyph",
    "glyph_for",
]
