"""Convert text lines into ordered bracket occurrences."""

from __future__ import annotations

from itertools import takewhile
from typing import TYPE_CHECKING

from braces.tokens import BracketOccurrence, classify_glyph

if TYPE_CHECKING:
    from collections.abc import Iterable


# Information separators U+001C..U+001F pass ``str.isspace`` but are not
# Unicode White_Space.
_NOT_INDENT = frozenset("\x1c\x1d\x1e\x1f")


def _is_indent(char: str) -> bool:
    return char.isspace() and char not in _NOT_INDENT


def indent_level(line: str) -> int:
    """Count leading whitespace characters on a line.

    Tabs count as a single unit. A blank line indents to its full length.
    Whitespace means the Unicode ``White_Space`` property, so the ASCII
    information separators ``\\x1c``-``\\x1f`` end the indentation.

    Returns
    -------
    int
        Number of leading whitespace characters.
    """
    return sum(1 for _ in takewhile(_is_indent, line))


def tokenize_line(line: str, line_number: int) -> list[BracketOccurrence]:
    """Collect the bracket occurrences of a single line.

    Parameters
    ----------
    line
        Line text without its terminator.
    line_number
        Zero-based index of the line.

    Returns
    -------
    list[BracketOccurrence]
        Occurrences in left-to-right order.
    """
    level = indent_level(line)
    occurrences: list[BracketOccurrence] = []
    for column, char in enumerate(line):
        classified = classify_glyph(char)
        if classified is None:
            continue
        kind, is_open = classified
        occurrences.append(
            BracketOccurrence(
                kind=kind,
                is_open=is_open,
                indent_level=level,
                line=line_number,
                column=column,
            )
        )
    return occurrences


def tokenize(lines: Iterable[str]) -> list[BracketOccurrence]:
    """Tokenize lines into bracket occurrences in reading order.

    Returns
    -------
    list[BracketOccurrence]
        Occurrences ordered top-to-bottom, left-to-right.
    """
    occurrences: list[BracketOccurrence] = []
    for line_number, line in enumerate(lines):
        occurrences.extend(tokenize_line(line, line_number))
    return occurrences


__all__ = ["indent_level", "tokenize", "tokenize_line"]
