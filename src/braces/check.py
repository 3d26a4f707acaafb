"""Tokenize-then-match composition over lines, text, and named sources."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from braces.matcher import MatchResult, match
from braces.tokenizer import tokenize
from serde_msgspec import StructBaseStrict

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


def split_lines(text: str) -> list[str]:
    """Split text on line terminators.

    ``\\n`` and ``\\r\\n`` both terminate a line; any other ``\\r`` is kept. A
    trailing line without a terminator still counts; a final terminator does
    not start a new line.

    Returns
    -------
    list[str]
        Lines without their terminators.
    """
    if not text:
        return []
    parts = text.split("\n")
    tail = parts.pop()
    lines = [part.removesuffix("\r") for part in parts]
    if tail:
        lines.append(tail)
    return lines


def check_lines(lines: Iterable[str]) -> MatchResult:
    """Scan lines for bracket pairing errors.

    Returns
    -------
    MatchResult
        Diagnostics and error count for the lines.
    """
    occurrences = tokenize(lines)
    logger.debug("Tokenized %d bracket occurrences", len(occurrences))
    return match(occurrences)


def check_text(text: str) -> MatchResult:
    """Scan a block of text for bracket pairing errors.

    Returns
    -------
    MatchResult
        Diagnostics and error count for the text.
    """
    return check_lines(split_lines(text))


class SourceReport(StructBaseStrict, frozen=True):
    """Scan result for one named input source."""

    name: str
    result: MatchResult

    @property
    def error_count(self) -> int:
        """Return the number of findings in this source.

        Returns
        -------
        int
            Error count.
        """
        return self.result.error_count


class CheckReport(StructBaseStrict, frozen=True):
    """Scan results across independently checked sources."""

    sources: tuple[SourceReport, ...] = ()

    @property
    def error_count(self) -> int:
        """Return the total number of findings.

        Returns
        -------
        int
            Sum of per-source error counts.
        """
        return sum(source.error_count for source in self.sources)

    @property
    def ok(self) -> bool:
        """Return whether no source produced findings.

        Returns
        -------
        bool
            True when the total error count is zero.
        """
        return self.error_count == 0

    def summary(self) -> str:
        """Return the closing summary line.

        Returns
        -------
        str
            ``"scan complete: found N brace errors"``.
        """
        return f"scan complete: found {self.error_count} brace errors"


def check_sources(sources: Iterable[tuple[str, Iterable[str]]]) -> CheckReport:
    """Scan each named source independently.

    The matcher stack never spans sources.

    Parameters
    ----------
    sources
        ``(name, lines)`` pairs in the order they should be reported.

    Returns
    -------
    CheckReport
        Per-source results in input order.
    """
    reports: list[SourceReport] = []
    for name, lines in sources:
        result = check_lines(lines)
        logger.debug("Checked %s: %d brace errors", name, result.error_count)
        reports.append(SourceReport(name=name, result=result))
    return CheckReport(sources=tuple(reports))


__all__ = [
    "CheckReport",
    "SourceReport",
    "check_lines",
    "check_sources",
    "check_text",
    "split_lines",
]
