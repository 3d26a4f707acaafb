"""Stack-based matching of bracket occurrences.

Closers are compared against the most recent unmatched opener. Indentation is
checked before bracket kind, so a closer that is both wrongly indented and of the
wrong kind is reported only for indentation.

The two indentation outcomes recover differently:

- an over-indented closer is dropped and its opener stays on the stack;
- an under-indented closer drops its opener and is compared again against the
  next opener down the stack.
"""

from __future__ import annotations

import logging
from collections import deque
from enum import Enum
from typing import TYPE_CHECKING

from braces.diagnostics import Diagnostic, DiagnosticKind, build_diagnostic
from core_types import NonNegativeInt
from serde_msgspec import StructBaseStrict

if TYPE_CHECKING:
    from collections.abc import Iterable

    from braces.tokens import BracketOccurrence

logger = logging.getLogger(__name__)


class MatchOutcome(Enum):
    """Decision taken for a single closer."""

    MATCHED = "matched"
    UNMATCHED_CLOSE = "unmatched_close"
    OVER_INDENTED = "over_indented"
    UNDER_INDENTED = "under_indented"
    TYPE_MISMATCH = "type_mismatch"


_OUTCOME_KINDS: dict[MatchOutcome, DiagnosticKind] = {
    MatchOutcome.UNMATCHED_CLOSE: DiagnosticKind.UNMATCHED_CLOSE,
    MatchOutcome.OVER_INDENTED: DiagnosticKind.OVER_INDENTED_CLOSE,
    MatchOutcome.UNDER_INDENTED: DiagnosticKind.UNDER_INDENTED_CLOSE,
    MatchOutcome.TYPE_MISMATCH: DiagnosticKind.TYPE_MISMATCH,
}


class MatchResult(StructBaseStrict, frozen=True):
    """Diagnostics produced by one matching pass.

    Parameters
    ----------
    diagnostics
        Findings in emission order.
    error_count
        Number of findings; always equal to ``len(diagnostics)``.
    """

    diagnostics: tuple[Diagnostic, ...] = ()
    error_count: NonNegativeInt = 0

    def __post_init__(self) -> None:
        """Validate that the error count agrees with the diagnostics.

        Raises
        ------
        ValueError
            Raised when ``error_count`` differs from the number of diagnostics.
        """
        if self.error_count != len(self.diagnostics):
            msg = (
                f"error_count={self.error_count} does not match "
                f"{len(self.diagnostics)} diagnostics."
            )
            raise ValueError(msg)

    @classmethod
    def from_diagnostics(cls, diagnostics: Iterable[Diagnostic]) -> MatchResult:
        """Build a result whose count is derived from the diagnostics.

        Returns
        -------
        MatchResult
            Result with a consistent error count.
        """
        collected = tuple(diagnostics)
        return cls(diagnostics=collected, error_count=len(collected))

    @property
    def ok(self) -> bool:
        """Return whether the pass produced no findings.

        Returns
        -------
        bool
            True when there are no diagnostics.
        """
        return self.error_count == 0


def classify_close(top: BracketOccurrence | None, closer: BracketOccurrence) -> MatchOutcome:
    """Decide how a closer relates to the opener on top of the stack.

    Parameters
    ----------
    top
        Most recent unmatched opener, or ``None`` when the stack is empty.
    closer
        Closing occurrence being processed.

    Returns
    -------
    MatchOutcome
        Tagged decision for the closer.
    """
    if top is None:
        return MatchOutcome.UNMATCHED_CLOSE
    if top.indent_level < closer.indent_level:
        return MatchOutcome.OVER_INDENTED
    if top.indent_level > closer.indent_level:
        return MatchOutcome.UNDER_INDENTED
    if top.kind is not closer.kind:
        return MatchOutcome.TYPE_MISMATCH
    return MatchOutcome.MATCHED


def match(occurrences: Iterable[BracketOccurrence]) -> MatchResult:
    """Match openers with closers and collect diagnostics.

    Parameters
    ----------
    occurrences
        Occurrences in reading order.

    Returns
    -------
    MatchResult
        Diagnostics in emission order, followed by unclosed openers oldest first.
    """
    pending: deque[BracketOccurrence] = deque(occurrences)
    stack: list[BracketOccurrence] = []
    diagnostics: list[Diagnostic] = []
    while pending:
        current = pending.popleft()
        if current.is_open:
            stack.append(current)
            continue
        top = stack.pop() if stack else None
        outcome = classify_close(top, current)
        if outcome is MatchOutcome.MATCHED:
            continue
        diagnostics.append(build_diagnostic(_OUTCOME_KINDS[outcome], current, top))
        if outcome is MatchOutcome.OVER_INDENTED and top is not None:
            stack.append(top)
        elif outcome is MatchOutcome.UNDER_INDENTED:
            pending.appendleft(current)
    diagnostics.extend(build_diagnostic(DiagnosticKind.UNCLOSED_OPEN, opener) for opener in stack)
    if stack:
        logger.debug("%d openers left unclosed", len(stack))
    return MatchResult.from_diagnostics(diagnostics)


__all__ = ["MatchOutcome", "MatchResult", "classify_close", "match"]
