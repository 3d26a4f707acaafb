"""Command return value consumed by the result action."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from braces.check import CheckReport


@dataclass(frozen=True)
class CliResult:
    """Exit status plus an optional summary line for the console."""

    exit_code: int
    summary: str | None = None

    @classmethod
    def from_report(
        cls,
        report: CheckReport,
        *,
        fail_on_findings: bool,
        with_summary: bool = True,
    ) -> CliResult:
        """Derive the result of a scan.

        Parameters
        ----------
        report
            Completed scan report.
        fail_on_findings
            Whether any brace error turns the exit status into ``FINDINGS``.
        with_summary
            Whether to carry the ``scan complete`` line for the console.

        Returns
        -------
        CliResult
            ``SUCCESS`` or ``FINDINGS`` result.
        """
        failed = fail_on_findings and not report.ok
        return cls(
            exit_code=int(ExitCode.FINDINGS if failed else ExitCode.SUCCESS),
            summary=report.summary() if with_summary else None,
        )

    @property
    def ok(self) -> bool:
        """Whether the exit status is ``SUCCESS``."""
        return self.exit_code == ExitCode.SUCCESS


__all__ = ["CliResult"]
