"""Text and JSON rendering of scan reports."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cli.input_source import STDIN_NAME
from serde_msgspec import dumps_json, to_builtins

if TYPE_CHECKING:
    from braces.check import CheckReport, SourceReport


def render_source_lines(source: SourceReport, *, show_name: bool) -> list[str]:
    """Render one source's diagnostics as text lines.

    Returns
    -------
    list[str]
        One line per diagnostic, prefixed with ``<name>:`` when requested.
    """
    prefix = f"{source.name}:" if show_name else ""
    return [f"{prefix}{diagnostic.render()}" for diagnostic in source.result.diagnostics]


def render_text(report: CheckReport) -> str:
    """Render every diagnostic of a report, one per line.

    Standard input sources are shown without a name prefix. The summary
    line is printed separately by the result action.

    Returns
    -------
    str
        Newline-terminated text, empty when there are no findings.
    """
    lines: list[str] = []
    for source in report.sources:
        lines.extend(render_source_lines(source, show_name=source.name != STDIN_NAME))
    return "".join(f"{line}\n" for line in lines)


def report_payload(report: CheckReport) -> dict[str, object]:
    """Build the JSON document for a report.

    Returns
    -------
    dict[str, object]
        ``{"sources": [...], "error_count": N}``.
    """
    return {
        "sources": [
            {
                "name": source.name,
                "error_count": source.error_count,
                "diagnostics": to_builtins(source.result.diagnostics),
            }
            for source in report.sources
        ],
        "error_count": report.error_count,
    }


def render_json(report: CheckReport) -> str:
    """Render a report as an indented JSON document.

    Returns
    -------
    str
        Newline-terminated JSON text.
    """
    return dumps_json(report_payload(report), pretty=True).decode("utf-8") + "\n"


__all__ = ["render_json", "render_source_lines", "render_text", "report_payload"]
