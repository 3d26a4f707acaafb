"""Scan command: check sources for bracket pairing errors."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, Annotated, Literal

from cyclopts import Parameter

from braces.check import check_sources
from cli.config_loader import resolve_config
from cli.context import RunContext
from cli.groups import input_group, output_group
from cli.input_source import read_sources
from cli.render import render_json, render_text
from cli.result import CliResult
from core_types import OutputFormatName, parse_output_format

if TYPE_CHECKING:
    from collections.abc import Mapping

    from core_types import JsonValue

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckSettings:
    """Effective options for one scan after config defaults are applied."""

    output_format: OutputFormatName
    fail_on_findings: bool
    encoding: str


def resolve_check_settings(
    config: Mapping[str, JsonValue],
    *,
    output_format: str | None = None,
    fail_on_findings: bool | None = None,
    encoding: str | None = None,
) -> CheckSettings:
    """Merge command-line values over configuration values.

    Parameters
    ----------
    config
        Flattened configuration contents (``check.*`` keys).
    output_format
        Explicit ``--format`` value.
    fail_on_findings
        Explicit ``--fail-on-findings`` value.
    encoding
        Explicit ``--encoding`` value.

    Returns
    -------
    CheckSettings
        Resolved settings.

    Raises
    ------
    ValueError
        Raised when the resolved output format is unknown.
    """
    raw_format = output_format if output_format is not None else config.get("check.format", "text")
    resolved_format = parse_output_format(str(raw_format))
    if resolved_format is None:
        msg = f"Unsupported output format {raw_format!r}."
        raise ValueError(msg)
    if fail_on_findings is None:
        fail_on_findings = bool(config.get("check.fail_on_findings", True))
    if encoding is None:
        encoding = str(config.get("check.encoding", "utf-8"))
    return CheckSettings(
        output_format=resolved_format,
        fail_on_findings=fail_on_findings,
        encoding=encoding,
    )


def check_command(
    *paths: Annotated[
        str,
        Parameter(
            help="Files to scan. Use '-' or pass no paths to read standard input.",
            group=input_group,
        ),
    ],
    output_format: Annotated[
        Literal["text", "json"] | None,
        Parameter(
            name="--format",
            help="Report format (default from config: text).",
            group=output_group,
        ),
    ] = None,
    fail_on_findings: Annotated[
        bool | None,
        Parameter(
            name="--fail-on-findings",
            help="Exit with status 1 when any brace error is found.",
            group=output_group,
        ),
    ] = None,
    encoding: Annotated[
        str | None,
        Parameter(
            name="--encoding",
            help="Text encoding of the scanned files (default from config: utf-8).",
            group=input_group,
        ),
    ] = None,
    run_context: Annotated[RunContext | None, Parameter(parse=False)] = None,
) -> CliResult:
    """Scan files or standard input for bracket pairing errors.

    Diagnostics go to stdout; in text format the result action then prints
    the ``scan complete`` summary line.

    Returns
    -------
    CliResult
        Result whose exit code reflects the findings policy.
    """
    config = run_context.config if run_context is not None else resolve_config(None)
    settings = resolve_check_settings(
        config.flat(),
        output_format=output_format,
        fail_on_findings=fail_on_findings,
        encoding=encoding,
    )
    sources = read_sources(paths, encoding=settings.encoding)
    report = check_sources((source.name, source.lines) for source in sources)
    logger.info("Scanned %d source(s): %d brace errors", len(report.sources), report.error_count)

    is_json = settings.output_format is OutputFormatName.JSON
    sys.stdout.write(render_json(report) if is_json else render_text(report))
    return CliResult.from_report(
        report,
        fail_on_findings=settings.fail_on_findings,
        with_summary=not is_json,
    )


__all__ = ["CheckSettings", "check_command", "resolve_check_settings"]
