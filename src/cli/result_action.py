"""Result action that turns command return values into exit codes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from rich.console import Console

from cli.exit_codes import ExitCode
from cli.result import CliResult

if TYPE_CHECKING:
    from cyclopts import App

logger = logging.getLogger(__name__)


def cli_result_action(app: App, cmd: object, result: Any) -> int:
    """Print a result's summary and return its exit code.

    Registered as the app's ``result_action``. Commands may return ``None``,
    a bare ``int`` or a ``CliResult``.

    Returns
    -------
    int
        Exit code for the process.
    """
    _ = app, cmd
    if result is None:
        return ExitCode.SUCCESS
    if isinstance(result, CliResult):
        if result.summary is not None:
            Console(highlight=False, soft_wrap=True).print(result.summary, markup=False)
        return result.exit_code
    if isinstance(result, int):
        return result
    logger.error("Unexpected command return type: %s", type(result).__name__)
    return ExitCode.GENERAL_ERROR


__all__ = ["cli_result_action"]
