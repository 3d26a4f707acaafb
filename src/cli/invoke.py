"""Command dispatch with run-context injection."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from cyclopts.exceptions import CycloptsError

from cli.context import RunContext
from cli.exit_codes import ExitCode
from cli.result_action import cli_result_action

if TYPE_CHECKING:
    from cyclopts import App

logger = logging.getLogger(__name__)


def invoke(app: App, tokens: list[str], *, run_context: RunContext) -> int:
    """Parse ``tokens``, hand ``run_context`` to the command and run it.

    Cyclopts leaves ``Parameter(parse=False)`` arguments in the ``ignored``
    mapping; those named ``run_context`` or typed ``RunContext`` receive the
    launcher's context. Errors are logged and mapped through
    ``ExitCode.from_exception``.

    Returns
    -------
    int
        Exit code for the process.
    """
    started = time.perf_counter()
    try:
        command, bound, ignored = app.parse_args(tokens, exit_on_error=False, print_error=True)
        for name, hint in ignored.items():
            if hint is RunContext or name == "run_context":
                bound.arguments[name] = run_context
        exit_code = cli_result_action(app, command, command(*bound.args, **bound.kwargs))
    except CycloptsError as exc:
        # Cyclopts has already printed the error panel.
        exit_code = ExitCode.from_exception(exc)
    except Exception as exc:
        exit_code = ExitCode.from_exception(exc)
        if exit_code is ExitCode.GENERAL_ERROR:
            logger.exception("Command failed")
        else:
            logger.error("%s", exc)  # noqa: TRY400
    logger.debug(
        "%s exited with %d after %.1f ms",
        tokens[0] if tokens else "<default>",
        exit_code,
        (time.perf_counter() - started) * 1000.0,
    )
    return int(exit_code)


__all__ = ["invoke"]
