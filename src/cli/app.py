"""The ``bracecheck`` command-line application."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Annotated, Literal

from cyclopts import App, Parameter

from cli.commands.version import get_version
from cli.config_loader import resolve_config
from cli.context import RunContext
from cli.groups import session_group
from cli.invoke import invoke
from cli.result_action import cli_result_action

logger = logging.getLogger(__name__)

_HELP_EPILOGUE = """
Examples:
  bracecheck check src/main.c            Scan a file
  cat main.c | bracecheck check          Scan standard input
  bracecheck check a.c b.c --format json Emit a JSON report
  bracecheck config show --with-sources  Show effective configuration

Configuration is read from bracecheck.toml in the current directory or a
parent, else from [tool.bracecheck] in the nearest pyproject.toml.
"""

app = App(
    name="bracecheck",
    help="Bracket pairing checker using bracket type and line indentation.",
    help_format="rich",
    help_epilogue=_HELP_EPILOGUE,
    version=get_version(),
    version_flags=["--version", "-V"],
    default_parameter=Parameter(show_default=True, show_env_var=True),
    result_action=cli_result_action,
)
app.meta.group_parameters = session_group


@dataclass(frozen=True)
class SessionOptions:
    """Options read by the meta launcher before any command runs."""

    config_file: Annotated[
        str | None,
        Parameter(
            name="--config",
            help="TOML configuration file to use instead of the discovered one.",
        ),
    ] = None
    log_level: Annotated[
        Literal["DEBUG", "INFO", "WARNING", "ERROR"],
        Parameter(
            name="--log-level",
            help="Logging verbosity; log records go to stderr.",
            env_var="BRACECHECK_LOG_LEVEL",
        ),
    ] = "WARNING"


@app.meta.default
def meta_launcher(
    *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
    session: Annotated[SessionOptions, Parameter(name="*")] = SessionOptions(),  # noqa: B008
) -> int:
    """Configure logging, resolve configuration, then run the selected command.

    Returns
    -------
    int
        Exit status of the command.
    """
    logging.basicConfig(level=session.log_level)
    run_context = RunContext(
        log_level=session.log_level,
        config=resolve_config(session.config_file),
    )
    logger.debug("Resolved configuration: %s", run_context.config.flat())
    return invoke(app, list(tokens), run_context=run_context)


app.command("cli.commands.check:check_command", name="check", alias="c")

_config_app = App(name="config", help="Inspect or create the configuration file.")
_config_app.command("cli.commands.config:show_config", name="show")
_config_app.command("cli.commands.config:init_config", name="init")
app.command(_config_app, alias="cfg")

app.command("cli.commands.version:version_command", name="version", alias="v")


def main() -> None:
    """Run the bracecheck CLI and exit with its status code."""
    sys.exit(app.meta())


__all__ = ["app", "main", "meta_launcher"]
