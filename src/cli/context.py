"""Per-invocation state handed to commands by the meta launcher."""

from __future__ import annotations

from dataclasses import dataclass

from cli.config_models import ResolvedConfig


@dataclass(frozen=True)
class RunContext:
    """Settings resolved once by the meta launcher.

    Commands receive it through a ``run_context`` parameter marked
    ``Parameter(parse=False)``.
    """

    log_level: str
    config: ResolvedConfig


__all__ = ["RunContext"]
