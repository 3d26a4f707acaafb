"""Version reporting for the bracecheck CLI."""

from __future__ import annotations

import json
import platform
import sys
from importlib.metadata import PackageNotFoundError, version

_RUNTIME_DEPENDENCIES = ("cyclopts", "msgspec", "rich")


def _installed(distribution: str) -> str | None:
    try:
        return version(distribution)
    except PackageNotFoundError:
        return None


def get_version() -> str:
    """Return the installed bracecheck version, or ``0.0.0-dev`` from a source tree."""
    return _installed("bracecheck") or "0.0.0-dev"


def version_command() -> int:
    """Print bracecheck, interpreter and dependency versions as JSON.

    Returns
    -------
    int
        Exit status code.
    """
    payload = {
        "bracecheck": get_version(),
        "python": platform.python_version(),
        "platform": sys.platform,
        "dependencies": {name: _installed(name) for name in _RUNTIME_DEPENDENCIES},
    }
    sys.stdout.write(json.dumps(payload, indent=2, sort_keys=True) + "\n")
    return 0


__all__ = ["get_version", "version_command"]
