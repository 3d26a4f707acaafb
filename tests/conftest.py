"""Shared pytest fixtures for bracecheck tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def write_source(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper that writes a named source file under ``tmp_path``.

    Returns
    -------
    Callable[[str, str], Path]
        Function taking ``(name, text)`` and returning the written path.
    """

    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
