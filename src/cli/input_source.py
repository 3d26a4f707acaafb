"""Input acquisition for scanned sources."""

from __future__ import annotations

import codecs
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO

from braces.check import split_lines

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

STDIN_NAME = "-"


class InputError(OSError):
    """Raised when a source cannot be read."""


@dataclass(frozen=True)
class InputSource:
    """Named sequence of lines to scan.

    Parameters
    ----------
    name
        Display name; ``-`` for standard input.
    lines
        Lines without terminators.
    """

    name: str
    lines: tuple[str, ...]


def decode_source(data: bytes, *, name: str, encoding: str = "utf-8") -> InputSource:
    """Decode raw bytes and split them into lines.

    Undecodable bytes become U+FFFD rather than aborting the scan. Only
    ``\\n`` and ``\\r\\n`` end a line; a lone ``\\r`` stays in the text.

    Returns
    -------
    InputSource
        Source holding the decoded lines.

    Raises
    ------
    InputError
        Raised when ``encoding`` does not name a text encoding.
    """
    try:
        text = data.decode(encoding, errors="replace")
    except LookupError as exc:
        msg = f"Unknown encoding {encoding!r}."
        raise InputError(msg) from exc
    logger.debug("Read %s (%d bytes)", name, len(data))
    return InputSource(name=name, lines=tuple(split_lines(text)))


def read_stream(
    stream: BinaryIO,
    *,
    name: str = STDIN_NAME,
    encoding: str = "utf-8",
) -> InputSource:
    """Read an open binary stream to its end.

    Returns
    -------
    InputSource
        Source holding the stream's lines.
    """
    return decode_source(stream.read(), name=name, encoding=encoding)


def read_source(path: str | Path, *, encoding: str = "utf-8") -> InputSource:
    """Read a file, or standard input when ``path`` is ``-``.

    Parameters
    ----------
    path
        File path or ``-``.
    encoding
        Text encoding of the source.

    Returns
    -------
    InputSource
        Source holding the file's lines.

    Raises
    ------
    InputError
        Raised when the file cannot be read.
    """
    name = str(path)
    if name == STDIN_NAME:
        return read_stream(sys.stdin.buffer, encoding=encoding)
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        msg = f"Cannot read {name}: {exc.strerror or exc}"
        raise InputError(msg) from exc
    return decode_source(data, name=name, encoding=encoding)


def read_sources(paths: Sequence[str | Path], *, encoding: str = "utf-8") -> list[InputSource]:
    """Read each path in order; no paths means standard input.

    Returns
    -------
    list[InputSource]
        Sources in the order given.

    Raises
    ------
    InputError
        Raised before any source is read when ``encoding`` is unknown.
    """
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        msg = f"Unknown encoding {encoding!r}."
        raise InputError(msg) from exc
    if not paths:
        return [read_stream(sys.stdin.buffer, encoding=encoding)]
    return [read_source(path, encoding=encoding) for path in paths]


__all__ = [
    "STDIN_NAME",
    "InputError",
    "InputSource",
    "decode_source",
    "read_source",
    "read_sources",
    "read_stream",
]
