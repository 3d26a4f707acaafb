"""Exit statuses of the bracecheck CLI."""

from __future__ import annotations

from enum import IntEnum

from cyclopts.exceptions import CycloptsError
from cyclopts.exceptions import ValidationError as CycloptsValidationError

from cli.config_loader import ConfigError
from cli.input_source import InputError


class ExitCode(IntEnum):
    """Process exit statuses.

    ``FINDINGS`` means the scan itself succeeded and found brace errors;
    2 and above mean no complete scan happened.
    """

    SUCCESS = 0
    FINDINGS = 1
    PARSE_ERROR = 2
    VALIDATION_ERROR = 3
    CONFIG_ERROR = 4
    INPUT_ERROR = 5
    GENERAL_ERROR = 9

    @classmethod
    def from_exception(cls, exc: BaseException) -> ExitCode:
        """Map an exception raised during parsing or execution to an exit status.

        Returns
        -------
        ExitCode
            First matching entry of the classification table, else ``GENERAL_ERROR``.
        """
        for types, code in _CLASSIFICATION:
            if isinstance(exc, types):
                return code
        return cls.GENERAL_ERROR


type _ExceptionTypes = type[BaseException] | tuple[type[BaseException], ...]

# Subclasses come before their bases.
_CLASSIFICATION: tuple[tuple[_ExceptionTypes, ExitCode], ...] = (
    (CycloptsValidationError, ExitCode.VALIDATION_ERROR),
    (CycloptsError, ExitCode.PARSE_ERROR),
    (ConfigError, ExitCode.CONFIG_ERROR),
    (FileExistsError, ExitCode.CONFIG_ERROR),
    (InputError, ExitCode.INPUT_ERROR),
    ((ValueError, TypeError), ExitCode.VALIDATION_ERROR),
    (OSError, ExitCode.INPUT_ERROR),
)


__all__ = ["ExitCode"]
