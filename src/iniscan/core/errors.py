from __future__ import annotations

from enum import Enum, IntEnum
from typing import Optional


class ExitCode(IntEnum):
    OK = 0
    PARSE_ERROR = 1
    LOAD_ERROR = 2


class ErrorKind(str, Enum):
    UNTERMINATED_SECTION = "unterminated_section"
    MISSING_EQUALS = "missing_equals"
    MISSING_VALUE = "missing_value"
    IO_ERROR = "io_error"
    EMPTY_INPUT = "empty_input"
    CONFIG_ERROR = "config_error"


class IniScanError(Exception):
    """Base exception for all iniscan errors.

    Carries a categorical ``kind`` and, for scanner errors, the 1-based
    ``line`` the problem was found on.
    """

    kind: ErrorKind = ErrorKind.IO_ERROR

    def __init__(self, reason: str, *, line: Optional[int] = None) -> None:
        self.reason = reason
        self.line = line
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.line is None:
            return self.reason
        return f"[line {self.line}] {self.reason}"


# ----------------------------
# Scanner errors
# ----------------------------

class ParseError(IniScanError):
    """Malformed input. The whole parse is abandoned."""


class UnterminatedSectionError(ParseError):
    kind = ErrorKind.UNTERMINATED_SECTION


class MissingEqualsError(ParseError):
    kind = ErrorKind.MISSING_EQUALS


class MissingValueError(ParseError):
    kind = ErrorKind.MISSING_VALUE


# ----------------------------
# Loader errors
# ----------------------------

class LoadError(IniScanError):
    """The buffer could not be obtained from its source."""

    kind = ErrorKind.IO_ERROR


class EmptyInputError(LoadError):
    kind = ErrorKind.EMPTY_INPUT


class ConfigError(LoadError):
    """A config file could not be read, decoded or validated."""

    kind = ErrorKind.CONFIG_ERROR
