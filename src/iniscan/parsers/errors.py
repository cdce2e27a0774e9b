from __future__ import annotations

from typing import Optional

from iniscan.core.errors import ErrorKind, IniScanError


class StructuredParseError(ValueError):
    """Raised by the text-level parsers; wraps the underlying scanner/loader error."""

    def __init__(self, message: str, *, cause: Optional[IniScanError] = None) -> None:
        super().__init__(message)
        self.cause = cause

    @property
    def kind(self) -> Optional[ErrorKind]:
        return self.cause.kind if self.cause is not None else None

    @property
    def line(self) -> Optional[int]:
        return self.cause.line if self.cause is not None else None
