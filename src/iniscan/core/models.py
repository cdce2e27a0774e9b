from __future__ import annotations

import codecs
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from iniscan.core.buffer import Buffer, Slice
from iniscan.core.errors import ExitCode, IniScanError, LoadError


# ================================
# Records
# ================================


@dataclass(frozen=True)
class Record:
    """
    One parsed ``key = value`` line.

    All three slices point into the same buffer the parser was given.
    An empty ``section`` means the line appeared before any ``[section]`` header.
    """

    section: Slice
    key: Slice
    value: Slice
    line: int

    @property
    def has_section(self) -> bool:
        return not self.section.is_empty

    def as_text(self, encoding: str = "utf-8") -> Tuple[str, str, str]:
        return (
            self.section.decode(encoding),
            self.key.decode(encoding),
            self.value.decode(encoding),
        )


@dataclass
class ParseOutcome:
    """Either the records of a successful parse or the error that stopped it."""

    records: List[Record] = field(default_factory=list)
    error: Optional[IniScanError] = None
    buffer: Optional[Buffer] = None
    source: Optional[str] = None
    duration_ms: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def exit_code(self) -> ExitCode:
        if self.error is None:
            return ExitCode.OK
        if isinstance(self.error, LoadError):
            return ExitCode.LOAD_ERROR
        return ExitCode.PARSE_ERROR


# ================================
# Parse config (defaults only)
# ================================

DEFAULT_MAX_FILE_BYTES = 2_000_000


class ParseConfig(BaseModel):
    """
    Defaults live here.
    Repo/global/CLI overrides are merged by core/config.py (do NOT load config in defaults).
    """

    legacy_comment_skip: bool = Field(
        default=False,
        description="Skip the byte right after a comment without dispatching it (reference parser behaviour).",
    )
    max_file_bytes: int = Field(default=DEFAULT_MAX_FILE_BYTES, ge=1)
    encoding: str = "utf-8"

    @field_validator("encoding")
    @classmethod
    def _encoding_must_exist(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {v}") from e
        return v


# ================================
# UI config (defaults only)
# ================================


class UIConfig(BaseModel):
    """
    Output preferences. Defaults live here.
    Repo/global/CLI overrides are merged by core/config.py.
    """

    show_line_numbers: bool = True
    section_placeholder: str = Field(
        default="",
        description="Text shown in place of the section for records that precede any header.",
    )
