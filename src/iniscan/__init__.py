"""
iniscan: a single-pass INI scanner producing zero-copy records.

Public API surface:

- ``parse(text_or_bytes)`` -- parse an in-memory document, raising a
  ``ParseError`` subclass on malformed input.
- ``parse_file(path)`` -- load a file into a ``Buffer`` and parse it.
- ``run_parse`` / ``run_parse_file`` -- same, but return a ``ParseOutcome``
  carrying either the records or the error instead of raising.

Records hold ``Slice`` views into the ``Buffer`` they were parsed from.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

from iniscan.core.buffer import Buffer, Slice
from iniscan.core.engine import run_parse, run_parse_file
from iniscan.core.errors import (
    ConfigError,
    EmptyInputError,
    ErrorKind,
    ExitCode,
    IniScanError,
    LoadError,
    MissingEqualsError,
    MissingValueError,
    ParseError,
    UnterminatedSectionError,
)
from iniscan.core.loader import read_entire_file
from iniscan.core.models import ParseConfig, ParseOutcome, Record
from iniscan.core.scanner import Parser, parse_buffer

__all__ = [
    "Buffer",
    "ConfigError",
    "EmptyInputError",
    "ErrorKind",
    "ExitCode",
    "IniScanError",
    "LoadError",
    "MissingEqualsError",
    "MissingValueError",
    "ParseConfig",
    "ParseError",
    "ParseOutcome",
    "Parser",
    "Record",
    "Slice",
    "UnterminatedSectionError",
    "parse",
    "parse_buffer",
    "parse_file",
    "read_entire_file",
    "run_parse",
    "run_parse_file",
]


def parse(
    source: Union[str, bytes, Buffer],
    *,
    encoding: str = "utf-8",
    legacy_comment_skip: bool = False,
) -> List[Record]:
    """Parse a string, bytes or Buffer into records in file order."""
    if isinstance(source, Buffer):
        buffer = source
    elif isinstance(source, str):
        buffer = Buffer.from_text(source, encoding)
    else:
        buffer = Buffer(source)
    return parse_buffer(buffer, legacy_comment_skip=legacy_comment_skip)


def parse_file(path: Union[str, Path], *, legacy_comment_skip: bool = False) -> List[Record]:
    return parse_buffer(read_entire_file(path), legacy_comment_skip=legacy_comment_skip)
