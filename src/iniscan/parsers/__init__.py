from __future__ import annotations

from iniscan.parsers.errors import StructuredParseError
from iniscan.parsers.ini_parser import join_key, parse_ini
from iniscan.parsers.types import ParsedKV

__all__ = ["ParsedKV", "StructuredParseError", "join_key", "parse_ini"]
