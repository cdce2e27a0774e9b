from __future__ import annotations

from typing import List

from iniscan.core.buffer import Buffer
from iniscan.core.errors import IniScanError
from iniscan.core.scanner import parse_buffer
from iniscan.parsers.errors import StructuredParseError
from iniscan.parsers.types import ParsedKV


def join_key(section: str, key: str) -> str:
    return key if not section else f"{section}.{key}"


def parse_ini(
    text: str,
    *,
    encoding: str = "utf-8",
    legacy_comment_skip: bool = False,
) -> List[ParsedKV]:
    """
    INI -> entries like:
      section.key = value
      key = value          (lines before any [section])

    File order and repeated keys are kept as-is.
    """
    out: List[ParsedKV] = []
    if not text:
        return out

    try:
        records = parse_buffer(
            Buffer.from_text(text, encoding),
            legacy_comment_skip=legacy_comment_skip,
        )
    except IniScanError as e:
        raise StructuredParseError(f"INI parse failed: {e}", cause=e) from e

    for rec in records:
        section, key, value = rec.as_text(encoding)
        out.append(ParsedKV(key=join_key(section, key), value=value, line=rec.line))

    return out
