from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ParsedKV:
    """ A key-value pair routed out of a parsed file, keyed by ``section.key``."""
    key: str
    value: str
    line: Optional[int] = None
