from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Optional, Union

from iniscan.core.buffer import Buffer
from iniscan.core.errors import IniScanError
from iniscan.core.loader import load_buffer
from iniscan.core.models import ParseConfig, ParseOutcome
from iniscan.core.scanner import parse_buffer

logger = logging.getLogger(__name__)


def run_parse(
    buffer: Buffer,
    config: Optional[ParseConfig] = None,
    *,
    source: Optional[str] = None,
) -> ParseOutcome:
    """
    Parse an already loaded buffer.

    Never raises for malformed input: the error is returned on the outcome
    so callers can report it and exit with ``outcome.exit_code``.
    """
    config = config or ParseConfig()
    t0 = time.perf_counter()

    outcome = ParseOutcome(buffer=buffer, source=source)
    try:
        outcome.records = parse_buffer(buffer, legacy_comment_skip=config.legacy_comment_skip)
    except IniScanError as e:
        logger.info("Parse of %s failed: %s", source or "<buffer>", e)
        outcome.error = e
    else:
        logger.info("Parsed %s: %d record(s)", source or "<buffer>", len(outcome.records))

    outcome.duration_ms = int((time.perf_counter() - t0) * 1000)
    return outcome


def run_parse_file(
    path: Union[str, Path],
    config: Optional[ParseConfig] = None,
) -> ParseOutcome:
    """Load ``path`` and parse it. Load failures are reported the same way as parse failures."""
    config = config or ParseConfig()
    source = str(path)

    try:
        buffer = load_buffer(path, max_file_bytes=config.max_file_bytes)
    except IniScanError as e:
        logger.info("Load of %s failed: %s", source, e)
        return ParseOutcome(error=e, source=source)

    return run_parse(buffer, config, source=source)
