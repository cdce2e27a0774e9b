from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from iniscan.core.buffer import Buffer
from iniscan.core.errors import EmptyInputError, LoadError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_entire_file(path: PathLike) -> Buffer:
    """
    Read ``path`` in binary mode into a Buffer.

    Raises LoadError if the file cannot be read and EmptyInputError if it
    holds no bytes.
    """
    p = Path(path)
    try:
        raw = p.read_bytes()
    except OSError as e:
        raise LoadError(f"Unable to open {p} for reading: {e.strerror or e}") from e

    if not raw:
        raise EmptyInputError(f"{p} is empty")

    logger.debug("Read %d byte(s) from %s", len(raw), p)
    return Buffer(raw)


def load_buffer(path: PathLike, *, max_file_bytes: Optional[int] = None) -> Buffer:
    """Like read_entire_file, but refuses files larger than ``max_file_bytes``."""
    p = Path(path)
    if max_file_bytes is not None:
        try:
            size = p.stat().st_size
        except OSError as e:
            raise LoadError(f"Unable to determine length of {p}: {e.strerror or e}") from e
        if size > max_file_bytes:
            raise LoadError(f"{p} is {size} bytes, larger than the {max_file_bytes} byte limit")
    return read_entire_file(p)
