from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from iniscan.core.errors import EmptyInputError


class Buffer:
    """
    Owned, read-only byte storage for one parse.

    Slices hold a reference to their buffer, so the bytes stay alive for as
    long as any record derived from them does.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Union[bytes, bytearray, memoryview]) -> None:
        raw = bytes(data)
        if not raw:
            raise EmptyInputError("Cannot build a buffer from zero-length input")
        self._data = raw

    @classmethod
    def from_text(cls, text: str, encoding: str = "utf-8") -> "Buffer":
        return cls(text.encode(encoding))

    @property
    def data(self) -> bytes:
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> int:
        return self._data[index]

    def __repr__(self) -> str:
        return f"Buffer(length={len(self._data)})"

    def slice(self, start: int, length: int) -> "Slice":
        return Slice(self, start, length)


@dataclass(frozen=True)
class Slice:
    """Non-owning (start, length) view into exactly one Buffer."""

    buffer: Buffer
    start: int
    length: int

    def __post_init__(self) -> None:
        size = len(self.buffer)
        if self.start < 0 or self.length < 0 or self.start + self.length > size:
            raise ValueError(
                f"slice ({self.start}, {self.length}) out of bounds for buffer of length {size}"
            )

    @property
    def end(self) -> int:
        return self.start + self.length

    @property
    def is_empty(self) -> bool:
        return self.length == 0

    def __len__(self) -> int:
        return self.length

    def __bytes__(self) -> bytes:
        return self.buffer.data[self.start : self.end]

    def view(self) -> memoryview:
        # bytes-backed memoryviews are read-only
        return memoryview(self.buffer.data)[self.start : self.end]

    def tobytes(self) -> bytes:
        return bytes(self)

    def decode(self, encoding: str = "utf-8", errors: str = "replace") -> str:
        return bytes(self).decode(encoding, errors)

    def __repr__(self) -> str:
        return f"Slice(start={self.start}, length={self.length}, data={bytes(self)!r})"
