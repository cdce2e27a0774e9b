"""
Single-pass INI scanner.

Walks a Buffer once, left to right, and emits one Record per ``key = value``
line. Sections, keys and values are captured as Slices into the buffer; no
field text is copied.

Every sub-routine leaves the cursor on the last byte it consumed, so the
unconditional ``cursor += 1`` at the bottom of the main loop lands on the
first byte that still needs to be dispatched.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from iniscan.core.buffer import Buffer, Slice
from iniscan.core.errors import (
    MissingEqualsError,
    MissingValueError,
    UnterminatedSectionError,
)
from iniscan.core.models import Record

logger = logging.getLogger(__name__)

CR = 0x0D  # \r
LF = 0x0A  # \n
SPACE = 0x20
TAB = 0x09
SEMICOLON = 0x3B  # ;
LBRACKET = 0x5B  # [
RBRACKET = 0x5D  # ]
EQUALS = 0x3D  # =

_WHITESPACE = (SPACE, TAB)
_EOL = (CR, LF)


class Parser:
    """Parser state: cursor, line counter, current section and the records so far."""

    def __init__(self, buffer: Buffer, *, legacy_comment_skip: bool = False) -> None:
        self.buffer = buffer
        self.legacy_comment_skip = legacy_comment_skip
        self.cursor = 0
        self.line = 1
        self.section: Slice = buffer.slice(0, 0)
        self.records: List[Record] = []
        self._data = buffer.data
        self._length = len(buffer)

    def parse(self) -> List[Record]:
        """
        Scan the whole buffer.

        Raises a ParseError subclass on the first malformed line; no partial
        result is returned in that case.
        """
        data = self._data
        while self.cursor < self._length:
            c = data[self.cursor]
            if c == CR:
                # \r\n is counted by the \n
                if not self._peek_is(LF):
                    self.line += 1
            elif c == LF:
                self.line += 1
            elif c in _WHITESPACE:
                pass
            elif c == SEMICOLON:
                self._discard_comment()
            elif c == LBRACKET:
                self._parse_section_header()
            else:
                self._parse_key_value()
            self.cursor += 1

        logger.debug("Scanned %d line(s), %d record(s)", self.line, len(self.records))
        return self.records

    # ----------------------------
    # Helpers
    # ----------------------------

    def _peek_is(self, byte: int) -> bool:
        nxt = self.cursor + 1
        return nxt < self._length and self._data[nxt] == byte

    def _skip_whitespace(self) -> None:
        while self.cursor < self._length and self._data[self.cursor] in _WHITESPACE:
            self.cursor += 1

    def _discard_comment(self) -> None:
        while self.cursor < self._length and self._data[self.cursor] not in _EOL:
            self.cursor += 1
        if not self.legacy_comment_skip:
            # hand the terminator back to the main loop
            self.cursor -= 1

    def _parse_section_header(self) -> None:
        start_line = self.line
        self.cursor += 1  # '['
        begin = self.cursor

        while self.cursor < self._length:
            if self._data[self.cursor] == RBRACKET:
                self.section = self.buffer.slice(begin, self.cursor - begin)
                logger.debug("Section %r at line %d", bytes(self.section), start_line)
                return
            self.cursor += 1

        raise UnterminatedSectionError("Expected ']', encountered EOF instead", line=start_line)

    def _parse_key_value(self) -> None:
        # Allowed whitespace:
        #  key  =  value
        # ^1  ^2  ^3    ^4
        # 1, 3: skipped before scanning; 2, 4: never extend the field
        data = self._data
        line = self.line

        self._skip_whitespace()
        key_begin = self.cursor
        key_end = key_begin

        found_equals = False
        while self.cursor < self._length:
            c = data[self.cursor]
            if c == EQUALS:
                found_equals = True
                break
            if c in _EOL:
                raise MissingEqualsError("Expected '=', encountered EOL instead", line=self.line)
            if c not in _WHITESPACE:
                key_end = self.cursor + 1
            self.cursor += 1

        if not found_equals:
            raise MissingEqualsError("Expected '=' after key, encountered EOF instead", line=self.line)

        self.cursor += 1  # '='
        self._skip_whitespace()
        value_begin = self.cursor
        value_end: Optional[int] = None

        while self.cursor < self._length:
            c = data[self.cursor]
            if c in _EOL:
                break
            if c not in _WHITESPACE:
                value_end = self.cursor + 1
            self.cursor += 1

        if value_end is None:
            found = "EOF" if self.cursor >= self._length else "EOL"
            raise MissingValueError(f"Expected value after '=', encountered {found} instead", line=self.line)

        record = Record(
            section=self.section,
            key=self.buffer.slice(key_begin, key_end - key_begin),
            value=self.buffer.slice(value_begin, value_end - value_begin),
            line=line,
        )
        self.records.append(record)

        # leave the terminator (or EOF) to the main loop
        self.cursor -= 1


def parse_buffer(buffer: Buffer, *, legacy_comment_skip: bool = False) -> List[Record]:
    """Parse ``buffer`` into records in file order."""
    return Parser(buffer, legacy_comment_skip=legacy_comment_skip).parse()
