"""Codepoint indexed string scanning.

Internal machinery of the cookie string parser; not a public API.
"""

import enum
from itertools import islice
from typing import Iterator, List, Tuple

from .exceptions import InternalError

__all__ = ("IndexedString", "StringScanner", "ScanUntilCharResult")

WHITESPACE = frozenset("\t ")


def _utf8_len(c: str) -> int:
    cp = ord(c)
    if cp < 0x80:
        return 1
    if cp < 0x800:
        return 2
    if cp < 0x10000:
        return 3
    return 4


class IndexedString:
    """A string with a precomputed codepoint table.

    Every entry of the table is a ``(byte_offset, codepoint)`` pair, where
    byte_offset is the position of the codepoint in the UTF-8 encoding of
    the source. Indexes used by all methods count codepoints, not bytes.
    """

    __slots__ = ("_string", "_char_indexes", "_byte_length")

    def __init__(self, src: str) -> None:
        char_indexes: List[Tuple[int, str]] = []
        offset = 0
        for c in src:
            char_indexes.append((offset, c))
            offset += _utf8_len(c)
        self._string = src
        self._char_indexes = char_indexes
        self._byte_length = offset

    def __len__(self) -> int:
        return len(self._char_indexes)

    def __repr__(self) -> str:
        return "<IndexedString {!r}>".format(self._string)

    @property
    def string(self) -> str:
        return self._string

    def byte_offset(self, idx: int) -> int:
        """Offset of codepoint *idx* in the UTF-8 encoding.

        ``idx == len(self)`` is one past the last codepoint and maps to
        the encoded length.
        """
        if idx == len(self._char_indexes):
            return self._byte_length
        return self._char_indexes[idx][0]

    def char_at(self, idx: int) -> str:
        return self._char_indexes[idx][1]

    def substring(self, start: int, end: int) -> str:
        """Return codepoints ``[start, end)`` of the source string."""
        if not 0 <= start <= end <= len(self._char_indexes):
            raise InternalError(span=(start, end))
        return self._string[start:end]

    def tail_from(self, idx: int) -> Iterator[Tuple[int, str]]:
        """Iterate over the table from codepoint *idx* onwards."""
        return islice(self._char_indexes, idx, None)


class ScanUntilCharResult(enum.Enum):
    CHAR_FOUND = enum.auto()
    END_OF_STRING = enum.auto()


class StringScanner:
    """Forward only cursor over an IndexedString.

    Scan methods never move the cursor backwards and never look past
    the end of the string.
    """

    __slots__ = ("_cursor", "_indexed")

    def __init__(self, src: str) -> None:
        self._cursor = 0
        self._indexed = IndexedString(src)

    def __repr__(self) -> str:
        return "<StringScanner cursor={} length={}>".format(
            self._cursor, len(self._indexed)
        )

    @property
    def cursor(self) -> int:
        return self._cursor

    def at_end(self) -> bool:
        return self._cursor >= len(self._indexed)

    def substring(self, start: int, end: int) -> str:
        return self._indexed.substring(start, end)

    def scan_char_once(self, char: str) -> int:
        """Consume *char* if the cursor points at it.

        Return the number of codepoints consumed: 1 or 0.
        """
        if self.at_end() or self._indexed.char_at(self._cursor) != char:
            return 0
        self._cursor += 1
        return 1

    def scan_until_char(self, char: str) -> ScanUntilCharResult:
        """Advance until the cursor points at *char* or the end."""
        scanned = 0
        result = ScanUntilCharResult.END_OF_STRING
        for _, c in self._indexed.tail_from(self._cursor):
            if c == char:
                result = ScanUntilCharResult.CHAR_FOUND
                break
            scanned += 1
        self._cursor += scanned
        return result

    def scan_until_char_or_whitespace(self, char: str) -> ScanUntilCharResult:
        """Like scan_until_char() but also stop at a tab or a space."""
        scanned = 0
        result = ScanUntilCharResult.END_OF_STRING
        for _, c in self._indexed.tail_from(self._cursor):
            if c == char or c in WHITESPACE:
                result = ScanUntilCharResult.CHAR_FOUND
                break
            scanned += 1
        self._cursor += scanned
        return result

    def scan_whitespace_repeating(self) -> int:
        """Consume a run of tabs and spaces, return its length."""
        scanned = 0
        for _, c in self._indexed.tail_from(self._cursor):
            if c not in WHITESPACE:
                break
            scanned += 1
        self._cursor += scanned
        return scanned
