"""
Cookie string parser.

Splits a ``Cookie`` header value into name/value pairs. The grammar is
permissive on purpose: there is no reject state, malformed segments are
absorbed the way user agents in the wild expect them to be.
"""

import enum
from typing import List, Optional, Tuple

import attr

from ._scanner import ScanUntilCharResult, StringScanner
from .helpers import DEBUG
from .log import internal_logger

__all__ = ("CookieParser", "NameResultKind", "ParseNameResult", "parse_cookie_header")


class NameResultKind(enum.Enum):
    NAME = enum.auto()
    VALUE = enum.auto()
    END = enum.auto()


@attr.s(frozen=True, slots=True)
class ParseNameResult:
    """Outcome of reading the part of a segment before ``=``.

    NAME: text preceded an ``=``.
    VALUE: no ``=`` until the end, text is a value with an empty name.
    END: nothing left to parse.
    """

    kind = attr.ib(type=NameResultKind)
    text = attr.ib(type=str, default="")


_END = ParseNameResult(NameResultKind.END)


class CookieParser:
    """Single pass parser over one cookie string.

    An instance consumes its input; call parse() once.
    """

    def __init__(self, header: str, *, debug: Optional[bool] = None) -> None:
        self._scanner = StringScanner(header)
        self._debug = DEBUG if debug is None else debug

    def parse(self) -> List[Tuple[str, str]]:
        cookies: List[Tuple[str, str]] = []
        while True:
            result = self.parse_name()
            if result.kind is NameResultKind.END:
                break
            if result.kind is NameResultKind.VALUE:
                cookies.append(("", result.text))
                continue

            value = self.parse_value()
            if value is None:
                # "name=" at the very end of the string
                cookies.append((result.text, ""))
                break
            cookies.append((result.text, value))
        return cookies

    def parse_name(self) -> ParseNameResult:
        scanner = self._scanner
        scanner.scan_whitespace_repeating()
        if scanner.at_end():
            return _END

        start = scanner.cursor
        found = scanner.scan_until_char("=")
        text = scanner.substring(start, scanner.cursor)
        if found is ScanUntilCharResult.CHAR_FOUND:
            return ParseNameResult(NameResultKind.NAME, text)

        if self._debug:
            internal_logger.debug(
                "Cookie segment without '=' at %d treated as a nameless value: %r",
                start,
                text,
            )
        return ParseNameResult(NameResultKind.VALUE, text)

    def parse_value(self) -> Optional[str]:
        """Read the value following a name.

        Return None when the string ends right after the ``=`` (or an
        opening quote), so that the caller can tell an empty trailing
        value from a regular one.
        """
        scanner = self._scanner
        scanner.scan_char_once("=")
        quoted = scanner.scan_char_once('"') > 0

        start = scanner.cursor
        if quoted:
            # Whitespace and ';' are kept verbatim between quotes
            found = scanner.scan_until_char('"')
        else:
            found = scanner.scan_until_char_or_whitespace(";")
        end = scanner.cursor

        if found is ScanUntilCharResult.END_OF_STRING:
            if quoted and self._debug:
                internal_logger.debug(
                    "Unmatched quote in cookie value at %d, "
                    "taking the rest of the string",
                    start - 1,
                )
            if end == start:
                return None
            return scanner.substring(start, end)

        value = scanner.substring(start, end)
        if quoted:
            scanner.scan_char_once('"')
        scanner.scan_whitespace_repeating()
        scanner.scan_char_once(";")
        return value


def parse_cookie_header(
    header: str, *, debug: Optional[bool] = None
) -> List[Tuple[str, str]]:
    """Parse a ``Cookie`` header value into ``(name, value)`` pairs.

    Pairs keep the order and the duplicates of the header. Never fails
    on user input.
    """
    if not header:
        return []
    return CookieParser(header, debug=debug).parse()
