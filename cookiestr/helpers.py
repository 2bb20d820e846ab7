"""Various helper functions"""

import os
import sys
from typing import FrozenSet

__all__ = (
    "DEBUG",
    "TOKEN",
    "COOKIE_OCTET",
    "is_token_char",
    "is_cookie_octet_char",
    "is_token",
    "is_cookie_octets",
)

DEBUG = sys.flags.dev_mode or (
    not sys.flags.ignore_environment and bool(os.environ.get("COOKIESTR_DEBUG"))
)


CHAR: FrozenSet[str] = frozenset(chr(i) for i in range(0, 128))
CTL: FrozenSet[str] = frozenset(chr(i) for i in range(0, 32)) | {chr(127)}
SEPARATORS: FrozenSet[str] = frozenset(
    {
        "(",
        ")",
        "<",
        ">",
        "@",
        ",",
        ";",
        ":",
        "\\",
        '"',
        "/",
        "[",
        "]",
        "?",
        "=",
        "{",
        "}",
        " ",
        chr(9),
    }
)
TOKEN: FrozenSet[str] = CHAR - CTL - SEPARATORS

# Separators that may still appear in an unquoted cookie value.
# "=" stays excluded so a value never looks like a second pair.
COOKIE_OCTET: FrozenSet[str] = TOKEN | frozenset("()/:<>?@[]{}")


def is_token_char(c: str) -> bool:
    """Return True if *c* may appear in a cookie name."""
    return c in TOKEN


def is_cookie_octet_char(c: str) -> bool:
    """Return True if *c* may appear in an unquoted cookie value."""
    return c in COOKIE_OCTET


def is_token(s: str) -> bool:
    return all(c in TOKEN for c in s)


def is_cookie_octets(s: str) -> bool:
    return all(c in COOKIE_OCTET for c in s)
