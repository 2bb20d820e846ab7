"""Cookie string related errors."""

import enum
from typing import Optional, Tuple

__all__ = (
    "CookieError",
    "ParseCookieError",
    "EmitCookieError",
    "EncodingError",
    "EncodingErrorExpectedClass",
    "InternalError",
    "InternalErrorKind",
)


class EncodingErrorExpectedClass(str, enum.Enum):
    TOKEN = "token"
    COOKIE_OCTET = "cookie-octet"

    def __str__(self) -> str:
        return self.value


class InternalErrorKind(enum.Enum):
    SPAN_BEYOND_BOUNDARIES = enum.auto()


class CookieError(Exception):
    """Base class for cookie string errors."""

    description = "Cookie Error"


class ParseCookieError(CookieError):
    """Error raised while parsing a cookie string."""

    description = "Error Parsing Cookie String"


class EmitCookieError(CookieError):
    """Error raised while emitting a cookie string."""

    description = "Error Emitting Cookie String"


class EncodingError(EmitCookieError):
    """A name or value holds a character outside its character class.

    value: the offending name or value
    expected_class: the class every character was expected to belong to
    """

    def __init__(self, value: str, expected_class: EncodingErrorExpectedClass) -> None:
        self.value = value
        self.expected_class = expected_class
        super().__init__(
            "{}: Encoding Error, expected character class: {}, value: {}".format(
                self.description, expected_class, value
            )
        )

    def __repr__(self) -> str:
        return "<{} expected_class={!r} value={!r}>".format(
            self.__class__.__name__, self.expected_class.value, self.value
        )


class InternalError(ParseCookieError):
    """A scanner invariant was broken.

    Never raised for user input; seeing one is a bug.
    """

    def __init__(
        self,
        kind: InternalErrorKind = InternalErrorKind.SPAN_BEYOND_BOUNDARIES,
        span: Optional[Tuple[int, int]] = None,
    ) -> None:
        self.kind = kind
        self.span = span
        super().__init__("{}: Internal Error".format(self.description))
