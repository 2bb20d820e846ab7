__version__ = "0.3.0.dev0"

from .cookies import Cookie, emit, parse, parse_to_multidict
from .exceptions import (
    CookieError,
    EmitCookieError,
    EncodingError,
    EncodingErrorExpectedClass,
    InternalError,
    ParseCookieError,
)
from .helpers import is_cookie_octet_char, is_token_char

__all__ = (
    # cookies
    "Cookie",
    "emit",
    "parse",
    "parse_to_multidict",
    # exceptions
    "CookieError",
    "EmitCookieError",
    "EncodingError",
    "EncodingErrorExpectedClass",
    "InternalError",
    "ParseCookieError",
    # helpers
    "is_cookie_octet_char",
    "is_token_char",
)
