from typing import Iterable, List, Tuple

from .exceptions import EncodingError, EncodingErrorExpectedClass
from .helpers import is_cookie_octets, is_token
from .log import emitter_logger

__all__ = ("emit_cookie_header",)


def emit_cookie_header(pairs: Iterable[Tuple[str, str]]) -> str:
    """Join ``(name, value)`` pairs into a ``Cookie`` header value.

    Names must be tokens and values cookie-octets, otherwise
    EncodingError is raised for the first offending string and nothing
    is returned.
    """
    parts: List[str] = []
    for name, value in pairs:
        if not is_token(name):
            raise EncodingError(name, EncodingErrorExpectedClass.TOKEN)
        if not is_cookie_octets(value):
            raise EncodingError(value, EncodingErrorExpectedClass.COOKIE_OCTET)
        parts.append(f"{name}={value}")
    emitter_logger.debug("Emitting %d cookie(s)", len(parts))
    return "; ".join(parts)
