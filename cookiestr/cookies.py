"""Public cookie string API."""

from typing import Iterable, Iterator, List, Mapping, Optional, Tuple, Union

import attr
from multidict import MultiDict, MultiDictProxy

from ._emitter import emit_cookie_header
from ._parser import parse_cookie_header

__all__ = ("Cookie", "parse", "parse_to_multidict", "emit")


@attr.s(frozen=True, slots=True)
class Cookie:
    """A cookie sent from a user agent to a server.

    Unpacks like a ``(name, value)`` tuple.
    """

    name = attr.ib(type=str)
    value = attr.ib(type=str)

    def __iter__(self) -> Iterator[str]:
        yield self.name
        yield self.value

    def __str__(self) -> str:
        return f"{self.name}={self.value}"

    @classmethod
    def parse(cls, header: str) -> List["Cookie"]:
        return parse(header)

    @staticmethod
    def emit_all(cookies: "LooseCookies") -> str:
        return emit(cookies)


LooseCookies = Union[Mapping[str, str], Iterable[Union[Cookie, Tuple[str, str]]]]


def parse(header: str, *, debug: Optional[bool] = None) -> List[Cookie]:
    """Parse a ``Cookie`` header value into a list of cookies.

    debug overrides the module wide DEBUG flag for this call.
    """
    return [
        Cookie(name, value)
        for name, value in parse_cookie_header(header, debug=debug)
    ]


def parse_to_multidict(header: str) -> "MultiDictProxy[str]":
    """Parse a ``Cookie`` header value into a read-only multi-mapping.

    A header may send the same name more than once; all values are
    kept in order.
    """
    return MultiDictProxy(MultiDict(parse_cookie_header(header)))


def emit(cookies: LooseCookies) -> str:
    """Serialize cookies into a ``Cookie`` header value.

    Accepts Cookie instances, ``(name, value)`` tuples or a mapping.
    Raises EncodingError if a name is not a token or a value holds
    characters outside the cookie-octet class.
    """
    if isinstance(cookies, Mapping):
        return emit_cookie_header(cookies.items())
    return emit_cookie_header(tuple(cookie) for cookie in cookies)
