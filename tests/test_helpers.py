import pytest

from cookiestr import helpers
from cookiestr.helpers import (
    is_cookie_octet_char,
    is_cookie_octets,
    is_token,
    is_token_char,
)

TOKEN_CHARS = "!#$%&'*+-.^_`|~0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
OCTET_ONLY_CHARS = "()/:<>?@[]{}"
NEITHER_CHARS = ' \t"\\,;=\x00\x1f\x7f'


@pytest.mark.parametrize("c", TOKEN_CHARS)
def test_token_char(c: str) -> None:
    assert is_token_char(c)
    assert is_cookie_octet_char(c)


@pytest.mark.parametrize("c", OCTET_ONLY_CHARS)
def test_cookie_octet_only_char(c: str) -> None:
    assert not is_token_char(c)
    assert is_cookie_octet_char(c)


@pytest.mark.parametrize("c", NEITHER_CHARS)
def test_invalid_char(c: str) -> None:
    assert not is_token_char(c)
    assert not is_cookie_octet_char(c)


@pytest.mark.parametrize("c", ["é", "東", "😀", "\u00a0", "\ufeff"])
def test_non_ascii_is_never_valid(c: str) -> None:
    assert not is_token_char(c)
    assert not is_cookie_octet_char(c)


def test_every_codepoint_is_classified() -> None:
    for cp in range(0x110000):
        c = chr(cp)
        if is_token_char(c):
            assert cp < 128
            assert is_cookie_octet_char(c)
        if is_cookie_octet_char(c):
            assert 0x21 <= cp <= 0x7E


def test_token_set_size() -> None:
    assert len(helpers.TOKEN) == len(TOKEN_CHARS)
    assert len(helpers.COOKIE_OCTET) == len(TOKEN_CHARS) + len(OCTET_ONLY_CHARS)


def test_is_token_empty() -> None:
    assert is_token("")


def test_is_token_true() -> None:
    assert is_token("hello")


def test_is_token_false() -> None:
    assert not is_token("[hello]")


def test_is_cookie_octets_empty() -> None:
    assert is_cookie_octets("")


def test_is_cookie_octets_true() -> None:
    assert is_cookie_octets("hello")


def test_is_cookie_octets_true_with_non_token_chars() -> None:
    assert is_cookie_octets("[hello]")


def test_is_cookie_octets_false() -> None:
    assert not is_cookie_octets("=hello")
