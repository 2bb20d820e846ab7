import json

import pytest
from pytest_mock import MockerFixture

from cookiestr import cli


def test_parse(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["parse", "a=1; b=2"])

    assert capsys.readouterr().out == "a\t1\nb\t2\n"


def test_parse_json(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["parse", "--json", 'a="x y"; nokey'])

    assert json.loads(capsys.readouterr().out) == [["a", "x y"], ["", "nokey"]]


def test_parse_verbose(mocker: MockerFixture, capsys: pytest.CaptureFixture[str]) -> None:
    basic_config = mocker.patch("cookiestr.cli.logging.basicConfig")
    parse = mocker.patch("cookiestr.cli.parse", return_value=[])

    cli.main(["-v", "parse", "nokey"])

    basic_config.assert_called_once()
    parse.assert_called_once_with("nokey", debug=True)
    assert capsys.readouterr().out == ""


def test_emit(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["emit", "abc=123", "hello=world"])

    assert capsys.readouterr().out == "abc=123; hello=world\n"


def test_emit_value_with_equals_splits_on_first(
    capsys: pytest.CaptureFixture[str],
) -> None:
    cli.main(["emit", "a=", "=b"])

    assert capsys.readouterr().out == "a=; =b\n"


def test_emit_pair_without_equals(mocker: MockerFixture) -> None:
    error = mocker.patch("cookiestr.cli.ArgumentParser.error", side_effect=SystemExit)

    with pytest.raises(SystemExit):
        cli.main(["emit", "novalue"])

    error.assert_called_with("'novalue' not in 'name=value' syntax")


def test_emit_encoding_error(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as ctx:
        cli.main(["emit", "[abc]=123"])

    assert ctx.value.code == 1
    assert "expected character class: token, value: [abc]" in capsys.readouterr().err


def test_command_required() -> None:
    with pytest.raises(SystemExit) as ctx:
        cli.main([])

    assert ctx.value.code == 2
