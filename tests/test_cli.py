"""Tests for the command line interface."""
from unittest.mock import patch

from typer.testing import CliRunner

import cli
from translator.errors import ProviderError

from .conftest import make_provider

runner = CliRunner()


def test_translate(echo_provider):
    with patch("cli.build_provider", return_value=echo_provider):
        result = runner.invoke(cli.app, ["translate", "hello", "--from", "en", "--to", "fr"])

    assert result.exit_code == 0
    assert "hello[fr]" in result.output
    echo_provider.__aexit__.assert_awaited()


def test_both_with_auto_detect(echo_provider):
    with patch("cli.build_provider", return_value=echo_provider):
        result = runner.invoke(cli.app, ["both", "hello", "--to", "fr"])

    assert result.exit_code == 0
    assert "hello[fr]" in result.output
    assert "hello[fr][en]" in result.output


def test_multi(echo_provider):
    with patch("cli.build_provider", return_value=echo_provider):
        result = runner.invoke(cli.app, ["multi", "hi", "--from", "en", "-t", "fr", "-t", "de"])

    assert result.exit_code == 0
    assert "hi[fr]" in result.output
    assert "hi[de]" in result.output


def test_rate_limit_exits_with_error():
    async def handler(text, *, from_lang, to_lang, raw=False):
        raise ProviderError("429", name="TooManyRequestsError")

    with patch("cli.build_provider", return_value=make_provider(handler)):
        result = runner.invoke(cli.app, ["translate", "hello", "--to", "fr"])

    assert result.exit_code == 1
    assert "Too many requests: please try again later" in result.output


def test_unsupported_language():
    result = runner.invoke(cli.app, ["translate", "hello", "--to", "xx"])

    assert result.exit_code == 2
    assert "Unsupported language" in result.output


def test_languages():
    result = runner.invoke(cli.app, ["languages"])

    assert result.exit_code == 0
    assert "French" in result.output
