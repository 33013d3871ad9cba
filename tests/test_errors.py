"""Tests for provider error classification."""
from translator.errors import (
    ErrorKind,
    ProviderError,
    ProviderHTTPError,
    TooManyRequestsError,
    TranslateError,
    UnsupportedLanguageError,
    classify_provider_error,
)


def test_classify_by_name():
    assert classify_provider_error(TooManyRequestsError()) is ErrorKind.RATE_LIMITED
    assert classify_provider_error(ProviderError("x", name="TooManyRequestsError")) is ErrorKind.RATE_LIMITED
    assert classify_provider_error(ProviderHTTPError(500, "boom")) is ErrorKind.PROVIDER_ERROR
    assert classify_provider_error(ValueError("bad")) is ErrorKind.PROVIDER_ERROR


def test_rate_limited_translate_error():
    error = TranslateError.from_provider_error(TooManyRequestsError())

    assert error.is_rate_limited
    assert error.name == "Too many requests"
    assert error.message == "please try again later"
    assert str(error) == "Too many requests: please try again later"


def test_provider_error_is_copied_verbatim():
    error = TranslateError.from_provider_error(ProviderHTTPError(502, "Bad gateway"))

    assert error.kind is ErrorKind.PROVIDER_ERROR
    assert error.name == "ProviderHTTPError"
    assert error.message == "Bad gateway"


def test_unsupported_language_is_value_error():
    error = UnsupportedLanguageError("xx")

    assert isinstance(error, ValueError)
    assert error.message == "The language 'xx' is not supported"
    assert error.name == "UnsupportedLanguageError"
