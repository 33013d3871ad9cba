"""
Translation errors

Provider-level failures are raised by the engines in this package. Callers of
the high level helpers only ever see :class:`TranslateError`, which classifies
a provider failure as either rate limiting or a plain provider error.
"""
from __future__ import annotations

from enum import Enum


TOO_MANY_REQUESTS = "TooManyRequestsError"
RATE_LIMITED_NAME = "Too many requests"
RATE_LIMITED_MESSAGE = "please try again later"


class ProviderError(Exception):
    """Base class for failures raised by a translation provider."""

    def __init__(self, message: str = "", *, name: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.name = name or type(self).__name__


class TooManyRequestsError(ProviderError):
    """The provider answered with HTTP 429."""

    def __init__(self, message: str = "Response code 429 (Too Many Requests)", *, status: int = 429) -> None:
        super().__init__(message)
        self.status = status


class ProviderHTTPError(ProviderError):
    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status


class ProviderConnectionError(ProviderError):
    pass


class ProviderResponseError(ProviderError):
    """The provider answered with a payload that could not be decoded."""


class UnsupportedLanguageError(ProviderError, ValueError):
    def __init__(self, code: str) -> None:
        super().__init__(f"The language '{code}' is not supported")
        self.code = code


class ErrorKind(str, Enum):
    RATE_LIMITED = "rate_limited"
    PROVIDER_ERROR = "provider_error"


def error_name(exc: BaseException) -> str:
    return getattr(exc, "name", None) or type(exc).__name__


def error_message(exc: BaseException) -> str:
    message = getattr(exc, "message", None)
    if isinstance(message, str):
        return message
    return str(exc)


def classify_provider_error(exc: BaseException) -> ErrorKind:
    if error_name(exc) == TOO_MANY_REQUESTS:
        return ErrorKind.RATE_LIMITED
    return ErrorKind.PROVIDER_ERROR


class TranslateError(Exception):
    """Error surfaced to callers of the translation helpers.

    ``name`` and ``message`` are either the fixed rate limiting pair or the
    original provider error's values, copied verbatim.
    """

    def __init__(self, kind: ErrorKind, name: str, message: str) -> None:
        super().__init__(f"{name}: {message}" if message else name)
        self.kind = kind
        self.name = name
        self.message = message

    @property
    def is_rate_limited(self) -> bool:
        return self.kind is ErrorKind.RATE_LIMITED

    @classmethod
    def from_provider_error(cls, exc: Exception) -> "TranslateError":
        kind = classify_provider_error(exc)
        if kind is ErrorKind.RATE_LIMITED:
            return cls(kind, RATE_LIMITED_NAME, RATE_LIMITED_MESSAGE)
        return cls(kind, error_name(exc), error_message(exc))
