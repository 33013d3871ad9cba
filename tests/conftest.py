"""Shared fixtures: a fake provider standing in for Google Translate."""
from unittest.mock import AsyncMock, MagicMock

import pytest

from translator.base import BaseProvider, DetectedLanguage, ProviderResponse
from translator.factory import set_default_provider


def make_response(text, *, iso="", pronunciation=None):
    raw = [[[text, "source"], [None, None, pronunciation]]] if pronunciation else [[[text, "source"]]]
    return ProviderResponse(text=text, raw=raw, from_language=DetectedLanguage(iso=iso))


def make_provider(handler):
    """Provider mock whose ``translate`` delegates to ``handler``."""
    provider = MagicMock(spec=BaseProvider)
    provider.translate = AsyncMock(side_effect=handler)
    provider.__aenter__.return_value = provider
    return provider


@pytest.fixture
def echo_provider():
    """Translates ``text`` into ``text[to]``; detects English for ``auto``."""

    async def handler(text, *, from_lang, to_lang, raw=False):
        iso = "en" if from_lang == "auto" else from_lang
        return make_response(f"{text}[{to_lang}]", iso=iso)

    return make_provider(handler)


@pytest.fixture(autouse=True)
def reset_default_provider():
    yield
    set_default_provider(None)
