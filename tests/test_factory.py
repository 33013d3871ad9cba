"""Tests for provider construction and the shared default provider."""
import asyncio

import pytest
from aiohttp import test_utils, web

from config import SETTINGS
from translator.base import LanguageCodeSet
from translator.factory import build_provider, get_available_engines, get_default_provider
from translator.google import GoogleTranslateProvider
from translator.simple import double_way_translate, simple_translate


def _make_app():
    async def handle(request):
        target = request.query["tl"]
        translated = {"fr": "bonjour", "en": "hello"}[target]
        return web.json_response([[[translated, request.query["q"]]], None, request.query["sl"]])

    app = web.Application()
    app.router.add_get("/translate_a/single", handle)
    return app


def _run_against_local_server(coro_factory):
    """Run one ``asyncio.run`` with a fresh local endpoint behind the default provider."""

    async def run():
        server = test_utils.TestServer(_make_app())
        await server.start_server()
        try:
            get_default_provider().url_template = str(server.make_url("/translate_a/single"))
            return await coro_factory()
        finally:
            await server.close()

    return asyncio.run(run())


@pytest.fixture
def no_proxy(monkeypatch):
    monkeypatch.setattr(SETTINGS.provider, "proxy", None)


def test_available_engines():
    assert get_available_engines() == {"google": "Google Translate"}


def test_build_provider_uses_settings():
    provider = build_provider("Google")

    assert isinstance(provider, GoogleTranslateProvider)
    assert provider.tld == SETTINGS.provider.tld
    assert provider.timeout == SETTINGS.provider.timeout
    assert provider.user_agent == SETTINGS.provider.user_agent


def test_build_provider_overrides():
    provider = build_provider("google", proxy="http://proxy:3128", tld="de", timeout=3)

    assert provider.proxy == "http://proxy:3128"
    assert provider.url == "https://translate.google.de/translate_a/single"
    assert provider.timeout == 3


def test_build_provider_rejects_unknown_engine():
    with pytest.raises(ValueError, match="bogus"):
        build_provider("bogus")


def test_default_provider_is_shared():
    provider = get_default_provider()

    assert isinstance(provider, GoogleTranslateProvider)
    assert provider.tld == SETTINGS.provider.tld
    assert get_default_provider() is provider


def test_default_provider_survives_repeated_event_loops(no_proxy):
    options = LanguageCodeSet("en", "fr")

    first = _run_against_local_server(lambda: simple_translate("hello", options))
    second = _run_against_local_server(lambda: simple_translate("hello", options))
    both = _run_against_local_server(lambda: double_way_translate("bonjour", LanguageCodeSet("fr", "en")))

    assert first.translated_text == "bonjour"
    assert second.translated_text == "bonjour"
    assert second.lang_from == "en"
    assert [r.translated_text for r in both] == ["hello", "bonjour"]

    asyncio.run(get_default_provider().close())
