"""
Google Translate web endpoint provider.

Talks to the free ``translate_a/single`` endpoint used by the Google
Translate web client and decodes its positional JSON payload.
"""
from __future__ import annotations

import asyncio
import json
import logging
import re
from typing import Any, Dict, List, Optional, Tuple

import aiohttp

from .base import BaseProvider, DetectedLanguage, ProviderResponse, SourceText
from .errors import (
    ProviderConnectionError,
    ProviderHTTPError,
    ProviderResponseError,
    TooManyRequestsError,
    UnsupportedLanguageError,
)
from .languages import AUTO_DETECT, get_code


_CORRECTION_OPEN = re.compile(r"<b><i>")
_CORRECTION_CLOSE = re.compile(r"</i></b>")


def _index(value: Any, *path: int) -> Any:
    """Walk nested lists, returning None as soon as the shape does not match."""
    current = value
    for position in path:
        if not isinstance(current, (list, tuple)) or position >= len(current):
            return None
        current = current[position]
    return current


def extract_pronunciation(raw: Any) -> Optional[str]:
    """Return the source transliteration stored at ``raw[0][1][2]``, if any."""
    value = _index(raw, 0, 1, 2)
    return value if isinstance(value, str) else None


def parse_response(data: Any, *, raw: bool = False) -> ProviderResponse:
    """Decode a ``translate_a/single`` payload."""
    segments = _index(data, 0)
    if not isinstance(segments, list):
        raise ProviderResponseError("Unexpected response: missing translation segments")

    text = "".join(
        segment[0]
        for segment in segments
        if isinstance(segment, list) and segment and isinstance(segment[0], str)
    )

    from_language = DetectedLanguage()
    detected = _index(data, 2)
    suggested = _index(data, 8, 0, 0)
    if isinstance(suggested, str) and suggested and suggested != detected:
        from_language.iso = suggested
        from_language.did_you_mean = True
    elif isinstance(detected, str):
        from_language.iso = detected

    from_text = SourceText()
    correction = _index(data, 7, 0)
    if isinstance(correction, str) and correction:
        value = _CORRECTION_OPEN.sub("[", correction)
        from_text.value = _CORRECTION_CLOSE.sub("]", value)
        if _index(data, 7, 5) is True:
            from_text.auto_corrected = True
        else:
            from_text.did_you_mean = True

    return ProviderResponse(
        text=text,
        raw=data if raw else None,
        from_language=from_language,
        from_text=from_text,
    )


class GoogleTranslateProvider(BaseProvider):
    """Provider backed by the Google Translate web client endpoint.

    One ``aiohttp`` session is kept per provider and reused across calls.
    HTTP 429 is raised as :class:`TooManyRequestsError`; every other failure
    is raised as a :class:`ProviderError` subclass.
    """

    name = "google"

    url_template = "https://translate.google.{tld}/translate_a/single"
    data_types = ["at", "bd", "ex", "ld", "md", "qca", "rw", "rm", "ss", "t"]

    def __init__(
        self,
        *,
        tld: str = "com",
        timeout: float = 20.0,
        proxy: str | None = None,
        user_agent: str | None = None,
        get_max_length: int = 2000,
    ) -> None:
        super().__init__(timeout=timeout, proxy=proxy)
        self.tld = tld
        self.user_agent = user_agent
        self.get_max_length = get_max_length
        self._session: Optional[aiohttp.ClientSession] = None
        self._session_loop: Optional[asyncio.AbstractEventLoop] = None
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def url(self) -> str:
        return self.url_template.format(tld=self.tld)

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create the aiohttp session for the running event loop."""
        loop = asyncio.get_running_loop()
        if self._session is not None and self._session_loop is not loop:
            # Sessions are bound to the loop that created them
            self.logger.debug("Event loop changed, starting a new session")
            self._session.detach()
            self._session = None
        if self._session is None or self._session.closed:
            headers = {"User-Agent": self.user_agent} if self.user_agent else None
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            self._session = aiohttp.ClientSession(headers=headers, timeout=timeout)
            self._session_loop = loop
        return self._session

    async def close(self) -> None:
        """Close the aiohttp session."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None
        self._session_loop = None

    def _resolve_languages(self, from_lang: str, to_lang: str) -> Tuple[str, str]:
        source, target = get_code(from_lang), get_code(to_lang)
        if not source:
            raise UnsupportedLanguageError(from_lang)
        if not target or target == AUTO_DETECT:
            raise UnsupportedLanguageError(to_lang)
        return source, target

    def build_params(self, text: str, from_lang: str, to_lang: str) -> List[Tuple[str, str]]:
        params: List[Tuple[str, str]] = [
            ("client", "gtx"),
            ("sl", from_lang),
            ("tl", to_lang),
            ("hl", to_lang),
        ]
        params.extend(("dt", data_type) for data_type in self.data_types)
        params.extend(
            [
                ("ie", "UTF-8"),
                ("oe", "UTF-8"),
                ("otf", "1"),
                ("ssel", "0"),
                ("tsel", "0"),
                ("kc", "7"),
                ("q", text),
            ]
        )
        return params

    async def translate(
        self,
        text: str,
        *,
        from_lang: str = "auto",
        to_lang: str = "en",
        raw: bool = False,
    ) -> ProviderResponse:
        source, target = self._resolve_languages(from_lang, to_lang)
        params = self.build_params(text, source, target)
        data = await self._request(params, use_post=len(text) > self.get_max_length)
        return parse_response(data, raw=raw)

    async def _request(self, params: List[Tuple[str, str]], *, use_post: bool) -> Any:
        session = await self._get_session()
        if use_post:
            query = [item for item in params if item[0] != "q"]
            form: Dict[str, str] = {key: value for key, value in params if key == "q"}
            request = session.post(self.url, params=query, data=form, proxy=self.proxy)
        else:
            request = session.get(self.url, params=params, proxy=self.proxy)

        self.logger.debug("Requesting %s (%s)", self.url, "POST" if use_post else "GET")
        try:
            async with request as resp:
                if resp.status == 429:
                    self.logger.warning("Google Translate rate limit hit")
                    raise TooManyRequestsError()
                if resp.status != 200:
                    body = await resp.text()
                    raise ProviderHTTPError(
                        resp.status,
                        f"Response code {resp.status} ({resp.reason}): {body[:200]}",
                    )
                try:
                    return await resp.json(content_type=None)
                except (json.JSONDecodeError, aiohttp.ContentTypeError) as e:
                    raise ProviderResponseError(f"Invalid JSON from Google Translate: {e}") from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise ProviderConnectionError(f"Google Translate connection error: {e}") from e
