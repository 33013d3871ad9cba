"""
Translation helpers

``simple_translate`` normalizes a single provider call into a
:class:`SimpleTranslateResult`. ``double_way_translate`` and
``multi_way_translate`` fan out independent calls and join them; the first
failure fails the whole call.
"""
from __future__ import annotations

import asyncio
import logging
from typing import List, Optional, Sequence

from .base import BaseProvider, LanguageCodeSet, SimpleTranslateResult
from .errors import TranslateError
from .factory import get_default_provider
from .google import extract_pronunciation
from .languages import AUTO_DETECT


logger = logging.getLogger(__name__)


async def _join(tasks: List["asyncio.Task[SimpleTranslateResult]"]) -> List[SimpleTranslateResult]:
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            if not task.done():
                task.cancel()
        raise


async def simple_translate(
    text: str,
    options: LanguageCodeSet,
    *,
    provider: Optional[BaseProvider] = None,
) -> SimpleTranslateResult:
    if not text:
        return SimpleTranslateResult(
            original_text=text,
            translated_text="",
            pronunciation_text="",
            lang_from=options.lang_from,
            lang_to=options.lang_to,
        )

    provider = provider or get_default_provider()
    try:
        translated = await provider.translate(
            text,
            from_lang=options.lang_from,
            to_lang=options.lang_to,
            raw=True,
        )
    except Exception as exc:
        error = TranslateError.from_provider_error(exc)
        logger.debug("Translation %s->%s failed: %s", options.lang_from, options.lang_to, error)
        raise error from exc

    return SimpleTranslateResult(
        original_text=text,
        translated_text=translated.text,
        pronunciation_text=extract_pronunciation(translated.raw),
        lang_from=translated.from_language.iso or None,
        lang_to=options.lang_to,
    )


async def double_way_translate(
    text: str,
    options: LanguageCodeSet,
    *,
    provider: Optional[BaseProvider] = None,
) -> List[SimpleTranslateResult]:
    """Translate ``text`` to ``lang_to`` and back again.

    With an auto-detected source the backward call translates the forward
    result into the detected language, so it has to wait for the first call.
    With an explicit source both directions are translated concurrently.
    """
    if not text:
        return []

    if options.lang_from == AUTO_DETECT:
        forward = await simple_translate(
            text,
            LanguageCodeSet(lang_from=options.lang_from, lang_to=options.lang_to),
            provider=provider,
        )
        if not forward.lang_from:
            logger.debug("No source language detected, skipping backward translation")
            return []

        backward = await simple_translate(
            forward.translated_text,
            LanguageCodeSet(lang_from=options.lang_to, lang_to=forward.lang_from),
            provider=provider,
        )
        return [forward, backward]

    tasks = [
        asyncio.create_task(
            simple_translate(
                text,
                LanguageCodeSet(lang_from=options.lang_from, lang_to=options.lang_to),
                provider=provider,
            )
        ),
        asyncio.create_task(
            simple_translate(
                text,
                LanguageCodeSet(lang_from=options.lang_to, lang_to=options.lang_from),
                provider=provider,
            )
        ),
    ]
    return await _join(tasks)


async def multi_way_translate(
    text: str,
    source_lang: str,
    target_langs: Sequence[str],
    *,
    provider: Optional[BaseProvider] = None,
) -> List[SimpleTranslateResult]:
    """Translate ``text`` from ``source_lang`` into every target, in order."""
    if not text:
        return []

    tasks = [
        asyncio.create_task(
            simple_translate(
                text,
                LanguageCodeSet(lang_from=source_lang, lang_to=lang),
                provider=provider,
            )
        )
        for lang in target_langs
    ]
    return await _join(tasks)
