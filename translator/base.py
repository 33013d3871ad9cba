from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(slots=True)
class LanguageCodeSet:
    lang_from: str
    lang_to: str


@dataclass(slots=True)
class SimpleTranslateResult:
    original_text: str
    translated_text: str
    pronunciation_text: Optional[str]
    lang_from: Optional[str]
    lang_to: str


@dataclass(slots=True)
class DetectedLanguage:
    iso: str = ""
    did_you_mean: bool = False


@dataclass(slots=True)
class SourceText:
    auto_corrected: bool = False
    value: str = ""
    did_you_mean: bool = False


@dataclass(slots=True)
class ProviderResponse:
    text: str
    raw: Any = None
    from_language: DetectedLanguage = field(default_factory=DetectedLanguage)
    from_text: SourceText = field(default_factory=SourceText)


class BaseProvider(ABC):
    name: str = "base"

    def __init__(self, *, timeout: float = 20.0, proxy: str | None = None) -> None:
        self.timeout = timeout
        self.proxy = proxy

    @abstractmethod
    async def translate(
        self,
        text: str,
        *,
        from_lang: str,
        to_lang: str,
        raw: bool = False,
    ) -> ProviderResponse:
        """Translate ``text`` and return the provider's response."""

    async def close(self) -> None:
        return None

    async def __aenter__(self) -> "BaseProvider":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
