"""
Quick Translate

Google Translate helpers:
- simple_translate: one normalized translation with pronunciation
- double_way_translate: translate and translate back
- multi_way_translate: one source text into many target languages
"""
from .base import BaseProvider, LanguageCodeSet, ProviderResponse, SimpleTranslateResult
from .errors import (
    ErrorKind,
    ProviderError,
    TooManyRequestsError,
    TranslateError,
    UnsupportedLanguageError,
    classify_provider_error,
)
from .factory import (
    AVAILABLE_ENGINES,
    build_provider,
    get_available_engines,
    get_default_provider,
    set_default_provider,
)
from .google import GoogleTranslateProvider, extract_pronunciation
from .languages import AUTO_DETECT, LANGUAGES, get_code, get_language_name, is_supported
from .simple import double_way_translate, multi_way_translate, simple_translate

__all__ = [
    "BaseProvider",
    "LanguageCodeSet",
    "ProviderResponse",
    "SimpleTranslateResult",
    "ErrorKind",
    "ProviderError",
    "TooManyRequestsError",
    "TranslateError",
    "UnsupportedLanguageError",
    "classify_provider_error",
    "AVAILABLE_ENGINES",
    "build_provider",
    "get_available_engines",
    "get_default_provider",
    "set_default_provider",
    "GoogleTranslateProvider",
    "extract_pronunciation",
    "AUTO_DETECT",
    "LANGUAGES",
    "get_code",
    "get_language_name",
    "is_supported",
    "simple_translate",
    "double_way_translate",
    "multi_way_translate",
]
