"""
Provider Factory

Factory for creating translation provider instances, plus the module level
default provider used by the translation helpers.
"""
from __future__ import annotations

from typing import Optional

from config import SETTINGS
from .base import BaseProvider
from .google import GoogleTranslateProvider


# Available translation engines
AVAILABLE_ENGINES = {
    "google": "Google Translate",
}

_default_provider: Optional[BaseProvider] = None


def get_available_engines() -> dict[str, str]:
    """Get available translation engines with display names."""
    return AVAILABLE_ENGINES.copy()


def build_provider(
    engine_name: str,
    *,
    proxy: Optional[str] = None,
    tld: Optional[str] = None,
    timeout: Optional[float] = None,
) -> BaseProvider:
    """Build a provider instance.

    Args:
        engine_name: Name of the engine (google)
        proxy: Optional proxy URL, falls back to settings
        tld: Google top level domain, falls back to settings
        timeout: Request timeout in seconds, falls back to settings

    Returns:
        BaseProvider instance

    Raises:
        ValueError: If engine is not supported
    """
    engine = engine_name.lower()
    settings = SETTINGS.provider

    if engine == "google":
        return GoogleTranslateProvider(
            tld=tld or settings.tld,
            timeout=timeout or settings.timeout,
            proxy=proxy or settings.proxy,
            user_agent=settings.user_agent,
            get_max_length=settings.get_max_length,
        )

    raise ValueError(f"Unsupported translator engine: {engine_name}")


def get_default_provider() -> BaseProvider:
    """Return the shared provider, building it from settings on first use."""
    global _default_provider
    if _default_provider is None:
        _default_provider = build_provider(SETTINGS.engine)
    return _default_provider


def set_default_provider(provider: Optional[BaseProvider]) -> None:
    """Replace the shared provider; ``None`` resets it to the settings default."""
    global _default_provider
    _default_provider = provider
