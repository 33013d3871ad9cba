from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import os


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0 Safari/537.36"
)


def _env_path(name: str) -> Path | None:
    value = os.getenv(name)
    return Path(value) if value else None


@dataclass(slots=True)
class ProviderSettings:
    tld: str = field(default_factory=lambda: os.getenv("QUICK_TRANSLATE_TLD", "com"))
    timeout: float = field(default_factory=lambda: float(os.getenv("QUICK_TRANSLATE_TIMEOUT", "20")))
    proxy: str | None = field(default_factory=lambda: os.getenv("GOOGLE_PROXY"))
    user_agent: str = field(default_factory=lambda: os.getenv("QUICK_TRANSLATE_USER_AGENT", DEFAULT_USER_AGENT))
    # Longer queries go out as a form POST
    get_max_length: int = 2000


@dataclass(slots=True)
class AppSettings:
    provider: ProviderSettings = field(default_factory=ProviderSettings)
    engine: str = field(default_factory=lambda: os.getenv("QUICK_TRANSLATE_ENGINE", "google"))
    default_source_lang: str = field(default_factory=lambda: os.getenv("QUICK_TRANSLATE_SOURCE", "auto"))
    default_target_lang: str = field(default_factory=lambda: os.getenv("QUICK_TRANSLATE_TARGET", "en"))
    log_level: str = field(default_factory=lambda: os.getenv("QUICK_TRANSLATE_LOG_LEVEL", "INFO"))
    log_file: Path | None = field(default_factory=lambda: _env_path("QUICK_TRANSLATE_LOG_FILE"))


SETTINGS = AppSettings()
