from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, TypeVar

from dotenv import load_dotenv

load_dotenv()

N = TypeVar("N", int, float)


def _env(name: str) -> str | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return raw.strip()


def _env_flag(name: str, default: bool) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "y", "on"}


def _env_number(name: str, cast: Callable[[str], N], default: N) -> N:
    raw = _env(name)
    if raw is None:
        return default
    try:
        return cast(raw)
    except ValueError:
        return default


def _looks_like_placeholder(value: str) -> bool:
    lower = value.strip().lower()
    return lower.startswith("your_") or lower.startswith("replace_") or lower in {"changeme", "todo"}


@dataclass(frozen=True)
class Settings:
    log_level: str
    sentry_dsn: str | None
    use_ai: bool
    openai_api_key: str | None
    openai_model: str
    openai_base_url: str | None
    advisory_temperature: float
    advisory_max_tokens: int
    advisory_timeout_s: float | None
    vocabulary_path: str | None

    @property
    def advisory_configured(self) -> bool:
        key = (self.openai_api_key or "").strip()
        return bool(key) and not _looks_like_placeholder(key)

    @property
    def advisory_enabled(self) -> bool:
        return self.use_ai and self.advisory_configured


def load_settings() -> Settings:
    return Settings(
        log_level=(_env("LOG_LEVEL") or "INFO").upper(),
        sentry_dsn=_env("SENTRY_DSN"),
        use_ai=_env_flag("USE_AI", False),
        openai_api_key=_env("OPENAI_API_KEY"),
        openai_model=_env("OPENAI_MODEL") or "gpt-3.5-turbo",
        openai_base_url=_env("OPENAI_BASE_URL"),
        advisory_temperature=_env_number("ADVISORY_TEMPERATURE", float, 0.7),
        advisory_max_tokens=_env_number("ADVISORY_MAX_TOKENS", int, 1500),
        # Zero or unset leaves the OpenAI client default in place.
        advisory_timeout_s=_env_number("ADVISORY_TIMEOUT_S", float, 0.0) or None,
        vocabulary_path=_env("VOCABULARY_PATH"),
    )


settings = load_settings()
