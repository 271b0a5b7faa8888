"""Application configuration loaded via Pydantic settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


class Settings(BaseSettings):
    """Typed configuration sourced from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    TELEGRAM_BOT_TOKEN: str = Field(...)
    TELEGRAM_CHAT_ID: str = Field(...)
    MAX_TELEGRAM_TEXT_LENGTH: int = Field(default=4096)

    # Bible Gateway translation codes (e.g. RUSV, NIV, KJV)
    PRIMARY_TRANSLATION: str = Field(default="RUSV")
    SECONDARY_TRANSLATION: str = Field(default="NIV")
    BIBLE_GATEWAY_BASE_URL: str = Field(default="https://www.biblegateway.com")
    BIBLE_GATEWAY_USER_AGENT: str = Field(default=DEFAULT_USER_AGENT)
    BIBLE_GATEWAY_ACCEPT_LANGUAGE: str = Field(default="en-US,en;q=0.9,ru;q=0.8")
    HTTP_TIMEOUT_SECONDS: float = Field(default=5.0)
    HTTP_MAX_REDIRECTS: int = Field(default=5)

    # Explanations are disabled when no key is configured
    OPENAI_API_KEY: str | None = Field(default=None)
    OPENAI_BASE_URL: str | None = Field(default=None)
    EXPLAIN_PRIMARY_MODEL: str = Field(default="gpt-4o")
    EXPLAIN_FALLBACK_MODEL: str = Field(default="gpt-4o-mini")
    AI_EXPLAIN_MAX_RETRIES: int = Field(default=3)
    AI_EXPLAIN_BASE_DELAY_MS: int = Field(default=500)
    AI_EXPLAIN_JITTER_MS: int = Field(default=200)
    EXPLANATION_LANGUAGE: str = Field(default="Russian")

    MESSAGE_TIMEZONE: str = Field(default="UTC")

    DAILY_VERSE_LOG_LEVEL: str = Field(default="info")
    DAILY_VERSE_LOG_DIR: Path | None = Field(default=None)


settings = Settings()  # type: ignore[call-arg]
config = settings  # Alias mirroring the module name


__all__ = ["DEFAULT_USER_AGENT", "Settings", "settings", "config"]
