"""Tests for the default service container wiring."""

from __future__ import annotations

from daily_verse_bot.adapters import BibleGatewayAdapter, TelegramMessagingAdapter
from daily_verse_bot.bootstrap import build_default_service_container
from daily_verse_bot.core.config import Settings
from daily_verse_bot.services.daily_message import DailyMessageService


def test_container_wires_production_adapters(monkeypatch) -> None:
    """Default container exposes the Bible Gateway and Telegram adapters."""
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    settings = Settings(
        TELEGRAM_BOT_TOKEN="token",
        TELEGRAM_CHAT_ID="42",
        OPENAI_API_KEY=None,
        MESSAGE_TIMEZONE="Europe/Moscow",
    )

    container = build_default_service_container(settings)

    assert isinstance(container.verse_source, BibleGatewayAdapter)
    assert isinstance(container.messaging, TelegramMessagingAdapter)
    assert isinstance(container.daily_message, DailyMessageService)
