"""Application bootstrap helpers for assembling the service container."""

from __future__ import annotations

from functools import partial

from daily_verse_bot.adapters.bible_gateway import BibleGatewayAdapter
from daily_verse_bot.adapters.messaging import TelegramMessagingAdapter
from daily_verse_bot.core.config import Settings, settings as default_settings
from daily_verse_bot.services import ServiceContainer, build_default_services
from daily_verse_bot.services.daily_message import today_in
from daily_verse_bot.services.explanation import ExplanationGenerator


def build_default_service_container(settings: Settings = default_settings) -> ServiceContainer:
    """Return the default service container wired to production adapters."""

    container = build_default_services(
        verse_source_port=BibleGatewayAdapter(
            settings.BIBLE_GATEWAY_BASE_URL,
            user_agent=settings.BIBLE_GATEWAY_USER_AGENT,
            accept_language=settings.BIBLE_GATEWAY_ACCEPT_LANGUAGE,
            timeout=settings.HTTP_TIMEOUT_SECONDS,
            max_redirects=settings.HTTP_MAX_REDIRECTS,
        ),
        explainer=ExplanationGenerator.from_settings(settings),
        primary_translation=settings.PRIMARY_TRANSLATION,
        secondary_translation=settings.SECONDARY_TRANSLATION or None,
        messaging_port=TelegramMessagingAdapter(
            settings.TELEGRAM_BOT_TOKEN,
            max_text_length=settings.MAX_TELEGRAM_TEXT_LENGTH,
        ),
        chat_id=settings.TELEGRAM_CHAT_ID,
        today=partial(today_in, settings.MESSAGE_TIMEZONE),
    )
    return container


__all__ = ["build_default_service_container"]
