"""Build and deliver the daily verse message."""

from __future__ import annotations

from datetime import date, datetime
from typing import Callable, Optional
from zoneinfo import ZoneInfo

from daily_verse_bot.core.logging import get_logger
from daily_verse_bot.core.ports import MessagingPort
from daily_verse_bot.services.content_aggregator import ContentAggregator
from daily_verse_bot.services.explanation import ExplanationGenerator
from daily_verse_bot.services.message_composer import compose_message, format_date_label

logger = get_logger(__name__)


def today_in(timezone: str) -> date:
    """Return the current date in ``timezone``."""
    return datetime.now(ZoneInfo(timezone)).date()


class DailyMessageService:
    """Orchestrate aggregation, explanation and composition for one day."""

    def __init__(  # pylint: disable=too-many-arguments
        self,
        aggregator: ContentAggregator,
        explainer: ExplanationGenerator,
        *,
        primary_translation: str,
        secondary_translation: Optional[str] = None,
        messaging: Optional[MessagingPort] = None,
        chat_id: Optional[str] = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._aggregator = aggregator
        self._explainer = explainer
        self._primary = primary_translation
        self._secondary = secondary_translation or None
        self._messaging = messaging
        self._chat_id = chat_id
        self._today = today

    async def get_daily_message(self) -> str:
        """Return the formatted message for today.

        Raises:
            VerseOfTheDayError: the primary translation's citation could not
                be retrieved.
        """
        primary, secondary = await self._aggregator.fetch_daily_passages(
            self._primary, self._secondary
        )
        explanation = await self._explainer.explain(primary.content, primary.display_ref)
        if not explanation:
            logger.info("No explanation for %s; omitting the section", primary.display_ref)
        return compose_message(
            primary=primary.content,
            secondary=secondary.content if secondary else "",
            display_ref=primary.display_ref,
            date_label=format_date_label(self._today()),
            explanation=explanation,
        )

    async def send_daily_verse(self) -> str:
        """Build today's message and send it to the configured chat."""
        if self._messaging is None or not self._chat_id:
            raise RuntimeError("Messaging is not configured for this service.")
        logger.info("Preparing to send daily verse...")
        message = await self.get_daily_message()
        await self._messaging.send_text_message(self._chat_id, message)
        logger.info("Successfully sent verse to chat ID: %s", self._chat_id)
        return message


__all__ = ["DailyMessageService", "today_in"]
