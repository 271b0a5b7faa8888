"""Aggregate the day's passage text for one or two translations."""

from __future__ import annotations

import asyncio
from typing import Optional

from daily_verse_bot.core.exceptions import VerseOfTheDayError
from daily_verse_bot.core.logging import get_logger, translation_context
from daily_verse_bot.core.models import DailyPassage
from daily_verse_bot.core.ports import VerseSourcePort
from daily_verse_bot.services.passage_fetcher import PassageFetcher
from daily_verse_bot.services.reference_parser import parse_display_ref

logger = get_logger(__name__)


class ContentAggregator:
    """Expand the verse-of-the-day citation and join the fetched passages."""

    def __init__(self, source: VerseSourcePort, fetcher: Optional[PassageFetcher] = None) -> None:
        self._source = source
        self._fetcher = fetcher or PassageFetcher(source)

    async def fetch_daily_passage(self, translation: str) -> DailyPassage:
        """Return the full passage text and display citation for ``translation``.

        Raises:
            VerseOfTheDayError: the verse-of-the-day citation itself could not
                be retrieved. Individual passage failures are not fatal.
        """
        with translation_context(translation):
            logger.info("Fetching verse of the day for version: %s", translation)
            try:
                votd = await self._source.fetch_verse_of_the_day(translation)
            except Exception as exc:  # pylint: disable=broad-exception-caught
                logger.error(
                    "Failed to fetch verse of the day for version %s", translation, exc_info=True
                )
                raise VerseOfTheDayError(translation) from exc

            refs = parse_display_ref(votd.display_ref)
            logger.info("Expanded '%s' into %d reference(s): %s", votd.display_ref, len(refs), refs)
            # gather preserves argument order regardless of completion order
            texts = await asyncio.gather(
                *(self._fetcher.fetch(ref, translation) for ref in refs)
            )
            content = "\n".join(text for text in texts if text)
            return DailyPassage(
                translation=translation, content=content, display_ref=votd.display_ref
            )

    async def fetch_daily_passages(
        self, primary: str, secondary: Optional[str]
    ) -> tuple[DailyPassage, Optional[DailyPassage]]:
        """Aggregate both translations concurrently.

        The primary failure propagates; a secondary failure is logged and
        reported as ``None`` so the message can still be delivered.
        """
        if not secondary:
            return await self.fetch_daily_passage(primary), None

        primary_result, secondary_result = await asyncio.gather(
            self.fetch_daily_passage(primary),
            self.fetch_daily_passage(secondary),
            return_exceptions=True,
        )
        if isinstance(primary_result, BaseException):
            raise primary_result
        if isinstance(secondary_result, VerseOfTheDayError):
            logger.warning(
                "Secondary translation %s unavailable; continuing without it", secondary
            )
            return primary_result, None
        if isinstance(secondary_result, BaseException):
            raise secondary_result
        return primary_result, secondary_result


__all__ = ["ContentAggregator"]
