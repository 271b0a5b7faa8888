"""Fetch and clean a single passage reference."""

from __future__ import annotations

from daily_verse_bot.core.logging import get_logger
from daily_verse_bot.core.ports import VerseSourcePort
from daily_verse_bot.services.passage_cleaning import extract_passage_text

logger = get_logger(__name__)


class PassageFetcher:  # pylint: disable=too-few-public-methods
    """Retrieve rendered passage text; failures degrade to an empty string."""

    def __init__(self, source: VerseSourcePort) -> None:
        self._source = source

    async def fetch(self, reference: str, translation: str) -> str:
        """Return the cleaned text for ``reference`` or ``""`` on any failure."""
        try:
            markup = await self._source.fetch_passage_html(reference, translation)
            text = extract_passage_text(markup)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            logger.warning(
                'Failed to fetch passage for ref "%s" (%s): %s', reference, translation, exc
            )
            return ""
        if not text:
            logger.warning('Passage "%s" (%s) rendered no text', reference, translation)
        return text


__all__ = ["PassageFetcher"]
