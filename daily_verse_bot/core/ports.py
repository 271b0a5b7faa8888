"""Protocol definitions for infrastructure adapters."""

# pylint: disable=unnecessary-ellipsis

from __future__ import annotations

from typing import Protocol

from daily_verse_bot.core.models import VerseOfTheDay


class VerseSourcePort(Protocol):
    """Port exposing the scripture content provider."""

    async def fetch_verse_of_the_day(self, translation: str) -> VerseOfTheDay:
        """Return the day's citation and short text for ``translation``."""
        ...

    async def fetch_passage_html(self, reference: str, translation: str) -> str:
        """Return the raw passage page markup for ``reference``."""
        ...


class MessagingPort(Protocol):
    """Port exposing messaging-related side effects."""

    async def send_text_message(self, chat_id: str, text: str) -> None:
        """Send a formatted text message to ``chat_id``."""
        ...


__all__ = ["MessagingPort", "VerseSourcePort"]
