"""Bible Gateway adapter implementing the verse source port."""

from __future__ import annotations

from typing import Optional

import httpx

from daily_verse_bot.core.config import DEFAULT_USER_AGENT
from daily_verse_bot.core.logging import get_logger
from daily_verse_bot.core.models import VerseOfTheDay, VerseOfTheDayPayload
from daily_verse_bot.core.ports import VerseSourcePort

logger = get_logger(__name__)

VOTD_PATH = "/votd/get/"
PASSAGE_PATH = "/passage/"


class BibleGatewayAdapter(VerseSourcePort):
    """Fetch verse-of-the-day JSON and passage pages over HTTP."""

    def __init__(  # pylint: disable=too-many-arguments
        self,
        base_url: str = "https://www.biblegateway.com",
        *,
        user_agent: str = DEFAULT_USER_AGENT,
        accept_language: str = "en-US,en;q=0.9",
        timeout: float = 5.0,
        max_redirects: int = 5,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._user_agent = user_agent
        self._accept_language = accept_language
        self._timeout = timeout
        self._max_redirects = max_redirects
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            headers={"User-Agent": self._user_agent},
            timeout=self._timeout,
            follow_redirects=True,
            max_redirects=self._max_redirects,
            transport=self._transport,
        )

    async def fetch_verse_of_the_day(self, translation: str) -> VerseOfTheDay:
        async with self._client() as client:
            response = await client.get(
                VOTD_PATH, params={"format": "json", "version": translation}
            )
            response.raise_for_status()
            payload = VerseOfTheDayPayload.model_validate(response.json())
        logger.info("Verse of the day for %s: %s", translation, payload.votd.display_ref)
        return payload.votd

    async def fetch_passage_html(self, reference: str, translation: str) -> str:
        async with self._client() as client:
            response = await client.get(
                PASSAGE_PATH,
                params={"search": reference, "version": translation},
                headers={"Accept-Language": self._accept_language},
            )
            response.raise_for_status()
            return response.text


__all__ = ["BibleGatewayAdapter"]
