"""Telegram adapter implementing the messaging port."""

from __future__ import annotations

from typing import Optional

import httpx

from daily_verse_bot.core.exceptions import MessageDeliveryError
from daily_verse_bot.core.logging import get_logger
from daily_verse_bot.core.ports import MessagingPort
from daily_verse_bot.utils.text_utils import chop_text

logger = get_logger(__name__)

TELEGRAM_API_BASE = "https://api.telegram.org"


class TelegramMessagingAdapter(MessagingPort):
    """Send Markdown messages through the Telegram Bot API."""

    def __init__(
        self,
        token: str,
        *,
        max_text_length: int = 4096,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._url = f"{TELEGRAM_API_BASE}/bot{token}/sendMessage"
        self._max_text_length = max_text_length
        self._timeout = timeout
        self._transport = transport

    async def send_text_message(self, chat_id: str, text: str) -> None:
        chunks = chop_text(text, self._max_text_length)
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            for index, chunk in enumerate(chunks, start=1):
                payload = {
                    "chat_id": chat_id,
                    "text": chunk,
                    "parse_mode": "Markdown",
                    "disable_web_page_preview": True,
                }
                response = await client.post(self._url, json=payload)
                if response.status_code >= 400:
                    logger.error("Failed to send Telegram message: %s", response.text)
                    raise MessageDeliveryError(
                        f"Telegram rejected message part {index}/{len(chunks)} "
                        f"with status {response.status_code}"
                    )
                logger.info("Sent Telegram message part %d/%d to %s", index, len(chunks), chat_id)


__all__ = ["TelegramMessagingAdapter"]
