"""Tests for the daily message orchestration."""

import asyncio
from datetime import date

import pytest

from daily_verse_bot.core.exceptions import VerseOfTheDayError
from daily_verse_bot.core.models import VerseOfTheDay
from daily_verse_bot.services.content_aggregator import ContentAggregator
from daily_verse_bot.services.daily_message import DailyMessageService
from daily_verse_bot.services.message_composer import EXPLANATION_LABEL
from tests.fakes import FakeMessaging, FakeVerseSource, passage_page

# pylint: disable=missing-function-docstring


class FakeExplainer:
    """Explainer returning a fixed answer and recording requests."""

    def __init__(self, answer: str = "") -> None:
        self.answer = answer
        self.calls: list[tuple[str, str]] = []

    async def explain(self, passage_text: str, reference: str) -> str:
        self.calls.append((passage_text, reference))
        return self.answer


def _source() -> FakeVerseSource:
    return FakeVerseSource(
        votd={
            "RUSV": VerseOfTheDay(display_ref="Иоанна 3:16", version="RUSV"),
            "NIV": VerseOfTheDay(display_ref="John 3:16", version="NIV"),
        },
        passages={
            ("Иоанна 3:16", "RUSV"): passage_page("Ибо так возлюбил Бог мир"),
            ("John 3:16", "NIV"): passage_page("For God so loved the world"),
        },
    )


def _service(explainer, messaging=None, chat_id=None, source=None) -> DailyMessageService:
    return DailyMessageService(
        ContentAggregator(source or _source()),
        explainer,
        primary_translation="RUSV",
        secondary_translation="NIV",
        messaging=messaging,
        chat_id=chat_id,
        today=lambda: date(2026, 10, 19),
    )


def test_message_contains_both_translations_and_explanation() -> None:
    explainer = FakeExplainer("Бог любит мир.")
    message = asyncio.run(_service(explainer).get_daily_message())
    assert "19.10.2026" in message
    assert "*Иоанна 3:16*" in message
    assert "Ибо так возлюбил Бог мир" in message
    assert "_For God so loved the world_" in message
    assert message.endswith(f"{EXPLANATION_LABEL}\nБог любит мир.")
    assert explainer.calls == [("Ибо так возлюбил Бог мир", "Иоанна 3:16")]


def test_message_without_explanation_omits_section() -> None:
    message = asyncio.run(_service(FakeExplainer("")).get_daily_message())
    assert EXPLANATION_LABEL not in message
    assert message.endswith("_For God so loved the world_")


def test_secondary_failure_still_builds_message() -> None:
    source = _source()
    source.votd["NIV"] = RuntimeError("boom")
    message = asyncio.run(_service(FakeExplainer(), source=source).get_daily_message())
    assert "Ибо так возлюбил Бог мир" in message
    assert "For God so loved" not in message


def test_primary_failure_propagates() -> None:
    source = _source()
    source.votd["RUSV"] = RuntimeError("boom")
    with pytest.raises(VerseOfTheDayError):
        asyncio.run(_service(FakeExplainer(), source=source).get_daily_message())


def test_send_daily_verse_delivers_to_chat() -> None:
    messaging = FakeMessaging()
    service = _service(FakeExplainer("Why."), messaging=messaging, chat_id="42")
    message = asyncio.run(service.send_daily_verse())
    assert messaging.sent_text == [("42", message)]


def test_send_without_messaging_is_rejected() -> None:
    with pytest.raises(RuntimeError):
        asyncio.run(_service(FakeExplainer()).send_daily_verse())
