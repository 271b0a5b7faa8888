"""Tests for core data models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from daily_verse_bot.core.models import PassageRef, VerseOfTheDayPayload


@pytest.mark.parametrize(
    ("ref", "label"),
    [
        (PassageRef("Genesis"), "Genesis"),
        (PassageRef("Psalm", "23"), "Psalm 23"),
        (PassageRef("1 John", "1", "8-10"), "1 John 1:8-10"),
    ],
)
def test_passage_ref_label(ref: PassageRef, label: str) -> None:
    """Labels only include the parts that are present."""
    assert ref.label == label
    assert str(ref) == label


def test_votd_payload_parses_bible_gateway_json() -> None:
    """The verse-of-the-day wrapper maps Bible Gateway's JSON keys."""
    payload = VerseOfTheDayPayload.model_validate(
        {
            "votd": {
                "text": "&ldquo;For God so loved the world&rdquo;",
                "display_ref": "John 3:16",
                "reference": "John 3:16",
                "permalink": "https://www.biblegateway.com/passage/?search=John+3%3A16",
                "copyright": "NIV",
                "version": "New International Version",
                "version_id": "NIV",
            }
        }
    )
    assert payload.votd.display_ref == "John 3:16"
    assert payload.votd.version == "New International Version"


def test_votd_payload_requires_display_ref() -> None:
    """A payload without a citation is rejected."""
    with pytest.raises(ValidationError):
        VerseOfTheDayPayload.model_validate({"votd": {"text": "..."}})
