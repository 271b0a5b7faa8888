"""Core data transfer objects shared across layers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel


@dataclass(frozen=True, slots=True)
class PassageRef:
    """A single fetchable scripture location.

    ``chapter`` and ``verses`` are ``None`` for references passed through
    verbatim (bare chapters such as ``Psalm 23`` or unrecognised shapes).
    """

    book: str
    chapter: Optional[str] = None
    verses: Optional[str] = None

    @property
    def label(self) -> str:
        """Render the reference in the ``Book chapter:verses`` lookup form."""
        if self.chapter is None:
            return self.book
        if self.verses is None:
            return f"{self.book} {self.chapter}"
        return f"{self.book} {self.chapter}:{self.verses}"

    def __str__(self) -> str:
        return self.label


class VerseOfTheDay(BaseModel):
    """The ``votd`` object returned by the Bible Gateway JSON endpoint."""

    text: str = ""
    display_ref: str
    reference: Optional[str] = None
    permalink: Optional[str] = None
    copyright: Optional[str] = None
    version: Optional[str] = None


class VerseOfTheDayPayload(BaseModel):
    """Envelope of the verse-of-the-day response."""

    votd: VerseOfTheDay


@dataclass(frozen=True, slots=True)
class DailyPassage:
    """Aggregated passage text for one translation plus its display citation."""

    translation: str
    content: str
    display_ref: str


__all__ = ["DailyPassage", "PassageRef", "VerseOfTheDay", "VerseOfTheDayPayload"]
