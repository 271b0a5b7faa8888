"""Core exception types shared across layers."""


class DailyVerseError(Exception):
    """Base class for failures that abort a daily verse run."""


class VerseOfTheDayError(DailyVerseError):
    """Raised when the day's citation cannot be retrieved for a translation."""

    def __init__(self, translation: str) -> None:
        super().__init__(f"Could not retrieve the verse of the day for version {translation}.")
        self.translation = translation


class MessageDeliveryError(DailyVerseError):
    """Raised when the messaging provider rejects an outbound message."""


__all__ = [
    "DailyVerseError",
    "MessageDeliveryError",
    "VerseOfTheDayError",
]
