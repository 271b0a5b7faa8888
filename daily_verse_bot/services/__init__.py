"""Application service layer wiring."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, Callable, Optional

from daily_verse_bot.core.ports import MessagingPort, VerseSourcePort

if TYPE_CHECKING:  # pragma: no cover - type narrowing only
    from .daily_message import DailyMessageService
    from .explanation import ExplanationGenerator


@dataclass(slots=True)
class ServiceContainer:
    """Aggregate of application-level services available to entry points."""

    verse_source: Optional[VerseSourcePort] = None
    messaging: Optional[MessagingPort] = None
    daily_message: Optional["DailyMessageService"] = None


def build_default_services(  # pylint: disable=too-many-arguments
    *,
    verse_source_port: VerseSourcePort,
    explainer: "ExplanationGenerator",
    primary_translation: str,
    secondary_translation: Optional[str] = None,
    messaging_port: Optional[MessagingPort] = None,
    chat_id: Optional[str] = None,
    today: Optional[Callable[[], date]] = None,
) -> ServiceContainer:
    """Return a service container with the daily message pipeline wired up."""

    # pylint: disable=import-outside-toplevel
    from .content_aggregator import ContentAggregator
    from .daily_message import DailyMessageService

    daily_message = DailyMessageService(
        ContentAggregator(verse_source_port),
        explainer,
        primary_translation=primary_translation,
        secondary_translation=secondary_translation,
        messaging=messaging_port,
        chat_id=chat_id,
        today=today or date.today,
    )
    return ServiceContainer(
        verse_source=verse_source_port,
        messaging=messaging_port,
        daily_message=daily_message,
    )


__all__ = ["ServiceContainer", "build_default_services"]
