"""Infrastructure adapter exports."""

from .bible_gateway import BibleGatewayAdapter
from .messaging import TelegramMessagingAdapter

__all__ = [
    "BibleGatewayAdapter",
    "TelegramMessagingAdapter",
]
