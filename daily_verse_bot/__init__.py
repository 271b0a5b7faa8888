"""Daily verse bot: Bible Gateway verse of the day, explained, delivered to Telegram."""

__version__ = "0.1.0"
