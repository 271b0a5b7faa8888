"""Tests for the typer command line interface."""

from __future__ import annotations

from typer.testing import CliRunner

from daily_verse_bot import cli
from daily_verse_bot.core.exceptions import VerseOfTheDayError

# pylint: disable=missing-function-docstring,missing-class-docstring

runner = CliRunner()


class StubService:
    def __init__(self, message: str = "📖 message", error: Exception | None = None) -> None:
        self.message = message
        self.error = error
        self.sent = 0

    async def get_daily_message(self) -> str:
        if self.error:
            raise self.error
        return self.message

    async def send_daily_verse(self) -> str:
        if self.error:
            raise self.error
        self.sent += 1
        return self.message


def test_parse_lists_expanded_references() -> None:
    result = runner.invoke(cli.main_app, ["parse", "1 John 1:8-10, 2:1-2"])
    assert result.exit_code == 0
    assert "1 John 1:8-10" in result.stdout
    assert "1 John 2:1-2" in result.stdout


def test_parse_blank_citation_has_nothing_to_fetch() -> None:
    result = runner.invoke(cli.main_app, ["parse", "   "])
    assert result.exit_code == 0
    assert "Nothing to fetch." in result.stdout


def test_preview_prints_message(monkeypatch) -> None:
    monkeypatch.setattr(cli, "_get_service", lambda: StubService("*John 3:16*"))
    result = runner.invoke(cli.main_app, ["preview"])
    assert result.exit_code == 0
    assert "*John 3:16*" in result.stdout


def test_send_reports_success(monkeypatch) -> None:
    service = StubService()
    monkeypatch.setattr(cli, "_get_service", lambda: service)
    result = runner.invoke(cli.main_app, ["send"])
    assert result.exit_code == 0
    assert service.sent == 1
    assert "Daily verse sent." in result.stdout


def test_send_failure_exits_nonzero(monkeypatch) -> None:
    monkeypatch.setattr(
        cli, "_get_service", lambda: StubService(error=VerseOfTheDayError("RUSV"))
    )
    result = runner.invoke(cli.main_app, ["send"])
    assert result.exit_code == 1
    assert "RUSV" in result.stdout
