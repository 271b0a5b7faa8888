"""CLI commands for the daily verse bot."""

from __future__ import annotations

import asyncio
import uuid

import typer
from rich.console import Console
from rich.table import Table

from daily_verse_bot.core.exceptions import DailyVerseError
from daily_verse_bot.core.logging import correlation_id_context, get_logger
from daily_verse_bot.services import ServiceContainer
from daily_verse_bot.services.daily_message import DailyMessageService
from daily_verse_bot.services.reference_parser import parse_passage_refs

logger = get_logger(__name__)

main_app = typer.Typer(
    name="daily-verse-bot",
    help="Send the Bible Gateway verse of the day to Telegram",
    no_args_is_help=True,
)
console = Console()


def _get_service() -> DailyMessageService:
    """Get the daily message service with default adapters."""
    from daily_verse_bot.bootstrap import (  # pylint: disable=import-outside-toplevel
        build_default_service_container,
    )

    container: ServiceContainer = build_default_service_container()
    assert container.daily_message is not None  # nosec B101 - always wired by bootstrap
    return container.daily_message


def _run_id() -> str:
    return uuid.uuid4().hex[:12]


@main_app.command("send")
def send() -> None:
    """Build today's message and send it to the configured chat."""
    service = _get_service()
    with correlation_id_context(_run_id()):
        logger.info("Running the send daily verse task...")
        try:
            asyncio.run(service.send_daily_verse())
        except DailyVerseError as e:
            logger.error("Task failed with an error: %s", e, exc_info=True)
            console.print(f"[red]Error:[/red] {e}")
            raise typer.Exit(1) from e
    console.print("[green]Daily verse sent.[/green]")


@main_app.command("preview")
def preview() -> None:
    """Print today's message without sending it."""
    service = _get_service()
    with correlation_id_context(_run_id()):
        try:
            message = asyncio.run(service.get_daily_message())
        except DailyVerseError as e:
            console.print(f"[red]Error:[/red] {e}")
            raise typer.Exit(1) from e
    console.print(message, markup=False, highlight=False)


@main_app.command("parse")
def parse(
    citation: str = typer.Argument(..., help='Display citation, e.g. "1 John 1:8-10, 2:1-2"'),
) -> None:
    """Show how a citation expands into passage references."""
    refs = parse_passage_refs(citation)
    if not refs:
        console.print("[dim]Nothing to fetch.[/dim]")
        return

    table = Table(title=citation)
    table.add_column("Reference", style="cyan")
    table.add_column("Book")
    table.add_column("Chapter")
    table.add_column("Verses")
    for ref in refs:
        table.add_row(ref.label, ref.book, ref.chapter or "-", ref.verses or "-")
    console.print(table)


def main() -> None:
    """Entry point for the CLI."""
    main_app()


__all__ = ["main", "main_app"]
