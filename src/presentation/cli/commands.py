"""CLI commands for the notification dispatcher."""

from __future__ import annotations

from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from src.notifications.errors import NotificationError
from src.services import ConfigService, NotificationService

console = Console()

app = typer.Typer(help="Notification dispatcher - send and broadcast notifications")


def _config_option():
    return typer.Option(None, "--config", help="Path to the YAML configuration file")


def _fail(message: str) -> None:
    console.print(f"[red][ERROR] {escape(message)}[/red]")
    raise typer.Exit(code=1)


def _service(config: Optional[str]) -> NotificationService:
    config_service = ConfigService(config)
    try:
        return NotificationService(config_service, console)
    except FileNotFoundError as e:
        _fail(str(e))
    except ValidationError as e:
        _fail(f"Invalid configuration {config_service.get_config_path()}:\n{e}")
    except NotificationError as e:
        _fail(str(e))


@app.command()
def send(
    message: str = typer.Argument(..., help="Message to send"),
    channel: str = typer.Option("console", "--channel", "-c", help="Channel kind"),
    transform: Optional[List[str]] = typer.Option(
        None, "--transform", "-t", help="Transform applied before sending (repeatable)"
    ),
    config: Optional[str] = _config_option(),
) -> None:
    """Send a message once through a single channel."""
    service = _service(config)
    try:
        service.send(channel, message, transform or [])
    except NotificationError as e:
        _fail(str(e))
    console.print(f"[green][SUCCESS] Message sent via {escape(channel)}[/green]")


@app.command()
def broadcast(
    message: str = typer.Argument(..., help="Message to broadcast"),
    strict: bool = typer.Option(
        False, "--strict", help="Exit with an error if any subscriber failed"
    ),
    config: Optional[str] = _config_option(),
) -> None:
    """Broadcast a message to every configured subscriber."""
    service = _service(config)
    result = service.broadcast(message)

    if not result.attempted:
        console.print("[yellow][INFO] No subscribers configured.[/yellow]")
        return

    for failure in result.failures:
        console.print(f"[red][ERROR] {escape(failure.describe())}[/red]")

    console.print(
        f"[green][INFO] {result.delivered}/{result.attempted} subscriber(s) notified.[/green]"
    )
    if strict and not result.ok:
        raise typer.Exit(code=1)


@app.command()
def channels(config: Optional[str] = _config_option()) -> None:
    """List the channel kinds and whether they can be used."""
    service = _service(config)
    table = Table(title="Channels")
    table.add_column("Kind", style="cyan")
    table.add_column("Available")

    for kind in service.factory.kinds():
        available = service.factory.is_available(kind)
        table.add_row(kind.value, "[green]yes[/green]" if available else "[red]no[/red]")

    console.print(table)


@app.command()
def subscribers(config: Optional[str] = _config_option()) -> None:
    """List the subscribers receiving broadcasts, in notification order."""
    service = _service(config)
    table = Table(title="Subscribers")
    table.add_column("#", justify="right")
    table.add_column("Channel", style="cyan")
    table.add_column("Transforms")

    for index, subscriber_config in enumerate(service.config.subscribers):
        table.add_row(
            str(index),
            subscriber_config.channel.value,
            ", ".join(subscriber_config.transforms) or "-",
        )

    console.print(table)


if __name__ == "__main__":  # pragma: no cover
    app()
