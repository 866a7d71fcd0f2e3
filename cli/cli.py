"""CLI for the restaurant hours admin.

Operator surface over AdminSession: edit the weekly schedule, preview and
export the card, and mirror the schedule to the remote endpoint.
"""

import asyncio
from pathlib import Path

import typer
from loguru import logger
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from hours_admin.config.settings import settings
from hours_admin.core.logger import setup_logger
from hours_admin.editor.session import ActionOutcome, AdminSession
from hours_admin.export.files import DEFAULT_HTML_FILENAME, DEFAULT_JSON_FILENAME
from hours_admin.export.html_card import format_hours
from hours_admin.persistence.local_store import LocalStore
from hours_admin.schedule.types import DAY_NAMES, STATUS_LABELS, WEEKDAYS, RemoteEndpointConfig, StatusColor

# Initialize Rich console for output
console = Console()

# Initialize Typer app
app = typer.Typer(
    name="hours-admin",
    help="Restaurant working-hours card admin",
    add_completion=False,
)

_STATUS_STYLES = {
    StatusColor.GREEN: "green",
    StatusColor.YELLOW: "yellow",
    StatusColor.RED: "red",
}


class _State:
    data_dir: Path = settings.data_dir


state = _State()


@app.callback()
def main(
    data_dir: Path | None = typer.Option(None, "--data-dir", help="Directory for locally saved data"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Restaurant working-hours card admin."""
    if debug:
        setup_logger(level="DEBUG", log_file=settings.log_file)
    state.data_dir = data_dir or settings.data_dir


def _open_session() -> AdminSession:
    return AdminSession(LocalStore(state.data_dir)).open()


def _report(outcome: ActionOutcome) -> None:
    """Print an action outcome, exiting non-zero on failure."""
    if outcome.ok:
        console.print(f"[green]✓[/green] {outcome.message}")
        return
    console.print(f"[red]Error:[/red] {outcome.message}", style="bold red")
    raise typer.Exit(1)


def _mask(secret: str) -> str:
    if not secret:
        return "[dim]not set[/dim]"
    return "*" * max(len(secret) - 4, 4) + secret[-4:]


@app.command()
def show() -> None:
    """Show the current weekly schedule."""
    session = _open_session()

    table = Table(title="Working Hours")
    table.add_column("Day", style="bold")
    table.add_column("Hours")
    table.add_column("Status")
    for day, hours in session.schedule.items():
        style = _STATUS_STYLES[hours.status]
        table.add_row(
            DAY_NAMES[day],
            format_hours(hours),
            Text(f"● {STATUS_LABELS[hours.status]}", style=style),
        )
    console.print(table)


@app.command()
def set_day(
    day: str = typer.Argument(..., help=f"Weekday: {', '.join(WEEKDAYS)}"),
    opens: str | None = typer.Option(None, "--opens", help="Opening time, HH:MM"),
    closes: str | None = typer.Option(None, "--closes", help="Closing time, HH:MM"),
    is_open: bool | None = typer.Option(None, "--open-day/--closed-day", help="Whether the restaurant opens that day"),
    status: StatusColor | None = typer.Option(None, "--status", help="Status indicator"),
) -> None:
    """Edit one day and save the schedule locally."""
    session = _open_session()
    day = day.lower()

    edits: list[tuple[str, object]] = []
    if opens is not None:
        edits.append(("open", opens))
    if closes is not None:
        edits.append(("close", closes))
    if is_open is not None:
        edits.append(("isOpen", is_open))
    if status is not None:
        edits.append(("status", status.value))

    if not edits:
        console.print("[yellow]Nothing to change. Use --opens, --closes, --open-day/--closed-day or --status.[/yellow]")
        return

    for field, value in edits:
        outcome = session.edit(day, field, value)
        if not outcome.ok:
            _report(outcome)
        logger.debug(outcome.message)

    _report(session.save_local())


@app.command()
def reset(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset the schedule to default values and drop the saved copy."""
    if not yes and not typer.confirm("Reset all working hours to default values?"):
        console.print("[yellow]Reset cancelled[/yellow]")
        return
    _report(_open_session().reset())


@app.command()
def preview() -> None:
    """Print the HTML card for the current schedule."""
    session = _open_session()
    console.print(Syntax(session.preview(), "html", word_wrap=True))


@app.command()
def export_json(
    path: Path = typer.Argument(Path(DEFAULT_JSON_FILENAME), help="Target file or directory"),
) -> None:
    """Export the schedule as pretty-printed JSON."""
    _report(_open_session().export_json(path))


@app.command()
def import_json(
    path: Path = typer.Argument(..., help="JSON file to import"),
) -> None:
    """Replace the schedule with one read from a JSON file."""
    _report(_open_session().import_json(path))


@app.command()
def export_html(
    path: Path = typer.Argument(Path(DEFAULT_HTML_FILENAME), help="Target file or directory"),
) -> None:
    """Export the rendered HTML card."""
    _report(_open_session().export_html(path))


@app.command()
def configure(
    base_url: str | None = typer.Option(None, "--base-url", help="Base URL of the site, e.g. https://your-website.com"),
    api_key: str | None = typer.Option(None, "--api-key", help="API key sent as a bearer token"),
    enabled: bool | None = typer.Option(None, "--enabled/--disabled", help="Enable remote sync"),
) -> None:
    """Show or update the remote endpoint settings."""
    session = _open_session()
    current = session.endpoint

    if base_url is not None or api_key is not None or enabled is not None:
        updated = RemoteEndpointConfig(
            base_url=base_url if base_url is not None else current.base_url,
            api_key=api_key if api_key is not None else current.api_key,
            enabled=enabled if enabled is not None else current.enabled,
        )
        outcome = session.save_endpoint_config(updated)
        if not outcome.ok:
            _report(outcome)
        current = updated

    console.print(
        Panel(
            f"Base URL: {current.base_url or '[dim]not set[/dim]'}\n"
            f"API key:  {_mask(current.api_key)}\n"
            f"Enabled:  {'yes' if current.enabled else 'no'}",
            title="API settings",
            border_style="green" if current.is_configured else "yellow",
        )
    )


@app.command()
def test_connection() -> None:
    """Check the remote endpoint with the saved credentials."""
    _report(asyncio.run(_open_session().test_connection()))


@app.command()
def push() -> None:
    """Send the saved schedule to the server."""
    _report(asyncio.run(_open_session().sync_to_server()))


@app.command()
def pull() -> None:
    """Load the schedule from the server and save it locally."""
    _report(asyncio.run(_open_session().load_from_server()))


if __name__ == "__main__":
    app()
