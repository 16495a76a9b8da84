"""Create or edit an event."""

import logging

import typer
from typing_extensions import Annotated

from sharedcal.exceptions import FormValidationError
from sharedcal_cli.context import get_context
from sharedcal_cli.display import RichEventRenderer, console
from sharedcal_cli.utils import require_event

logger = logging.getLogger(__name__)


def add(
    title: Annotated[
        str,
        typer.Argument(help="Event title"),
    ],
    date: Annotated[
        str,
        typer.Option("--date", "-d", help="Day (YYYY-MM-DD)"),
    ],
    time: Annotated[
        str | None,
        typer.Option("--time", "-t", help="Start time (HH:MM), default from config"),
    ] = None,
    duration: Annotated[
        str | None,
        typer.Option("--duration", "-D", help="Duration in minutes"),
    ] = None,
    description: Annotated[
        str,
        typer.Option("--description", help="Free-text description"),
    ] = "",
    attendees: Annotated[
        str,
        typer.Option("--attendees", "-a", help="Comma-separated email addresses"),
    ] = "",
) -> None:
    """Add an event.

    Example:
        sharedcal add "Sync" --date 2024-03-15 --time 09:00 --duration 30
    """
    ctx = get_context()
    session = ctx.session

    form = session.open_create(date)
    updates = {"title": title, "description": description, "attendees": attendees}
    if time:
        updates["time"] = time
    if duration is not None:
        updates["duration"] = duration

    try:
        event = session.save(form.model_copy(update=updates))
    except FormValidationError as e:
        raise typer.BadParameter(str(e))

    console.print(f"\n[bold green]✓[/bold green] Event created")
    RichEventRenderer(tz=session.tz).render_event(event)


def edit(
    event_id: Annotated[
        str,
        typer.Argument(help="Id of the event to edit"),
    ],
    title: Annotated[
        str | None,
        typer.Option("--title", help="New title"),
    ] = None,
    date: Annotated[
        str | None,
        typer.Option("--date", "-d", help="New day (YYYY-MM-DD)"),
    ] = None,
    time: Annotated[
        str | None,
        typer.Option("--time", "-t", help="New start time (HH:MM)"),
    ] = None,
    duration: Annotated[
        str | None,
        typer.Option("--duration", "-D", help="New duration in minutes"),
    ] = None,
    description: Annotated[
        str | None,
        typer.Option("--description", help="New description"),
    ] = None,
    attendees: Annotated[
        str | None,
        typer.Option("--attendees", "-a", help="New comma-separated attendees"),
    ] = None,
) -> None:
    """Edit an event. Fields not given keep their current value."""
    ctx = get_context()
    session = ctx.session

    require_event(session, event_id)
    form = session.open_edit(event_id)

    fields = {
        "title": title,
        "date": date,
        "time": time,
        "duration": duration,
        "description": description,
        "attendees": attendees,
    }
    updates = {name: value for name, value in fields.items() if value is not None}

    try:
        event = session.save(form.model_copy(update=updates), editing_id=event_id)
    except FormValidationError as e:
        raise typer.BadParameter(str(e))

    console.print(f"\n[bold green]✓[/bold green] Event updated")
    RichEventRenderer(tz=session.tz).render_event(event)
