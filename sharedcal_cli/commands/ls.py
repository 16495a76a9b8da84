"""List all events."""

import logging

import typer
from typing_extensions import Annotated

from sharedcal_cli.context import get_context
from sharedcal_cli.display import RichEventRenderer

logger = logging.getLogger(__name__)


def ls(
    agenda: Annotated[
        bool,
        typer.Option("--agenda", "-a", help="Group events by day"),
    ] = False,
) -> None:
    """List every event in the calendar, sorted by start."""
    ctx = get_context()
    session = ctx.session

    events = session.sorted_events()
    renderer = RichEventRenderer(tz=session.tz)
    if agenda:
        renderer.render_agenda(events, title=ctx.config.calendar_name)
    else:
        renderer.render_list(events, title=ctx.config.calendar_name)
