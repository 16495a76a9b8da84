"""Delete an event."""

import logging

import typer
from typing_extensions import Annotated

from sharedcal.form import DELETE_PROMPT
from sharedcal_cli.context import get_context

logger = logging.getLogger(__name__)


def delete(
    event_id: Annotated[
        str,
        typer.Argument(help="Id of the event to delete"),
    ],
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Skip confirmation prompt"),
    ] = False,
) -> None:
    """Delete an event. Unknown ids are ignored."""
    ctx = get_context()
    session = ctx.session

    event = session.state.find(event_id)
    if event is None:
        typer.echo(f"No event '{event_id}', nothing to delete.")
        return

    if force:
        confirm = lambda _prompt: True  # noqa: E731
    else:
        print(f"\nDelete '{event.title}' ({event_id})")
        confirm = typer.confirm

    if session.delete(event_id, confirm):
        print(
            f"\n{typer.style('✓', fg=typer.colors.GREEN, bold=True)} "
            f"Event '{event.title}' deleted"
        )
    else:
        typer.echo("Delete cancelled.")
