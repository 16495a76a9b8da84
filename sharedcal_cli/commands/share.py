"""Share links: print, copy and import."""

import logging

import typer
from typing_extensions import Annotated

from sharedcal.exceptions import SnapshotDecodeError
from sharedcal.output.share_link import copy_share_link
from sharedcal_cli.context import get_context
from sharedcal_cli.display import console

logger = logging.getLogger(__name__)


def _manual_copy_prompt(message: str, link: str) -> None:
    console.print(f"[yellow]{message}[/yellow]")
    console.print(link, soft_wrap=True)


def share(
    base_url: Annotated[
        str | None,
        typer.Option("--base-url", "-u", help="Page the link opens (default from config)"),
    ] = None,
    copy: Annotated[
        bool,
        typer.Option("--copy/--no-copy", help="Copy the link to the clipboard"),
    ] = True,
) -> None:
    """Print a link carrying a snapshot of the whole calendar.

    The link is a copy, not live: later edits are not shared. Anyone holding
    it can read every event.
    """
    ctx = get_context()
    session = ctx.session

    link = session.share_link(base_url)

    if copy:
        if copy_share_link(link, ctx.clipboard, _manual_copy_prompt):
            console.print("[bold green]✓[/bold green] Share link copied to clipboard")
            console.print(link, soft_wrap=True)
    else:
        console.print(link, soft_wrap=True)


def import_(
    source: Annotated[
        str,
        typer.Argument(help="Share link or bare snapshot payload"),
    ],
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Replace existing events without asking"),
    ] = False,
) -> None:
    """Replace the calendar with the events from a share link."""
    ctx = get_context()
    session = ctx.session

    if session.events and not force:
        count = len(session.events)
        if not typer.confirm(f"Replace {count} existing event(s)?"):
            typer.echo("Import cancelled.")
            return

    try:
        events = session.import_snapshot(source)
    except SnapshotDecodeError as e:
        logger.error(f"Could not import snapshot: {e}")
        raise typer.Exit(1)

    console.print(f"[bold green]✓[/bold green] Imported {len(events)} event(s)")
