"""Export the calendar to an ICS (or JSON) file."""

import logging
from enum import Enum
from pathlib import Path

import typer
from typing_extensions import Annotated

from sharedcal.exceptions import ExportError
from sharedcal_cli.context import get_context
from sharedcal_cli.display import console
from sharedcal_cli.setup import setup_writer

logger = logging.getLogger(__name__)


class ExportFormat(str, Enum):
    ics = "ics"
    json = "json"


def export(
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file (default: shared-calendar.ics)"),
    ] = None,
    format: Annotated[
        ExportFormat,
        typer.Option("--format", help="Output format"),
    ] = ExportFormat.ics,
) -> None:
    """Export all events as a calendar file."""
    ctx = get_context()
    session = ctx.session

    writer = setup_writer(format.value, ctx.config)
    if output is None:
        output = Path(ctx.config.ics_export_filename).with_suffix(
            f".{writer.get_extension()}"
        )

    try:
        writer.write(session.sorted_events(), output)
    except ExportError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    console.print(
        f"[bold green]✓[/bold green] Exported {len(session.events)} event(s) to {output}"
    )
