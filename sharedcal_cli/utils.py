"""CLI helpers for argument parsing and lookups."""

import logging
from datetime import date, datetime

import typer

from sharedcal.exceptions import EventNotFoundError
from sharedcal.models.event import Event
from sharedcal.session import CalendarSession

logger = logging.getLogger(__name__)


def parse_date_arg(date_str: str) -> date:
    """Parse a date string in YYYY-MM-DD format.

    Raises:
        typer.BadParameter: If the date format is invalid.
    """
    try:
        return datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError:
        raise typer.BadParameter(f"Invalid date format: {date_str}. Use YYYY-MM-DD.")


def require_event(session: CalendarSession, event_id: str) -> Event:
    """Get an event or exit with an error."""
    try:
        return session.get(event_id)
    except EventNotFoundError as e:
        logger.error(str(e))
        raise typer.Exit(1)
