"""ICS file writer for calendar files."""

import logging
from datetime import datetime, timezone
from pathlib import Path

from icalendar import Calendar
from icalendar import Event as ICalEvent

from sharedcal.config import CalendarConfig
from sharedcal.exceptions import ExportError
from sharedcal.models.event import Event

logger = logging.getLogger(__name__)


class ICSWriter:
    """Writer for ICS calendar files."""

    def __init__(self, config: CalendarConfig | None = None):
        """
        Initialize ICSWriter.

        Args:
            config: Source of PRODID, calendar name and UID domain
        """
        self.config = config or CalendarConfig()

    def uid_for(self, event: Event) -> str:
        """Stable UID: event id plus the fixed domain suffix."""
        return f"{event.id}@{self.config.uid_domain}"

    def build_calendar(
        self, events: list[Event], now: datetime | None = None
    ) -> Calendar:
        """
        Build the icalendar object for events.

        Args:
            events: Events to include, one VEVENT each
            now: Generation timestamp for DTSTAMP (defaults to current UTC time)

        Returns:
            icalendar.Calendar
        """
        stamp = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
        # DTSTAMP has second precision
        stamp = stamp.replace(microsecond=0)

        cal = Calendar()
        cal.add("prodid", self.config.prodid)
        cal.add("version", "2.0")
        cal.add("X-WR-CALNAME", self.config.calendar_name)

        for event_model in events:
            event = ICalEvent()

            event.add("uid", self.uid_for(event_model))
            event.add("dtstamp", stamp)
            # Start is stored in UTC, so both render as YYYYMMDDTHHMMSSZ
            event.add("dtstart", event_model.start.replace(microsecond=0))
            event.add("dtend", event_model.end.replace(microsecond=0))
            event.add("summary", event_model.title)

            if event_model.description:
                event.add("description", event_model.description)

            for address in event_model.attendees:
                event.add("attendee", f"mailto:{address}")

            cal.add_component(event)

        return cal

    def to_ical(self, events: list[Event], now: datetime | None = None) -> bytes:
        """Render events as ICS bytes."""
        content = self.build_calendar(events, now).to_ical()
        if not content:
            raise ExportError("Calendar.to_ical() returned empty content")
        return content

    def write(self, events: list[Event], path: Path) -> None:
        """Write events to an ICS file.

        Raises:
            ExportError: If the file cannot be written
        """
        content = self.to_ical(events)
        try:
            with open(path, "wb") as f:
                f.write(content)
        except OSError as e:
            # Remove a partial file if one was created
            if path.exists() and path.stat().st_size == 0:
                path.unlink(missing_ok=True)
            raise ExportError(f"Failed to write {path}: {e}") from e
        logger.info(f"Exported {len(events)} events to {path}")

    def get_extension(self) -> str:
        """Returns file extension."""
        return "ics"


def export_calendar_document(
    events: list[Event],
    config: CalendarConfig | None = None,
    now: datetime | None = None,
) -> str:
    """Render events as calendar-interchange document text."""
    return ICSWriter(config).to_ical(events, now).decode("utf-8")
