"""Event form controller: turns form input into events and back."""

import logging
from datetime import date, datetime, time, timezone, tzinfo
from typing import Callable

from sharedcal.config import CalendarConfig
from sharedcal.exceptions import FormValidationError
from sharedcal.models.event import Event, coerce_duration, parse_attendees
from sharedcal.models.form import EventForm
from sharedcal.utils import generate_id

logger = logging.getLogger(__name__)

DELETE_PROMPT = "Delete event?"

ConfirmFn = Callable[[str], bool]


def open_create(date_iso: str, config: CalendarConfig | None = None) -> EventForm:
    """
    Fresh form for a new event on the given day.

    Args:
        date_iso: Preselected day (YYYY-MM-DD)
        config: Source of the default time and duration
    """
    config = config or CalendarConfig()
    return EventForm(
        date=date_iso,
        time=config.default_time,
        duration=config.default_duration,
    )


def open_edit(event: Event, tz: tzinfo | None = None) -> EventForm:
    """Form populated from an existing event, in local time."""
    local_start = event.start.astimezone(tz)
    return EventForm(
        title=event.title,
        date=local_start.strftime("%Y-%m-%d"),
        time=local_start.strftime("%H:%M"),
        duration=event.duration,
        description=event.description,
        attendees=", ".join(event.attendees),
    )


def _parse_date(value: str) -> date:
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except (AttributeError, ValueError):
        raise FormValidationError(f"Invalid date: {value!r}. Use YYYY-MM-DD.")


def _parse_time(value: str) -> time:
    for fmt in ("%H:%M", "%H:%M:%S"):
        try:
            return datetime.strptime(value.strip(), fmt).time()
        except (AttributeError, ValueError):
            continue
    raise FormValidationError(f"Invalid time: {value!r}. Use HH:MM.")


def combine_start(form: EventForm, tz: tzinfo | None = None) -> datetime:
    """
    Combine the date and time fields into a UTC instant.

    The fields are read as wall-clock time in tz (system local if None).

    Raises:
        FormValidationError: If date or time is missing or malformed
    """
    if not form.date or not form.time:
        raise FormValidationError("Date and time are required")
    naive = datetime.combine(_parse_date(form.date), _parse_time(form.time))
    if tz is None:
        local = naive.astimezone()
    else:
        local = naive.replace(tzinfo=tz)
    return local.astimezone(timezone.utc)


def build_event(
    form: EventForm,
    event_id: str,
    tz: tzinfo | None = None,
    config: CalendarConfig | None = None,
) -> Event:
    """Normalize form fields into an Event carrying event_id."""
    config = config or CalendarConfig()
    title = "" if form.title is None else str(form.title).strip()
    return Event(
        id=event_id,
        title=title or config.placeholder_title,
        start=combine_start(form, tz),
        duration=coerce_duration(form.duration),
        description="" if form.description is None else str(form.description),
        attendees=parse_attendees(form.attendees),
    )


def save(
    events: list[Event],
    form: EventForm,
    editing_id: str | None = None,
    tz: tzinfo | None = None,
    config: CalendarConfig | None = None,
) -> tuple[list[Event], Event]:
    """
    Create or update an event from form input.

    With editing_id the matching event is replaced in place, keeping its id.
    An editing_id that is not in the list is added as a new event under that
    id. Without editing_id a fresh unique id is generated.

    Args:
        events: Current event list (not modified)
        form: Raw form input
        editing_id: Id of the event being edited, if any
        tz: Timezone the form's date/time are expressed in
        config: Placeholder title and defaults

    Returns:
        Tuple of (new event list, saved event)

    Raises:
        FormValidationError: If the date or time cannot be parsed
    """
    if editing_id:
        event = build_event(form, editing_id, tz, config)
        if any(e.id == editing_id for e in events):
            logger.info(f"Updated event {editing_id}")
            return [event if e.id == editing_id else e for e in events], event
        logger.info(f"Event {editing_id} not found, adding it")
        return [*events, event], event

    event = build_event(form, generate_id({e.id for e in events}), tz, config)
    logger.info(f"Created event {event.id}")
    return [*events, event], event


def delete(
    events: list[Event],
    event_id: str,
    confirm: ConfirmFn,
    prompt: str = DELETE_PROMPT,
) -> list[Event]:
    """
    Remove an event after explicit confirmation.

    Declining, or asking for an id that is not present, returns the list
    unchanged.

    Args:
        events: Current event list (not modified)
        event_id: Id to remove
        confirm: Confirmation dialog; receives the prompt, returns True to proceed
        prompt: Question shown to the user
    """
    if not confirm(prompt):
        logger.debug(f"Delete of {event_id} cancelled")
        return list(events)
    remaining = [e for e in events if e.id != event_id]
    if len(remaining) != len(events):
        logger.info(f"Deleted event {event_id}")
    return remaining
