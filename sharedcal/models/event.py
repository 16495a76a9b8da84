"""Event model with Pydantic v2 validation."""

from datetime import datetime, timedelta, timezone
from typing import Iterable

from pydantic import BaseModel, Field, field_validator

from sharedcal.constants import DEFAULT_DURATION, MAX_DURATION, PLACEHOLDER_TITLE
from sharedcal.utils import generate_id


def coerce_duration(value) -> int:
    """Coerce raw duration input to positive whole minutes.

    Anything that is not a positive number, or exceeds MAX_DURATION, falls
    back to DEFAULT_DURATION.
    """
    if value is None or isinstance(value, bool):
        return DEFAULT_DURATION
    try:
        minutes = int(float(str(value).strip()))
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_DURATION
    if minutes <= 0 or minutes > MAX_DURATION:
        return DEFAULT_DURATION
    return minutes


def parse_attendees(value) -> list[str]:
    """Split a comma-separated string (or list) into trimmed addresses."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        parts = [str(item) for item in value if item is not None]
    else:
        parts = str(value).split(",")
    return [part.strip() for part in parts if part and part.strip()]


class Event(BaseModel):
    """A single calendar event.

    ``start`` is always timezone-aware UTC, so the serialized form is
    unambiguous (``2024-03-15T09:00:00Z``).
    """

    id: str = Field(default_factory=generate_id)
    title: str = PLACEHOLDER_TITLE
    start: datetime
    duration: int = DEFAULT_DURATION
    description: str = ""
    attendees: list[str] = Field(default_factory=list)

    @field_validator("id", mode="before")
    @classmethod
    def default_id(cls, v):
        """Assign an id when the record has none."""
        if v is None or not str(v).strip():
            return generate_id()
        return str(v)

    @field_validator("title", mode="before")
    @classmethod
    def default_title(cls, v):
        if v is None or not str(v).strip():
            return PLACEHOLDER_TITLE
        return str(v)

    @field_validator("start")
    @classmethod
    def normalize_start(cls, v: datetime) -> datetime:
        """Store start as UTC. Naive values are taken to be UTC already."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

    @field_validator("duration", mode="before")
    @classmethod
    def validate_duration(cls, v):
        return coerce_duration(v)

    @field_validator("description", mode="before")
    @classmethod
    def default_description(cls, v):
        return "" if v is None else str(v)

    @field_validator("attendees", mode="before")
    @classmethod
    def split_attendees(cls, v):
        return parse_attendees(v)

    @property
    def end(self) -> datetime:
        """Start plus duration."""
        return self.start + timedelta(minutes=self.duration)

    def to_record(self) -> dict:
        """JSON-ready dict in the persisted shape."""
        return self.model_dump(mode="json")


def ensure_unique_ids(events: Iterable[Event]) -> list[Event]:
    """Return events with duplicate ids replaced by fresh ones.

    The first event holding an id keeps it; later duplicates are reassigned.
    """
    events = list(events)
    taken = {event.id for event in events}
    seen: set[str] = set()
    result = []
    for event in events:
        if event.id in seen:
            new_id = generate_id(taken)
            taken.add(new_id)
            event = event.model_copy(update={"id": new_id})
        seen.add(event.id)
        result.append(event)
    return result


def sort_events(events: Iterable[Event]) -> list[Event]:
    """Display order: ascending start. Ties keep insertion order."""
    return sorted(events, key=lambda e: e.start)
