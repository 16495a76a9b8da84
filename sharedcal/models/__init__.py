"""Pydantic models for the shared calendar."""

from sharedcal.models.event import Event, ensure_unique_ids, sort_events
from sharedcal.models.form import EventForm
from sharedcal.models.state import CalendarState

__all__ = [
    "Event",
    "EventForm",
    "CalendarState",
    "ensure_unique_ids",
    "sort_events",
]
