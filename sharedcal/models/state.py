"""UI state for a calendar session."""

from datetime import date

from pydantic import BaseModel, Field

from sharedcal.models.event import Event
from sharedcal.models.form import EventForm


class CalendarState(BaseModel):
    """Everything the month view needs to render.

    Transitions never mutate an instance; they return ``model_copy(update=...)``.
    """

    events: list[Event] = Field(default_factory=list)
    view_date: date = Field(default_factory=date.today)
    modal_open: bool = False
    editing_id: str | None = None
    form: EventForm = Field(default_factory=EventForm)

    def find(self, event_id: str) -> Event | None:
        """Look up an event by id."""
        for event in self.events:
            if event.id == event_id:
                return event
        return None
