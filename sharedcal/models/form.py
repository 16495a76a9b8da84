"""Raw event form fields as entered by the user."""

from typing import Any

from pydantic import BaseModel

from sharedcal.constants import DEFAULT_DURATION, DEFAULT_TIME


class EventForm(BaseModel):
    """Form state for the create/edit dialog.

    Values are kept as entered, including nulls and numbers from JSON
    clients; normalization happens on save.
    """

    title: Any = ""
    date: Any = ""  # YYYY-MM-DD
    time: Any = DEFAULT_TIME  # HH:MM
    duration: Any = DEFAULT_DURATION
    description: Any = ""
    attendees: Any = ""  # comma-separated emails, or a list
