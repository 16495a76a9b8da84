"""Base classes for calendar writers."""

from pathlib import Path
from typing import Protocol

from sharedcal.models.event import Event


class CalendarWriter(Protocol):
    """Protocol for calendar writers."""

    def write(self, events: list[Event], path: Path) -> None:
        """Write events to file path."""
        ...

    def get_extension(self) -> str:
        """Returns file extension (e.g., 'ics', 'json')."""
        ...
