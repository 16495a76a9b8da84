"""Event renderer protocol for display abstraction."""

from datetime import date
from typing import Protocol

from sharedcal.grid import DayCell
from sharedcal.models.event import Event


class EventRenderer(Protocol):
    """Protocol for rendering calendar events.

    Implementations can render to the terminal, plain text or HTML while
    keeping a consistent interface.
    """

    def render_month(self, view_date: date, cells: list[DayCell]) -> None:
        """Render the 6-week month grid.

        Args:
            view_date: Any day in the month being shown.
            cells: The 42 grid cells, Sunday first.
        """
        ...

    def render_list(
        self,
        events: list[Event],
        title: str | None = None,
        subtitle: str | None = None,
    ) -> None:
        """Render events as a flat list, one per line.

        Args:
            events: Events to render (should be sorted by start).
            title: Optional title for the display header.
            subtitle: Optional subtitle.
        """
        ...

    def render_empty(self, message: str | None = None) -> None:
        """Render an empty state message."""
        ...
