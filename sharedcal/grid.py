"""Month grid building and per-day event selection."""

import calendar
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta, tzinfo
from typing import Iterable

from sharedcal.constants import GRID_CELLS, MAX_EVENTS_PER_CELL
from sharedcal.models.event import Event, sort_events


@dataclass
class DayCell:
    """One of the 42 cells of the month view."""

    day: date
    in_month: bool
    is_today: bool
    events: list[Event] = field(default_factory=list)

    @property
    def visible_events(self) -> list[Event]:
        """Events that fit in the cell."""
        return self.events[:MAX_EVENTS_PER_CELL]

    @property
    def overflow(self) -> int:
        """Number of events hidden behind "+N more"."""
        return max(0, len(self.events) - MAX_EVENTS_PER_CELL)


def _as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def build_month_grid(reference: date | datetime) -> list[date]:
    """
    Build the 6-week, Sunday-first grid for the month containing reference.

    Args:
        reference: Any day in the month to show

    Returns:
        42 consecutive dates starting at the Sunday on or before the 1st
    """
    first = _as_date(reference).replace(day=1)
    # date.weekday(): Monday=0 ... Sunday=6
    offset = (first.weekday() + 1) % 7
    grid_start = first - timedelta(days=offset)
    return [grid_start + timedelta(days=i) for i in range(GRID_CELLS)]


def day_bounds(day: date, tz: tzinfo | None = None) -> tuple[datetime, datetime]:
    """Local midnight of day and of the following day, as aware datetimes.

    With tz None the system local zone is used.
    """
    next_day = day + timedelta(days=1)
    if tz is None:
        return (
            datetime.combine(day, time.min).astimezone(),
            datetime.combine(next_day, time.min).astimezone(),
        )
    return (
        datetime.combine(day, time.min, tzinfo=tz),
        datetime.combine(next_day, time.min, tzinfo=tz),
    )


def events_for_day(
    day: date | datetime, events: Iterable[Event], tz: tzinfo | None = None
) -> list[Event]:
    """
    Select events starting on a given local day.

    The window is [midnight, next midnight): an event at exactly the next
    midnight belongs to the following day.

    Args:
        day: Day to select
        events: Events to filter
        tz: Local timezone (system local if None)

    Returns:
        Matching events sorted by start
    """
    day_start, day_end = day_bounds(_as_date(day), tz)
    return sort_events(e for e in events if day_start <= e.start < day_end)


def shift_month(reference: date | datetime, months: int) -> date:
    """
    Move by whole calendar months.

    The day of month is kept when the target month has it, otherwise clamped
    to the target month's last day (Jan 31 + 1 month -> Feb 28/29).
    """
    ref = _as_date(reference)
    years, month_index = divmod(ref.month - 1 + months, 12)
    year = ref.year + years
    month = month_index + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(ref.day, last_day))


def prev_month(reference: date | datetime) -> date:
    return shift_month(reference, -1)


def next_month(reference: date | datetime) -> date:
    return shift_month(reference, 1)


def is_in_month(day: date, reference: date | datetime) -> bool:
    """True if day falls in the same month as reference."""
    ref = _as_date(reference)
    return day.year == ref.year and day.month == ref.month


def visible_range(
    reference: date | datetime, tz: tzinfo | None = None
) -> tuple[datetime, datetime]:
    """
    Time window shown by the grid for reference's month.

    Returns:
        Local midnight of the first cell and of the day after the last cell
    """
    grid = build_month_grid(reference)
    return day_bounds(grid[0], tz)[0], day_bounds(grid[-1], tz)[1]


def parse_month(value: str) -> date:
    """Parse ``YYYY-MM`` (or a full ``YYYY-MM-DD``) into a reference date."""
    try:
        if len(value) == 7:
            return datetime.strptime(value, "%Y-%m").date()
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise ValueError(f"Invalid month: {value!r}. Use YYYY-MM.")


def build_day_cells(
    reference: date | datetime,
    events: Iterable[Event],
    tz: tzinfo | None = None,
    today: date | None = None,
) -> list[DayCell]:
    """Grid dates decorated with month membership, today flag and events."""
    window_start, window_end = visible_range(reference, tz)
    events = [e for e in events if window_start <= e.start < window_end]
    if today is None:
        today = datetime.now(tz).date()
    return [
        DayCell(
            day=day,
            in_month=is_in_month(day, reference),
            is_today=day == today,
            events=events_for_day(day, events, tz),
        )
        for day in build_month_grid(reference)
    ]


def weeks(cells: list) -> list[list]:
    """Split a 42-item grid into 6 rows of 7."""
    return [cells[i : i + 7] for i in range(0, len(cells), 7)]
