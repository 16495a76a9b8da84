"""Pure formatting functions for display output."""

from datetime import date, tzinfo

from sharedcal.models.event import Event


def format_time_range(event: Event, tz: tzinfo | None = None) -> str:
    """Format local start and end, e.g. "09:00–09:30".

    The end carries its date when the event runs past midnight.
    """
    start = event.start.astimezone(tz)
    end = event.end.astimezone(tz)
    if end.date() != start.date():
        return f"{start:%H:%M}–{end:%a %H:%M}"
    return f"{start:%H:%M}–{end:%H:%M}"


def format_duration(minutes: int) -> str:
    """Format minutes as "45m", "1h" or "1h 30m"."""
    hours, mins = divmod(minutes, 60)
    if not hours:
        return f"{mins}m"
    if not mins:
        return f"{hours}h"
    return f"{hours}h {mins}m"


def format_day_label(day: date, today: date) -> str:
    """Format a date as a human-readable day label.

    Returns:
        Formatted string like "TODAY (Thu Jan 16)" or "Mon Jan 19".
    """
    delta = (day - today).days

    if delta == 0:
        return f"TODAY ({day.strftime('%a %b %d')})"
    elif delta == 1:
        return f"Tomorrow ({day.strftime('%a %b %d')})"
    elif delta == -1:
        return f"Yesterday ({day.strftime('%a %b %d')})"
    else:
        return day.strftime("%a %b %d")


def truncate(text: str, width: int) -> str:
    """Cut text to width, marking the cut with an ellipsis."""
    if len(text) <= width:
        return text
    return text[: max(0, width - 1)] + "…"
