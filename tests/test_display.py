"""Tests for terminal display helpers."""

from datetime import date, timezone

from rich.console import Console

from sharedcal.grid import build_day_cells
from sharedcal.models.event import Event
from sharedcal_cli.display import RichEventRenderer
from sharedcal_cli.display.formatters import (
    format_day_label,
    format_duration,
    format_time_range,
    truncate,
)


def make_renderer():
    console = Console(record=True, width=120, color_system=None)
    return RichEventRenderer(console=console, tz=timezone.utc), console


def test_format_time_range(sync_event):
    """Test same-day and past-midnight ranges."""
    assert format_time_range(sync_event, timezone.utc) == "09:00–09:30"

    late = Event(title="Late", start="2024-03-15T23:30:00Z", duration=60)
    assert format_time_range(late, timezone.utc) == "23:30–Sat 00:30"


def test_format_duration():
    """Test minutes formatting."""
    assert format_duration(45) == "45m"
    assert format_duration(60) == "1h"
    assert format_duration(90) == "1h 30m"


def test_format_day_label():
    """Test relative day labels."""
    today = date(2024, 3, 15)
    assert format_day_label(today, today) == "TODAY (Fri Mar 15)"
    assert format_day_label(date(2024, 3, 16), today) == "Tomorrow (Sat Mar 16)"
    assert format_day_label(date(2024, 3, 14), today) == "Yesterday (Thu Mar 14)"
    assert format_day_label(date(2024, 3, 20), today) == "Wed Mar 20"


def test_truncate():
    """Test truncation with ellipsis."""
    assert truncate("Sync", 12) == "Sync"
    assert truncate("Quarterly planning", 12) == "Quarterly p…"


def test_render_month(sync_event):
    """Test the month grid shows title, weekdays and events."""
    renderer, console = make_renderer()
    cells = build_day_cells(
        date(2024, 3, 1), [sync_event], timezone.utc, today=date(2024, 3, 15)
    )
    renderer.render_month(date(2024, 3, 1), cells)

    text = console.export_text()
    assert "March 2024" in text
    assert "Sun" in text
    assert "Sat" in text
    assert "09:00 Sync" in text


def test_render_month_overflow():
    """Test the "+N more" line for busy days."""
    events = [
        Event(id=f"e{i}", title=f"E{i}", start=f"2024-03-15T0{i}:00:00Z")
        for i in range(6)
    ]
    renderer, console = make_renderer()
    cells = build_day_cells(date(2024, 3, 1), events, timezone.utc, today=date(2024, 3, 1))
    renderer.render_month(date(2024, 3, 1), cells)
    assert "+2 more" in console.export_text()


def test_render_list(sync_event):
    """Test list rendering with footer count."""
    renderer, console = make_renderer()
    renderer.render_list([sync_event], title="Shared Calendar")

    text = console.export_text()
    assert "Shared Calendar" in text
    assert "Sync" in text
    assert "1 event" in text


def test_render_empty():
    """Test the empty state."""
    renderer, console = make_renderer()
    renderer.render_list([])
    assert "No events found" in console.export_text()


def test_render_event(sync_event):
    """Test the single-event detail view."""
    renderer, console = make_renderer()
    renderer.render_event(sync_event)

    text = console.export_text()
    assert "Sync (sync001)" in text
    assert "2024-03-15 09:00–09:30 (30m)" in text
    assert "Attendees: ana@example.com, peter@example.com" in text
    assert "Weekly sync" in text
