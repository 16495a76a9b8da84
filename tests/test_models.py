"""Tests for Pydantic models."""

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from sharedcal.constants import PLACEHOLDER_TITLE
from sharedcal.models import CalendarState, Event, EventForm, ensure_unique_ids, sort_events
from sharedcal.models.event import coerce_duration, parse_attendees


def test_event_creation(sync_event):
    """Test basic event creation."""
    assert sync_event.title == "Sync"
    assert sync_event.duration == 30
    assert sync_event.end == datetime(2024, 3, 15, 9, 30, tzinfo=timezone.utc)


def test_event_defaults():
    """Test id, title, duration and attendee defaults."""
    event = Event(start=datetime(2024, 1, 1, tzinfo=timezone.utc))
    assert event.id
    assert event.title == PLACEHOLDER_TITLE
    assert event.duration == 60
    assert event.description == ""
    assert event.attendees == []


def test_event_blank_title_gets_placeholder():
    event = Event(title="   ", start="2024-01-01T10:00:00Z")
    assert event.title == PLACEHOLDER_TITLE


def test_event_missing_id_is_assigned():
    event = Event.model_validate({"id": None, "start": "2024-01-01T10:00:00Z"})
    assert len(event.id) == 7


def test_event_start_normalized_to_utc():
    """Test aware datetimes are converted and naive ones taken as UTC."""
    local = datetime(2024, 3, 15, 9, 0, tzinfo=ZoneInfo("Europe/Bratislava"))
    event = Event(start=local)
    assert event.start == datetime(2024, 3, 15, 8, 0, tzinfo=timezone.utc)
    assert event.start.utcoffset() == timedelta(0)

    naive = Event(start=datetime(2024, 3, 15, 9, 0))
    assert naive.start == datetime(2024, 3, 15, 9, 0, tzinfo=timezone.utc)


def test_event_serializes_unambiguous_start(sync_event):
    record = sync_event.to_record()
    assert record["start"] == "2024-03-15T09:00:00Z"
    assert Event.model_validate(record) == sync_event


def test_event_requires_valid_start():
    with pytest.raises(ValidationError):
        Event(title="No start")
    with pytest.raises(ValidationError):
        Event(title="Bad start", start="not a date")


@pytest.mark.parametrize(
    "raw, expected",
    [
        (30, 30),
        ("45", 45),
        ("30.7", 30),
        ("abc", 60),
        ("", 60),
        (None, 60),
        (0, 60),
        ("-5", 60),
        (True, 60),
        ("10000000000", 60),
        (527040, 527040),
        (527041, 60),
    ],
)
def test_coerce_duration(raw, expected):
    assert coerce_duration(raw) == expected


def test_parse_attendees():
    assert parse_attendees(" ana@example.com, ,peter@example.com ,") == [
        "ana@example.com",
        "peter@example.com",
    ]
    assert parse_attendees(["  x@example.com ", ""]) == ["x@example.com"]
    assert parse_attendees(None) == []


def test_ensure_unique_ids_reassigns_duplicates():
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    events = [
        Event(id="same", title="A", start=start),
        Event(id="same", title="B", start=start),
        Event(id="other", title="C", start=start),
    ]
    result = ensure_unique_ids(events)
    assert result[0].id == "same"
    assert result[1].id not in {"same", "other"}
    assert result[2].id == "other"
    assert [e.title for e in result] == ["A", "B", "C"]


def test_sort_events_by_start():
    later = Event(title="Later", start="2024-01-01T12:00:00Z")
    earlier = Event(title="Earlier", start="2024-01-01T08:00:00Z")
    assert sort_events([later, earlier]) == [earlier, later]


def test_event_form_defaults():
    form = EventForm()
    assert form.time == "09:00"
    assert form.duration == 60
    assert form.attendees == ""


def test_calendar_state_find(sync_event):
    state = CalendarState(events=[sync_event])
    assert state.find("sync001") == sync_event
    assert state.find("missing") is None
    assert state.modal_open is False
