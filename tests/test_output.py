"""Tests for output layer."""

import json
from datetime import datetime, timezone
from urllib.parse import unquote, urlsplit
from zoneinfo import ZoneInfo

import pytest
from icalendar import Calendar as ICalendar

from sharedcal import form as controller
from sharedcal.config import CalendarConfig
from sharedcal.models.event import Event
from sharedcal.models.form import EventForm
from sharedcal.output.clipboard import CommandClipboard
from sharedcal.exceptions import ClipboardError
from sharedcal.output.ics_writer import ICSWriter, export_calendar_document
from sharedcal.output.json_writer import JSONWriter
from sharedcal.output.mail import compose_invite

NOW = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def sync_from_form(tz) -> Event:
    form = EventForm(title="Sync", date="2024-03-15", time="09:00", duration=30)
    _, event = controller.save([], form, tz=tz)
    return event


def test_ics_document_utc():
    """Sync on 2024-03-15 09:00 UTC for 30 minutes."""
    event = sync_from_form(ZoneInfo("UTC"))
    content = ICSWriter().to_ical([event], now=NOW)

    assert b"BEGIN:VCALENDAR" in content
    assert b"VERSION:2.0" in content
    assert b"BEGIN:VEVENT" in content
    assert b"DTSTART:20240315T090000Z" in content
    assert b"DTEND:20240315T093000Z" in content
    assert b"DTSTAMP:20240301T120000Z" in content
    assert b"SUMMARY:Sync" in content
    assert f"UID:{event.id}@sharedcalendar.local".encode() in content
    assert content.rstrip().endswith(b"END:VCALENDAR")


def test_ics_document_local_to_utc():
    event = sync_from_form(ZoneInfo("Europe/Bratislava"))
    content = ICSWriter().to_ical([event], now=NOW)
    assert b"DTSTART:20240315T080000Z" in content
    assert b"DTEND:20240315T083000Z" in content


def test_ics_escapes_text_and_lists_attendees():
    event = Event(
        id="esc0001",
        title="Lunch, then talk",
        start="2024-03-15T12:00:00Z",
        description="line one\nline two",
        attendees=["ana@example.com", "peter@example.com"],
    )
    content = ICSWriter().to_ical([event], now=NOW)

    assert b"SUMMARY:Lunch\\, then talk" in content
    assert b"DESCRIPTION:line one\\nline two" in content
    assert b"ATTENDEE:mailto:ana@example.com" in content
    assert b"ATTENDEE:mailto:peter@example.com" in content


def test_ics_optional_fields_omitted():
    event = Event(id="bare001", title="Bare", start="2024-03-15T12:00:00Z")
    content = ICSWriter().to_ical([event], now=NOW)
    assert b"DESCRIPTION" not in content
    assert b"ATTENDEE" not in content


def test_ics_parses_back(sync_event):
    content = ICSWriter().to_ical([sync_event], now=NOW)
    cal = ICalendar.from_ical(content)
    (vevent,) = cal.walk("VEVENT")

    assert str(vevent["SUMMARY"]) == "Sync"
    assert vevent.decoded("DTSTART") == sync_event.start
    assert vevent.decoded("DTEND") == sync_event.end
    assert str(cal["PRODID"]) == "-//SharedCalendar/1.0//EN"


def test_ics_uses_config_domain(sync_event):
    writer = ICSWriter(CalendarConfig(uid_domain="cal.example.org"))
    assert writer.uid_for(sync_event) == "sync001@cal.example.org"


def test_export_calendar_document_text(sync_event):
    text = export_calendar_document([sync_event], now=NOW)
    assert isinstance(text, str)
    assert text.count("BEGIN:VEVENT") == 1


def test_ics_writer_write_file(tmp_path, sync_event):
    path = tmp_path / "shared-calendar.ics"
    ICSWriter().write([sync_event], path)
    assert b"DTSTART:20240315T090000Z" in path.read_bytes()


def test_ics_writer_get_extension():
    assert ICSWriter().get_extension() == "ics"


def test_json_writer(tmp_path, sync_event):
    path = tmp_path / "events.json"
    JSONWriter().write([sync_event], path)
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data == [sync_event.to_record()]
    assert JSONWriter().get_extension() == "json"


def test_compose_invite(sync_event):
    draft = compose_invite(sync_event, ZoneInfo("UTC"))

    assert draft.recipients == ["ana@example.com", "peter@example.com"]
    assert draft.subject == "Sync"
    assert draft.body.startswith("Sync\n")
    assert "09:00" in draft.body
    assert "(30 min)" in draft.body
    assert draft.body.endswith("\n\nWeekly sync")

    parts = urlsplit(draft.url)
    assert parts.scheme == "mailto"
    assert parts.path == "ana@example.com,peter@example.com"
    query = dict(item.split("=", 1) for item in parts.query.split("&"))
    assert unquote(query["subject"]) == "Sync"
    assert unquote(query["body"]) == draft.body
    assert "\n" not in draft.url
    assert " " not in draft.url


def test_compose_invite_without_attendees():
    event = Event(title="Solo & quiet", start="2024-03-15T09:00:00Z")
    draft = compose_invite(event, ZoneInfo("UTC"))
    assert draft.recipients == []
    assert draft.url.startswith("mailto:?subject=Solo%20%26%20quiet&body=")


def test_command_clipboard_without_commands():
    clipboard = CommandClipboard(commands=[("definitely-not-a-clipboard-tool",)])
    with pytest.raises(ClipboardError):
        clipboard.write_text("hello")
