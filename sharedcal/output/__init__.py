"""Output layer: calendar documents, share links and invites."""

from sharedcal.output.base import CalendarWriter
from sharedcal.output.clipboard import Clipboard, CommandClipboard
from sharedcal.output.ics_writer import ICSWriter, export_calendar_document
from sharedcal.output.json_writer import JSONWriter
from sharedcal.output.mail import MailDraft, compose_invite
from sharedcal.output.share_link import (
    copy_share_link,
    make_share_link,
    parse_shared_snapshot,
)

__all__ = [
    "CalendarWriter",
    "Clipboard",
    "CommandClipboard",
    "ICSWriter",
    "JSONWriter",
    "MailDraft",
    "compose_invite",
    "export_calendar_document",
    "copy_share_link",
    "make_share_link",
    "parse_shared_snapshot",
]
