"""Mail-link invite composer."""

from dataclasses import dataclass
from datetime import tzinfo
from urllib.parse import quote

from sharedcal.models.event import Event


@dataclass(frozen=True)
class MailDraft:
    """A draft for the default mail client."""

    to: str
    subject: str
    body: str

    @property
    def recipients(self) -> list[str]:
        return [addr for addr in self.to.split(",") if addr]

    @property
    def url(self) -> str:
        """The ``mailto:`` link with every part percent-encoded."""
        return (
            f"mailto:{quote(self.to, safe='@,')}"
            f"?subject={quote(self.subject, safe='')}"
            f"&body={quote(self.body, safe='')}"
        )


def format_local_start(event: Event, tz: tzinfo | None = None) -> str:
    """Start time in the local zone, e.g. ``Fri 15 Mar 2024 09:00 CET``."""
    local = event.start.astimezone(tz)
    return f"{local.strftime('%a %d %b %Y %H:%M')} {local.tzname() or ''}".rstrip()


def compose_invite(event: Event, tz: tzinfo | None = None) -> MailDraft:
    """
    Compose an invite for a single event.

    Args:
        event: Event to invite people to
        tz: Zone used to show the start time (system local if None)

    Returns:
        MailDraft with attendees as recipients (empty if none)
    """
    body = (
        f"{event.title}\n"
        f"{format_local_start(event, tz)} ({event.duration} min)\n\n"
        f"{event.description}"
    )
    return MailDraft(to=",".join(event.attendees), subject=event.title, body=body)
