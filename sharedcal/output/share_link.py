"""Share links: the whole event list embedded in a URL."""

import logging
from typing import Callable, Iterable
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from sharedcal.constants import SHARE_LINK_WARN_LENGTH, SHARE_PARAM
from sharedcal.exceptions import ClipboardError
from sharedcal.models.event import Event
from sharedcal.output.clipboard import Clipboard
from sharedcal.snapshot import decode_snapshot, encode_snapshot

logger = logging.getLogger(__name__)

PromptFn = Callable[[str, str], None]


def make_share_link(
    events: Iterable[Event],
    base_url: str,
    param: str = SHARE_PARAM,
    warn_length: int = SHARE_LINK_WARN_LENGTH,
) -> str:
    """
    Build a URL carrying a snapshot of the entire calendar.

    Other query parameters on base_url are kept; an existing snapshot
    parameter is replaced.

    The link is a copy, not a live reference. It has no size bound or expiry
    and anyone holding it can read every event, so a warning is logged once
    it grows past warn_length.

    Args:
        events: Events to embed
        base_url: Page the link should open
        param: Query parameter name
        warn_length: Link length that triggers the warning

    Returns:
        Share URL
    """
    parts = urlsplit(base_url)
    query = [
        (key, value)
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
        if key != param
    ]
    query.append((param, encode_snapshot(events)))
    link = urlunsplit(parts._replace(query=urlencode(query)))

    if len(link) > warn_length:
        logger.warning(
            f"Share link is {len(link)} characters long; some clients truncate "
            f"long URLs and the link exposes every event to whoever holds it"
        )
    return link


def parse_shared_snapshot(payload: str) -> list[Event]:
    """Decode the value of the snapshot parameter (see decode_snapshot)."""
    return decode_snapshot(payload)


def copy_share_link(
    link: str,
    clipboard: Clipboard,
    prompt: PromptFn,
) -> bool:
    """
    Put a share link on the clipboard, falling back to a manual-copy prompt.

    Args:
        link: Link to copy
        clipboard: Clipboard collaborator
        prompt: Called with (message, link) when the clipboard write fails

    Returns:
        True if the clipboard write succeeded
    """
    try:
        clipboard.write_text(link)
    except ClipboardError as e:
        logger.warning(f"Clipboard write failed: {e}")
        prompt("Copy this link manually:", link)
        return False
    return True
