"""Reversible text-safe encoding of the full event list."""

import base64
import binascii
import json
from typing import Iterable
from urllib.parse import parse_qs, unquote, urlsplit

from pydantic import ValidationError

from sharedcal.exceptions import SnapshotDecodeError
from sharedcal.models.event import Event, ensure_unique_ids


def encode_snapshot(events: Iterable[Event]) -> str:
    """
    Encode events as URL-safe base64 of their JSON records.

    Padding is dropped, so the result can sit in a query string unescaped.
    """
    payload = json.dumps(
        [event.to_record() for event in events],
        ensure_ascii=False,
        separators=(",", ":"),
    )
    encoded = base64.urlsafe_b64encode(payload.encode("utf-8")).decode("ascii")
    return encoded.rstrip("=")


def _b64decode(payload: str) -> bytes:
    """Decode either base64 alphabet, with or without padding."""
    # Query-string parsing turns '+' into ' ' for standard-alphabet payloads
    cleaned = payload.strip().replace(" ", "+")
    cleaned += "=" * (-len(cleaned) % 4)
    return base64.b64decode(cleaned, altchars=b"-_", validate=True)


def decode_snapshot(payload: str) -> list[Event]:
    """
    Decode a snapshot payload back into events.

    Accepts payloads produced by encode_snapshot and the older browser form
    (standard base64 of percent-encoded JSON). Missing ids are assigned.

    Raises:
        SnapshotDecodeError: If the payload is not a list of event records
    """
    if not payload or not payload.strip():
        raise SnapshotDecodeError("Empty snapshot payload")

    try:
        text = _b64decode(payload).decode("utf-8")
    except (binascii.Error, ValueError) as e:
        raise SnapshotDecodeError(f"Snapshot is not valid base64 text: {e}") from e

    if text.startswith("%"):
        text = unquote(text)

    try:
        data = json.loads(text)
    except ValueError as e:
        raise SnapshotDecodeError(f"Snapshot is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise SnapshotDecodeError(
            f"Snapshot must be a list of events, got {type(data).__name__}"
        )

    try:
        events = [Event.model_validate(record) for record in data]
    except ValidationError as e:
        raise SnapshotDecodeError(f"Snapshot contains invalid events: {e}") from e

    return ensure_unique_ids(events)


def shared_payload(url: str | None, param: str) -> str | None:
    """Extract the snapshot query parameter from a URL, if present."""
    if not url:
        return None
    query = parse_qs(urlsplit(url).query, keep_blank_values=True)
    values = query.get(param)
    if not values:
        return None
    return values[0]
