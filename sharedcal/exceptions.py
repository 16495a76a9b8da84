"""Exception hierarchy for calendar operations."""


class CalendarError(Exception):
    """Base exception for calendar operations."""

    pass


class FormValidationError(CalendarError):
    """Form input cannot be turned into an event (missing or bad date/time)."""

    pass


class SnapshotDecodeError(CalendarError):
    """Shared snapshot payload is malformed."""

    pass


class StorageError(CalendarError):
    """Persistent key/value store could not be written."""

    pass


class ClipboardError(CalendarError):
    """Clipboard write failed."""

    pass


class ExportError(CalendarError):
    """Error during calendar export."""

    pass


class EventNotFoundError(CalendarError):
    """No event with the requested id."""

    pass
