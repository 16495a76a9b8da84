"""CLI setup functions for writers."""

from sharedcal.config import CalendarConfig
from sharedcal.exceptions import ExportError
from sharedcal.output.base import CalendarWriter
from sharedcal.output.ics_writer import ICSWriter
from sharedcal.output.json_writer import JSONWriter


def setup_writer(format: str, config: CalendarConfig | None = None) -> CalendarWriter:
    """Get writer for format."""
    if format == "ics":
        return ICSWriter(config)
    elif format == "json":
        return JSONWriter()
    else:
        raise ExportError(f"Unsupported output format: {format}")
