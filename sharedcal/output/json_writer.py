"""JSON file writer for event lists."""

import json
from pathlib import Path

from sharedcal.exceptions import ExportError
from sharedcal.models.event import Event


class JSONWriter:
    """Writer for JSON event files (same shape as local storage)."""

    def to_json(self, events: list[Event]) -> str:
        return json.dumps(
            [event.to_record() for event in events], ensure_ascii=False, indent=2
        )

    def write(self, events: list[Event], path: Path) -> None:
        """Write events to JSON file."""
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(self.to_json(events))
        except OSError as e:
            raise ExportError(f"Failed to write {path}: {e}") from e

    def get_extension(self) -> str:
        """Returns file extension."""
        return "json"
