"""Display module for rendering calendar output.

- EventRenderer: Protocol for event rendering
- RichEventRenderer: Rich-based month grid, list and agenda views
- console: Shared Rich console instance
"""

from sharedcal_cli.display.console import console
from sharedcal_cli.display.event_renderer import EventRenderer
from sharedcal_cli.display.formatters import (
    format_day_label,
    format_duration,
    format_time_range,
)
from sharedcal_cli.display.rich_renderer import RichEventRenderer

__all__ = [
    "console",
    "EventRenderer",
    "RichEventRenderer",
    "format_day_label",
    "format_duration",
    "format_time_range",
]
