"""Rich-based event renderer for terminal display."""

from datetime import date, datetime, tzinfo

from rich.console import Console
from rich.table import Table
from rich.text import Text

from sharedcal.constants import WEEKDAY_LABELS
from sharedcal.grid import DayCell, weeks
from sharedcal.models.event import Event
from sharedcal_cli.display.console import console as shared_console
from sharedcal_cli.display.formatters import (
    format_day_label,
    format_duration,
    format_time_range,
    truncate,
)

CELL_TITLE_WIDTH = 12


class RichEventRenderer:
    """Render calendar events using Rich for terminal display.

    Uses neutral hierarchy-based colors:
    - Headers: bold
    - Day labels: cyan
    - Times: blue
    - Event titles: default
    - Ids, out-of-month days and metadata: dim
    """

    def __init__(self, console: Console | None = None, tz: tzinfo | None = None):
        """Initialize the renderer.

        Args:
            console: Rich Console instance (uses shared console if not provided).
            tz: Display timezone (system local if None).
        """
        self.console = console or shared_console
        self.tz = tz

    def render_month(self, view_date: date, cells: list[DayCell]) -> None:
        """Render the 6-week month grid as a table."""
        table = Table(
            title=view_date.strftime("%B %Y"),
            show_header=True,
            header_style="bold",
            show_lines=True,
            expand=True,
        )
        for label in WEEKDAY_LABELS:
            table.add_column(label, vertical="top", ratio=1)

        for week in weeks(cells):
            table.add_row(*(self._render_cell(cell) for cell in week))

        self.console.print(table)

    def render_list(
        self,
        events: list[Event],
        title: str | None = None,
        subtitle: str | None = None,
    ) -> None:
        """Render events as a flat list."""
        if not events:
            self.render_empty()
            return

        self._print_header(title, subtitle)
        self.console.print()

        for event in events:
            self._render_list_event(event)

        self._print_footer(len(events))

    def render_agenda(
        self,
        events: list[Event],
        title: str | None = None,
        subtitle: str | None = None,
    ) -> None:
        """Render events grouped by local day."""
        if not events:
            self.render_empty()
            return

        self._print_header(title, subtitle)

        today = datetime.now(self.tz).date()
        current_day = None
        for event in events:
            event_day = event.start.astimezone(self.tz).date()
            if event_day != current_day:
                current_day = event_day
                self.console.print(f"\n[cyan]{format_day_label(event_day, today)}[/cyan]")
            line = Text("  ")
            line.append(f"{format_time_range(event, self.tz):<14}", style="blue")
            line.append(event.title)
            line.append(f"  {event.id}", style="dim")
            self.console.print(line)

        self._print_footer(len(events))

    def render_event(self, event: Event) -> None:
        """Render all fields of a single event."""
        start = event.start.astimezone(self.tz)
        self.console.print(f"[bold]{event.title}[/bold] [dim]({event.id})[/dim]")
        self.console.print(
            f"  {start:%Y-%m-%d} {format_time_range(event, self.tz)}"
            f" ({format_duration(event.duration)})"
        )
        if event.attendees:
            self.console.print(f"  Attendees: {', '.join(event.attendees)}")
        if event.description:
            self.console.print(f"  [dim]{event.description}[/dim]")

    def render_empty(self, message: str | None = None) -> None:
        msg = message or "No events found"
        self.console.print(f"\n[dim]{msg}[/dim]\n")

    def _print_header(self, title: str | None, subtitle: str | None) -> None:
        self.console.print()
        self.console.print("━" * 40)
        if title:
            header_text = f"  {title}"
            if subtitle:
                header_text += f" [dim]({subtitle})[/dim]"
            self.console.print(f"[bold]{header_text}[/bold]")
        self.console.print("━" * 40)

    def _print_footer(self, count: int) -> None:
        self.console.print()
        self.console.print("─" * 40)
        event_word = "event" if count == 1 else "events"
        self.console.print(f"[dim]{count} {event_word}[/dim]")
        self.console.print()

    def _render_cell(self, cell: DayCell) -> Text:
        text = Text()
        if cell.is_today:
            text.append(f"{cell.day.day:>2}", style="bold reverse")
        elif cell.in_month:
            text.append(f"{cell.day.day:>2}", style="bold")
        else:
            text.append(f"{cell.day.day:>2}", style="dim")

        for event in cell.visible_events:
            start = event.start.astimezone(self.tz)
            text.append(f"\n{start:%H:%M} ", style="blue")
            text.append(truncate(event.title, CELL_TITLE_WIDTH))
        if cell.overflow:
            text.append(f"\n+{cell.overflow} more", style="dim")
        return text

    def _render_list_event(self, event: Event) -> None:
        """Render a single event in list format."""
        start = event.start.astimezone(self.tz)

        line = Text()
        line.append(f"{start:%Y-%m-%d}  ", style="dim")
        line.append(f"{start:%a}  ", style="cyan")
        line.append(f"{format_time_range(event, self.tz):<14}", style="blue")
        line.append(event.title)
        if event.attendees:
            count = len(event.attendees)
            line.append(f" ({count} attendee{'s' if count != 1 else ''})", style="italic dim")
        line.append(f"  {event.id}", style="dim")

        self.console.print(line)
