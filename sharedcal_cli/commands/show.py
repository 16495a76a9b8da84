"""Display the month grid or a single day."""

import logging

import typer
from typing_extensions import Annotated

from sharedcal.grid import parse_month
from sharedcal_cli.context import get_context
from sharedcal_cli.display import EventRenderer, RichEventRenderer
from sharedcal_cli.utils import parse_date_arg

logger = logging.getLogger(__name__)


def show(
    month: Annotated[
        str | None,
        typer.Option("--month", "-m", help="Month to show (YYYY-MM), default current"),
    ] = None,
    prev: Annotated[
        bool,
        typer.Option("--prev", help="Show the month before --month"),
    ] = False,
    next_: Annotated[
        bool,
        typer.Option("--next", help="Show the month after --month"),
    ] = False,
) -> None:
    """Display the month grid.

    Examples:
        sharedcal show                    # Current month
        sharedcal show --month 2024-03    # March 2024
        sharedcal show --next             # Next month
    """
    ctx = get_context()
    session = ctx.session

    if month:
        try:
            session.go_to(parse_month(month))
        except ValueError as e:
            raise typer.BadParameter(str(e))
    if prev:
        session.prev_month()
    if next_:
        session.next_month()

    renderer: EventRenderer = RichEventRenderer(tz=session.tz)
    renderer.render_month(session.state.view_date, session.day_cells())


def day(
    target_date: Annotated[
        str,
        typer.Argument(help="Day to show (YYYY-MM-DD)"),
    ],
) -> None:
    """List the events of one day, earliest first."""
    ctx = get_context()
    session = ctx.session

    target = parse_date_arg(target_date)
    events = session.events_for_day(target)
    renderer: EventRenderer = RichEventRenderer(tz=session.tz)
    renderer.render_list(events, title=target.strftime("%a %b %d, %Y"))
