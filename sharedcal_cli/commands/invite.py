"""Compose a mail invite for an event."""

import logging

import typer
from typing_extensions import Annotated

from sharedcal_cli.context import get_context
from sharedcal_cli.display import console
from sharedcal_cli.utils import require_event

logger = logging.getLogger(__name__)


def invite(
    event_id: Annotated[
        str,
        typer.Argument(help="Id of the event"),
    ],
    open_client: Annotated[
        bool,
        typer.Option("--open", help="Open the draft in the default mail client"),
    ] = False,
) -> None:
    """Print a mailto: link inviting the event's attendees."""
    ctx = get_context()
    session = ctx.session

    require_event(session, event_id)
    draft = session.invite(event_id)

    if not draft.recipients:
        logger.warning("Event has no attendees; the draft has no recipients")

    console.print(draft.url, soft_wrap=True)
    if open_client:
        typer.launch(draft.url)
