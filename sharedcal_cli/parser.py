"""Typer application and command routing."""

import logging

import typer
from typing_extensions import Annotated

from sharedcal_cli import setup_logging
from sharedcal_cli.commands import (
    add,
    day,
    delete,
    edit,
    export,
    import_,
    invite,
    ls,
    serve,
    share,
    show,
)
from sharedcal_cli.context import CLIContext, set_context

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Shared calendar: month view, events, share links and ICS export.",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show info messages"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only show errors"),
    ] = False,
) -> None:
    """Set up logging and the shared context for every command."""
    ctx = CLIContext(verbose=verbose, quiet=quiet)
    setup_logging(verbose=verbose, quiet=quiet, config=ctx.config)
    set_context(ctx)


app.command("show")(show)
app.command("day")(day)
app.command("ls")(ls)
app.command("add")(add)
app.command("edit")(edit)
app.command("delete")(delete)
app.command("share")(share)
app.command("import")(import_)
app.command("export")(export)
app.command("invite")(invite)
app.command("serve")(serve)
