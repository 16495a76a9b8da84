"""Run the web calendar."""

import logging

import typer
from typing_extensions import Annotated

from sharedcal import create_app
from sharedcal_cli.context import get_context

logger = logging.getLogger(__name__)


def serve(
    host: Annotated[
        str,
        typer.Option("--host", help="Interface to bind"),
    ] = "127.0.0.1",
    port: Annotated[
        int,
        typer.Option("--port", "-p", help="Port to listen on"),
    ] = 5000,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable the Flask debugger and reloader"),
    ] = False,
) -> None:
    """Serve the month view and JSON API with Flask's development server."""
    ctx = get_context()
    app = create_app(ctx.config)
    logger.info(f"Serving {ctx.config.data_dir} on http://{host}:{port}/")
    app.run(host=host, port=port, debug=debug)
