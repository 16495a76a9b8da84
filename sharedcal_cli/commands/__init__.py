"""CLI commands package."""

from sharedcal_cli.commands.delete import delete
from sharedcal_cli.commands.export import export
from sharedcal_cli.commands.invite import invite
from sharedcal_cli.commands.ls import ls
from sharedcal_cli.commands.new import add, edit
from sharedcal_cli.commands.serve import serve
from sharedcal_cli.commands.share import import_, share
from sharedcal_cli.commands.show import day, show

__all__ = [
    "add",
    "day",
    "delete",
    "edit",
    "export",
    "import_",
    "invite",
    "ls",
    "serve",
    "share",
    "show",
]
