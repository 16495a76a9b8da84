"""Shared Rich console instance for terminal output."""

from rich.console import Console

# Used by all display renderers and commands
console = Console()
