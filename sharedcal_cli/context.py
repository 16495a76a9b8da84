"""Shared CLI context with lazy-initialized dependencies."""

from sharedcal.config import CalendarConfig
from sharedcal.output.clipboard import Clipboard, CommandClipboard
from sharedcal.session import CalendarSession
from sharedcal.storage import EventStore, JSONFileStore


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    Usage:
        ctx = CLIContext()
        events = ctx.session.sorted_events()
    """

    def __init__(self, verbose: bool = False, quiet: bool = False):
        """Initialize CLI context.

        Args:
            verbose: If True, enable info logging on the console
            quiet: If True, suppress non-error output
        """
        self.verbose = verbose
        self.quiet = quiet

        # Lazy-loaded dependencies
        self._config: CalendarConfig | None = None
        self._store: EventStore | None = None
        self._session: CalendarSession | None = None
        self._clipboard: Clipboard | None = None

    @property
    def config(self) -> CalendarConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = CalendarConfig.from_env()
        return self._config

    @property
    def store(self) -> EventStore:
        """Get the event store (lazy-loaded)."""
        if self._store is None:
            self._store = EventStore(
                JSONFileStore(self.config.data_dir),
                key=self.config.storage_key,
                share_param=self.config.share_param,
            )
        return self._store

    @property
    def session(self) -> CalendarSession:
        """Get a session with events loaded from storage (lazy-loaded)."""
        if self._session is None:
            self._session = CalendarSession(self.store, self.config)
            self._session.load()
        return self._session

    @property
    def clipboard(self) -> Clipboard:
        """Get the system clipboard (lazy-loaded)."""
        if self._clipboard is None:
            self._clipboard = CommandClipboard()
        return self._clipboard


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context."""
    global _ctx
    _ctx = ctx
