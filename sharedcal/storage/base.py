"""Key/value store protocol for client-local persistence."""

from typing import Protocol


class KeyValueStore(Protocol):
    """Protocol for a local persistent key/value store."""

    def get(self, key: str) -> str | None:
        """Return the stored text for key, or None if absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store text under key, replacing any previous value."""
        ...
