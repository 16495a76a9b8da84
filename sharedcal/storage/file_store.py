"""Key/value store implementations."""

import logging
import os
import tempfile
from pathlib import Path

from sharedcal.exceptions import StorageError

logger = logging.getLogger(__name__)


class JSONFileStore:
    """One file per key under a data directory."""

    def __init__(self, directory: Path):
        """
        Initialize JSONFileStore.

        Args:
            directory: Directory holding the key files (created on first write)
        """
        self.directory = Path(directory)

    def path_for(self, key: str) -> Path:
        """Path of the file backing key."""
        return self.directory / f"{key}.json"

    def get(self, key: str) -> str | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Failed to read {path}: {e}") from e

    def set(self, key: str, value: str) -> None:
        path = self.path_for(key)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            # Write to a sibling temp file then swap it in
            fd, tmp_name = tempfile.mkstemp(
                dir=self.directory, prefix=f".{key}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(value)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageError(f"Failed to write {path}: {e}") from e
        logger.debug(f"Wrote {len(value)} chars to {path}")


class MemoryStore:
    """In-memory store, used for tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value
