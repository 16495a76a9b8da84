"""System clipboard access."""

import logging
import shutil
import subprocess
from typing import Protocol, Sequence

from sharedcal.exceptions import ClipboardError

logger = logging.getLogger(__name__)

DEFAULT_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip",),
)


class Clipboard(Protocol):
    """Protocol for clipboard writers."""

    def write_text(self, text: str) -> None:
        """Put text on the clipboard.

        Raises:
            ClipboardError: If the write fails
        """
        ...


class CommandClipboard:
    """Clipboard backed by the first available copy command."""

    def __init__(self, commands: Sequence[Sequence[str]] = DEFAULT_COMMANDS):
        self.commands = commands

    def _find_command(self) -> list[str] | None:
        for cmd in self.commands:
            if shutil.which(cmd[0]):
                return list(cmd)
        return None

    def write_text(self, text: str) -> None:
        cmd = self._find_command()
        if cmd is None:
            raise ClipboardError("No clipboard command available")
        try:
            result = subprocess.run(
                cmd, input=text, text=True, capture_output=True, timeout=5
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            raise ClipboardError(f"{cmd[0]} failed: {e}") from e
        if result.returncode != 0:
            raise ClipboardError(
                f"{cmd[0]} exited with {result.returncode}: {result.stderr.strip()}"
            )
        logger.debug(f"Copied {len(text)} chars with {cmd[0]}")
