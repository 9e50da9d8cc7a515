"""Best-effort opening of entries in an external editor."""

import logging
import shlex
import subprocess
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class Editor(Protocol):
    """Something that can show a file to the user."""

    def open(self, path: Path) -> bool:
        """Open the file; return False if it could not be opened."""
        ...


class CommandEditor:
    """Runs an editor command with the file path appended.

    With quiet=True (used for the default GUI launcher) the command's
    stdout and stderr are discarded. Otherwise the command inherits the
    terminal, so editors such as vim or nano can draw and read input.

    Failures (unparsable command, missing binary, non-zero exit) are
    swallowed: opening the entry is never required for a command to succeed.
    """

    def __init__(self, command: str, quiet: bool = True):
        self.command = command
        self.quiet = quiet

    def open(self, path: Path) -> bool:
        output = subprocess.DEVNULL if self.quiet else None
        try:
            argv = shlex.split(self.command) + [str(path)]
            subprocess.run(argv, check=True, stdout=output, stderr=output)
        except (OSError, ValueError, subprocess.SubprocessError) as e:
            logger.debug(f"Could not open {path} with {self.command!r}: {e}")
            return False
        return True


class NullEditor:
    """Editor that never opens anything."""

    def open(self, path: Path) -> bool:
        return False
