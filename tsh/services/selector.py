"""
Interactive selector bridge - hands candidates to fzf and reads the choice.

fzf draws its UI on the terminal and prints the chosen line on stdout, so
only stdin and stdout are piped. Cancelling fzf (Esc, Ctrl-C) exits with a
failure status; that is reported as no selection, not as an error.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence

from tsh.exceptions import IOFailureError, NoDirectoriesFoundError

__all__ = ['SelectorBridge']

logger = logging.getLogger(__name__)


class SelectorBridge:
    """Run the interactive selector over a candidate list."""

    def __init__(self, command: Sequence[str] = ('fzf',)) -> None:
        """
        Initialize selector bridge.

        Args:
            command: Selector argv, e.g. ('fzf',)
        """
        self.command = list(command)

    def select(self, candidates: Sequence[str]) -> str | None:
        """
        Let the user pick one candidate.

        The child is always waited on, including when writing to it fails
        part way through the list.

        Args:
            candidates: Non-empty candidate directory paths

        Returns:
            The selected line with surrounding whitespace trimmed, or None if
            the selector was cancelled or printed nothing

        Raises:
            NoDirectoriesFoundError: If candidates is empty
            IOFailureError: If the selector cannot be spawned or its pipes fail
        """
        if not candidates:
            raise NoDirectoriesFoundError()

        logger.debug('Spawning selector %s with %d candidates', self.command, len(candidates))
        try:
            with subprocess.Popen(
                self.command,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                text=True,
                errors='replace',
            ) as proc:
                for candidate in candidates:
                    proc.stdin.write(f'{candidate}\n')
                proc.stdin.close()
                output = proc.stdout.read()
                returncode = proc.wait()
        except OSError as e:
            raise IOFailureError(e) from e

        if returncode != 0:
            logger.debug('Selector exited with %d, treating as cancelled', returncode)
            return None

        selected = output.strip()
        return selected or None
