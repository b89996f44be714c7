"""
tmux client - the call shapes tsh needs and nothing more.

Each method returns whether tmux reported success. The existence check
captures output so nothing leaks to the terminal; the interactive calls
inherit the terminal because they hand it over to tmux.
"""

from __future__ import annotations

import logging
import subprocess

from tsh.exceptions import IOFailureError

__all__ = ['MultiplexerClient']

logger = logging.getLogger(__name__)


class MultiplexerClient:
    """Thin wrapper over the tmux executable."""

    def __init__(self, binary: str = 'tmux') -> None:
        self.binary = binary

    def has_session(self, name: str) -> bool:
        """Check whether a session called name exists (exit status only)."""
        return self._run(['has-session', '-t', name], capture=True)

    def new_session_detached(self, name: str, directory: str) -> bool:
        """Create a detached session rooted at directory."""
        return self._run(['new-session', '-d', '-s', name, '-c', directory])

    def new_session_or_attach(self, name: str, directory: str) -> bool:
        """Attach to name, creating it rooted at directory if needed."""
        return self._run(['new-session', '-A', '-s', name, '-c', directory])

    def attach_session(self, name: str) -> bool:
        return self._run(['attach-session', '-t', name])

    def switch_client(self, name: str) -> bool:
        return self._run(['switch-client', '-t', name])

    def _run(self, args: list[str], capture: bool = False) -> bool:
        cmd = [self.binary, *args]
        logger.debug('Running %s', cmd)
        try:
            result = subprocess.run(cmd, capture_output=capture)
        except OSError as e:
            raise IOFailureError(e) from e
        logger.debug('%s %s exited with %d', self.binary, args[0], result.returncode)
        return result.returncode == 0
