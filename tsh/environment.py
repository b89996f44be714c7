"""
Process environment consumed by tsh.

Two facts come from the environment: the home directory (default search
base) and the TMUX marker (set by tmux for every process inside a session).
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from tsh.exceptions import IOFailureError

__all__ = ['is_nested_in_multiplexer', 'resolve_home_directory']

TMUX_MARKER = 'TMUX'


def resolve_home_directory(environ: Mapping[str, str] | None = None) -> str:
    """
    Resolve the default search base.

    Uses $HOME, falling back to the current working directory when it is
    not set.

    Raises:
        IOFailureError: If $HOME is unset and the working directory cannot be read
    """
    env = os.environ if environ is None else environ
    home = env.get('HOME')
    if home:
        return home

    try:
        return os.getcwd()
    except OSError as e:
        raise IOFailureError(e) from e


def is_nested_in_multiplexer(environ: Mapping[str, str] | None = None) -> bool:
    """Check whether the current process runs inside tmux (value is not inspected)."""
    env = os.environ if environ is None else environ
    return TMUX_MARKER in env
