"""
Session naming for selected directories.

tmux treats '.' in a target name as a window/pane separator, so the session
name is the directory's final component with every '.' replaced by '_'.

WARNING: This naming is LOSSY - `my.app` and `my_app` map to the same
session, and directories with the same name under different parents share
one session.
"""

from __future__ import annotations

from pathlib import Path

from tsh.exceptions import CommandFailedError

__all__ = ['session_name_for']


def session_name_for(directory: Path | str) -> str:
    """
    Derive the tmux session name for a directory.

    Only the final path component is used; parent segments never affect the
    name.

    Args:
        directory: Selected directory path

    Returns:
        Session name for use with tmux -t/-s

    Raises:
        CommandFailedError: If the path has no final component (e.g. '/')

    Examples:
        >>> session_name_for('/home/u/a.b.c')
        'a_b_c'

        >>> session_name_for('/srv/www/example.com/')
        'example_com'
    """
    name = Path(directory).name
    if not name or name == '..':
        raise CommandFailedError('Could not extract session name from directory')
    return name.replace('.', '_')
