"""Check that required executables are available before doing any work."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Sequence

from tsh.exceptions import MissingDependenciesError

__all__ = ['check_dependencies', 'find_missing']

logger = logging.getLogger(__name__)


def find_missing(names: Sequence[str]) -> list[str]:
    """Return every name in names that does not resolve on PATH, in input order."""
    missing = [name for name in names if shutil.which(name) is None]
    logger.debug('Dependency check: %s missing of %s', missing, list(names))
    return missing


def check_dependencies(names: Sequence[str]) -> None:
    """
    Verify every executable in names is on PATH.

    Raises:
        MissingDependenciesError: Carrying all unresolved names, not just the first
    """
    missing = find_missing(names)
    if missing:
        raise MissingDependenciesError(missing)
