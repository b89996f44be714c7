"""
Directory enumeration - produces the candidate list shown in the selector.

Two search modes:
- Named search: `find <home> -type d -name <name>` for each requested name,
  then every subdirectory under each match
- Path search: every subdirectory under one base, minus noise paths
  (dependency caches, VCS metadata, temp and library directories)

Subdirectory listing prefers fd when it is on PATH and falls back to find.
The choice is made once per run (EnumeratorStrategy.resolve) and reused for
every search.
"""

from __future__ import annotations

import logging
import re
import shutil
import subprocess
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from tsh.exceptions import CommandFailedError, IOFailureError, NoDirectoriesFoundError
from tsh.protocols import LoggerProtocol, NullLogger
from tsh.schemas.search import NamedSearch, PathSearch, SearchRequest

__all__ = [
    'EXCLUDE_PATTERN',
    'DirectoryEnumerator',
    'EnumeratorStrategy',
    'build_search_request',
    'filter_candidates',
]

logger = logging.getLogger(__name__)

# Fixed, not user-configurable
EXCLUDE_PATTERN = re.compile(r'/node_modules/|/\.git/|/\.cache/|/tmp/|/Library/')


def filter_candidates(lines: Iterable[str]) -> list[str]:
    """Drop empty lines and paths under excluded noise directories."""
    return [line for line in lines if line and not EXCLUDE_PATTERN.search(line)]


def build_search_request(names: Sequence[str], custom_dir: Path | str | None, home: str) -> SearchRequest:
    """
    Pick the search mode for a run.

    Precedence: directory names > explicit base directory > home directory.
    Named searches always root at home.
    """
    if names:
        return NamedSearch(names=list(names), base=home)
    if custom_dir is not None:
        return PathSearch(base=str(custom_dir), is_default=False)
    return PathSearch(base=home, is_default=True)


@dataclass(frozen=True)
class EnumeratorStrategy:
    """Which executable lists subdirectories, resolved once per run."""

    binary: str
    is_fast: bool

    @classmethod
    def resolve(cls, fast_bin: str = 'fd', generic_bin: str = 'find') -> EnumeratorStrategy:
        """Prefer the fast enumerator when it is on PATH."""
        if shutil.which(fast_bin) is not None:
            return cls(binary=fast_bin, is_fast=True)
        return cls(binary=generic_bin, is_fast=False)

    def subdirectories_command(self, path: str) -> list[str]:
        """Build the argv listing every directory below path."""
        if self.is_fast:
            return [self.binary, '--type', 'd', '.', path]
        return [self.binary, path, '-type', 'd']


class DirectoryEnumerator:
    """
    Service producing candidate directories for a search request.

    Every search is a blocking subprocess call; a non-zero exit status is a
    CommandFailedError and an empty result is a NoDirectoriesFoundError.
    """

    def __init__(
        self,
        strategy: EnumeratorStrategy,
        generic_bin: str = 'find',
        logger: LoggerProtocol | None = None,
    ) -> None:
        """
        Initialize enumerator.

        Args:
            strategy: Resolved subdirectory listing strategy
            generic_bin: Executable used for name matching (always find-compatible)
            logger: User-facing progress logger
        """
        self.strategy = strategy
        self.generic_bin = generic_bin
        self.logger: LoggerProtocol = logger or NullLogger()

    def enumerate(self, request: SearchRequest) -> list[str]:
        """Produce the candidate list for request, reporting progress as it goes."""
        if isinstance(request, NamedSearch):
            search_paths = self.locate_named(request.names, request.base)
            self.logger.progress(f'Searching in directories: {search_paths}')
            return self.enumerate_subdirectories(search_paths)

        if request.is_default:
            self.logger.progress('Running default behavior (searching in home directory)...')
        else:
            self.logger.progress(f'Searching in custom directory: {request.base}')
        return self.enumerate_path(request.base)

    def locate_named(self, names: Sequence[str], base: str) -> list[str]:
        """
        Find directories called any of names under base.

        Results are concatenated in request order; a directory matched by
        more than one name is kept at its first position.

        Raises:
            CommandFailedError: If find fails for a name
            NoDirectoriesFoundError: If no name matched anything
        """
        search_paths: list[str] = []
        for name in names:
            result = self._run([self.generic_bin, base, '-type', 'd', '-name', name])
            if result.returncode != 0:
                raise CommandFailedError(f'find command for {name}')
            search_paths.extend(_non_empty_lines(result.stdout))

        if not search_paths:
            raise NoDirectoriesFoundError()
        return _unique(search_paths)

    def enumerate_subdirectories(self, paths: Sequence[str]) -> list[str]:
        """
        List every directory under each of paths, concatenated in order.

        Matches can nest (proj and proj/src), so repeats are dropped, keeping
        the first occurrence.

        Raises:
            CommandFailedError: If the enumerator fails for a path
            NoDirectoriesFoundError: If nothing was listed
        """
        all_dirs: list[str] = []
        for path in paths:
            result = self._run(self.strategy.subdirectories_command(path))
            if result.returncode != 0:
                raise CommandFailedError(f'{self.strategy.binary} command for {path}')
            all_dirs.extend(_non_empty_lines(result.stdout))

        if not all_dirs:
            raise NoDirectoriesFoundError()
        return _unique(all_dirs)

    def enumerate_path(self, base: str) -> list[str]:
        """
        List every directory under base, excluding noise paths.

        Raises:
            CommandFailedError: If the enumerator fails
            NoDirectoriesFoundError: If nothing survives filtering
        """
        result = self._run(self.strategy.subdirectories_command(base))
        if result.returncode != 0:
            raise CommandFailedError(f'Failed to execute {self.strategy.binary} command')

        dirs = filter_candidates(result.stdout.splitlines())
        if not dirs:
            raise NoDirectoriesFoundError()
        return dirs

    def _run(self, args: list[str]) -> subprocess.CompletedProcess[str]:
        logger.debug('Running %s', args)
        try:
            result = subprocess.run(args, capture_output=True, text=True, errors='replace')
        except OSError as e:
            raise IOFailureError(e) from e
        logger.debug('%s exited with %d', args[0], result.returncode)
        return result


def _non_empty_lines(output: str) -> list[str]:
    return [line for line in output.splitlines() if line]


def _unique(paths: list[str]) -> list[str]:
    return list(dict.fromkeys(paths))
