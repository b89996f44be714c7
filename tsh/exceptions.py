"""
Shared exceptions for tsh.

Every failure in the pipeline is raised as a TshError subclass and unwound to
the CLI, which prints it and exits non-zero. Interactive cancellation is not
an error: the selector reports it as an empty selection.

Exception Hierarchy:
    TshError (base)
    ├── IOFailureError (spawn, pipe or filesystem failure)
    ├── MissingDependenciesError (required executables not on PATH)
    ├── CommandFailedError (subprocess reported failure)
    ├── NoDirectoriesFoundError (search succeeded but found nothing usable)
    └── UserCancelledError (reserved, see SelectorBridge.select)
"""

from __future__ import annotations

from collections.abc import Sequence


class TshError(Exception):
    """Base exception for all tsh errors."""


class IOFailureError(TshError):
    """Raised when an underlying I/O operation fails."""

    def __init__(self, error: OSError) -> None:
        self.error = error
        super().__init__(f'I/O error: {error}')


class MissingDependenciesError(TshError):
    """Raised when one or more required executables cannot be found on PATH."""

    def __init__(self, missing: Sequence[str]) -> None:
        self.missing = list(missing)
        super().__init__(f'Missing dependencies: {", ".join(self.missing)}')


class CommandFailedError(TshError):
    """Raised when a spawned command fails or produces an unusable result."""

    def __init__(self, description: str) -> None:
        self.description = description
        super().__init__(f'Command failed: {description}')


class NoDirectoriesFoundError(TshError):
    """Raised when directory enumeration yields no candidates."""

    def __init__(self) -> None:
        super().__init__('No directories found')


class UserCancelledError(TshError):
    """Operation cancelled by user."""

    def __init__(self) -> None:
        super().__init__('Operation cancelled by user')
