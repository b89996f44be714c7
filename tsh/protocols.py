"""
Shared protocols for tsh services.

Services report to the user through LoggerProtocol: progress lines are
always shown, info lines only in verbose mode. Developer diagnostics go
through the stdlib logging module.
"""

from __future__ import annotations

from typing import Protocol


class LoggerProtocol(Protocol):
    """
    Protocol for user-facing logging.

    Implementations:
    - CLILogger (cli/logger.py): Prints to stdout with optional verbose mode
    - NullLogger (below): No-op implementation for when logging is optional
    """

    def progress(self, message: str) -> None: ...
    def info(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...


class NullLogger:
    """No-op logger for callers that do not need progress output."""

    def progress(self, message: str) -> None:
        pass

    def info(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass
