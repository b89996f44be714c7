"""
CLI logger adapter - implements LoggerProtocol for command-line usage.
"""

from __future__ import annotations

import typer


class CLILogger:
    """
    Logger implementation for CLI (implements LoggerProtocol from protocols).

    Info messages only appear with --verbose; progress, warnings and errors
    always do.
    """

    def __init__(self, verbose: bool = False) -> None:
        self.verbose = verbose

    def progress(self, message: str) -> None:
        """Show a progress or outcome message (always shown, unprefixed)."""
        typer.echo(message)

    def info(self, message: str) -> None:
        """Log info message (only if verbose)."""
        if self.verbose:
            typer.echo(f'[INFO] {message}')

    def warning(self, message: str) -> None:
        """Log warning message."""
        typer.secho(f'[WARNING] {message}', fg=typer.colors.YELLOW)

    def error(self, message: str) -> None:
        """Log error message."""
        typer.secho(f'[ERROR] {message}', fg=typer.colors.RED, err=True)
