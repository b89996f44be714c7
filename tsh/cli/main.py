#!/usr/bin/env python3
"""
Command-line interface for tsh.

Select a directory with fzf and attach to (or create) a tmux session named
after it.
"""

from __future__ import annotations

import traceback
from collections.abc import Sequence
from pathlib import Path

import pydantic
import typer

from tsh.cli.logger import CLILogger
from tsh.config.cli import settings
from tsh.environment import resolve_home_directory
from tsh.exceptions import TshError
from tsh.schemas.search import NamedSearch
from tsh.schemas.session import MultiplexerContext
from tsh.services.dependencies import check_dependencies
from tsh.services.enumerator import DirectoryEnumerator, EnumeratorStrategy, build_search_request
from tsh.services.multiplexer import MultiplexerClient
from tsh.services.selector import SelectorBridge
from tsh.services.session import SessionResolver

app = typer.Typer(
    name='tsh',
    help='Tmux Session Handler - Select directories with fzf and create tmux sessions',
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        try:
            typer.echo(f'{settings.APP_NAME} {settings.VERSION}')
        except pydantic.ValidationError as e:
            _fail_configuration(e)
        raise typer.Exit()


def _fail_configuration(error: pydantic.ValidationError) -> None:
    typer.secho(f'Error: Invalid configuration: {error}', fg=typer.colors.RED, err=True)
    raise typer.Exit(1)


@app.command()
def run(
    directories: list[str] | None = typer.Argument(None, help='Directory names to search for under home'),
    custom_dir: Path | None = typer.Option(None, '--dir', '-d', metavar='PATH', help='Set custom directory to search in'),
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Verbose output'),
    version: bool = typer.Option(
        False, '--version', '-V', callback=_version_callback, is_eager=True, help='Show version and exit'
    ),
) -> None:
    """Pick a directory with fzf and open a tmux session for it.

    With DIRECTORY names, every directory below each match under home is offered.
    With --dir, every directory below PATH is offered. Otherwise home is searched.

    Examples:
        tsh
        tsh -d ~/src
        tsh dotfiles notes
    """
    logger = CLILogger(verbose=verbose)

    try:
        _run(directories or [], custom_dir, logger)
    except TshError as e:
        typer.secho(f'Error: {e}', fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    except pydantic.ValidationError as e:
        _fail_configuration(e)
    except Exception as e:
        logger.error(f'Unexpected failure: {e}')
        if verbose:
            traceback.print_exc()
        raise typer.Exit(1)


def _run(names: Sequence[str], custom_dir: Path | None, logger: CLILogger) -> None:
    """Run the pipeline: dependencies, enumerate, select, resolve session."""
    check_dependencies(settings.required_binaries)

    context = MultiplexerContext.from_environ()
    home = resolve_home_directory()
    request = build_search_request(names, custom_dir, home)

    strategy = EnumeratorStrategy.resolve(settings.FAST_ENUMERATOR_BIN, settings.ENUMERATOR_BIN)
    logger.info(f'Listing subdirectories with {strategy.binary}')
    enumerator = DirectoryEnumerator(strategy, generic_bin=settings.ENUMERATOR_BIN, logger=logger)

    if isinstance(request, NamedSearch) and custom_dir is not None:
        logger.warning('--dir is ignored when directory names are given')
    candidates = enumerator.enumerate(request)

    logger.info(f'Found {len(candidates):,} candidate directories')

    selected = SelectorBridge([settings.SELECTOR_BIN]).select(candidates)
    if selected is None:
        logger.progress('No directory selected. Exiting.')
        return

    resolver = SessionResolver(MultiplexerClient(settings.MULTIPLEXER_BIN), logger=logger)
    resolver.resolve(selected, context)


def main() -> None:
    """Entry point for CLI."""
    app()


if __name__ == '__main__':
    main()
