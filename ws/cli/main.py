#!/usr/bin/env python3
"""
Command-line interface for ws.

Provides commands to pick, kill and revisit tmux sessions.
"""

from __future__ import annotations

import traceback
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

import typer

from ws.cli.logger import CLILogger
from ws.config.cli import settings
from ws.exceptions import WsError
from ws.paths import default_state_path, expand_workspace
from ws.services.lifecycle import SessionSwitcher
from ws.services.picker import FzfPicker
from ws.services.state import StateStore
from ws.services.tmux import TmuxClient

app = typer.Typer(
    name='ws',
    help='Fuzzy-pick tmux sessions and workspace projects',
    add_completion=False,
    no_args_is_help=True,
)

R = TypeVar('R')


def _build_switcher(logger: CLILogger) -> SessionSwitcher:
    """Load state and wire up the real tmux and fzf adapters."""
    state_path = settings.STATE_FILE or default_state_path()
    store = StateStore.load(
        state_path,
        max_history_size=settings.MAX_HISTORY_SIZE,
        cache_ttl=settings.CACHE_TTL_SECONDS,
    )
    logger.info(f'State file: {state_path}')
    tmux = TmuxClient(
        binary=settings.TMUX_BINARY,
        editor_command=settings.EDITOR_COMMAND,
        files_command=settings.FILES_COMMAND,
    )
    picker = FzfPicker(binary=settings.FZF_BINARY)
    return SessionSwitcher(store, tmux, picker, logger=logger)


def _run(action: str, verbose: bool, command: Callable[[SessionSwitcher], R]) -> R:
    """Run one command, converting failures into exit code 1."""
    logger = CLILogger(verbose=verbose)
    try:
        return command(_build_switcher(logger))
    except WsError as e:
        typer.secho(f'Error: {e}', fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from e
    except Exception as e:
        logger.error(f'Failed to {action}: {e}')
        if verbose:
            traceback.print_exc()
        raise typer.Exit(1) from e


def _workspace_root(workspace: str | None) -> Path:
    return expand_workspace(workspace or settings.WORKSPACE)


def _notice(message: str) -> None:
    typer.secho(message, fg=typer.colors.YELLOW, err=True)


@app.command()
def pick(
    workspace: str | None = typer.Option(
        None, '--workspace', '-w', help='Workspace root holding <category>/<project> directories'
    ),
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Verbose output'),
) -> None:
    """Pick a project or session and switch to it."""
    result = _run('pick', verbose, lambda switcher: switcher.pick(_workspace_root(workspace)))

    if result.session_name is not None and result.created:
        typer.secho(f'✓ Created session {result.session_name}', fg=typer.colors.GREEN, err=True)


@app.command()
def kill(
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Verbose output'),
) -> None:
    """Kill a session, switching to the previous one if it was current."""
    result = _run('kill session', verbose, lambda switcher: switcher.kill())

    if result.reason == 'no_sessions':
        _notice('No sessions to kill')
        return
    if result.killed is None:
        return

    typer.secho(f'✓ Killed session {result.killed}', fg=typer.colors.GREEN)
    if result.switched_to:
        typer.echo(f'  Switched to: {result.switched_to}')


@app.command()
def back(
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Verbose output'),
) -> None:
    """Jump back to the previous session."""
    result = _run('switch back', verbose, lambda switcher: switcher.back())

    if result.session_name is None:
        _notice('No previous session in history')


@app.command()
def refresh(
    workspace: str | None = typer.Option(
        None, '--workspace', '-w', help='Workspace root holding <category>/<project> directories'
    ),
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Verbose output'),
) -> None:
    """Rescan the workspace and rebuild the project cache."""
    result = _run('refresh cache', verbose, lambda switcher: switcher.refresh(_workspace_root(workspace)))

    typer.echo(f'Cache refreshed: {result.project_count} projects found')


if __name__ == '__main__':
    app()
