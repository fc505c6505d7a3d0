"""
Path utilities for ws.

The state file lives in the platform's per-user data directory:
- Linux: ~/.local/share/ws/state.json (or $XDG_DATA_HOME/ws/state.json)
- macOS: ~/Library/Application Support/ws/state.json
"""

from __future__ import annotations

from pathlib import Path

from platformdirs import user_data_dir

__all__ = ['APP_DIR_NAME', 'STATE_FILE_NAME', 'default_state_path', 'expand_workspace']

APP_DIR_NAME = 'ws'
STATE_FILE_NAME = 'state.json'


def default_state_path() -> Path:
    """Location of the state file when no override is configured."""
    return Path(user_data_dir(APP_DIR_NAME, appauthor=False)) / STATE_FILE_NAME


def expand_workspace(path: Path | str) -> Path:
    """
    Expand a leading `~` and make the workspace root absolute.

    The path is not resolved through symlinks: project paths keep the
    spelling the user configured.

    Examples:
        >>> expand_workspace('~/workspace')  # doctest: +SKIP
        PosixPath('/home/me/workspace')
    """
    return Path(path).expanduser().absolute()
