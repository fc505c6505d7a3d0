"""
CLI configuration.

Extends base configuration with the commands ws hands to tmux and fzf.
"""

from __future__ import annotations

from ws.config.base import BaseWsSettings, lazy_settings


class CliSettings(BaseWsSettings):
    """Settings for the ws command-line tool."""

    WORKSPACE: str = '~/workspace'

    # Commands started in a freshly created project session
    EDITOR_COMMAND: str = 'fish -C "hx"'
    FILES_COMMAND: str = 'fx'

    # External binaries
    TMUX_BINARY: str = 'tmux'
    FZF_BINARY: str = 'fzf'


# Module-level singleton (lazy-loaded)
settings = lazy_settings(CliSettings)
