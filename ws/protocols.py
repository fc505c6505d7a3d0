"""
Shared protocols for ws services.

This module contains the narrow interfaces the session-switching engine
depends on. The engine never spawns processes itself: tmux and fzf sit
behind MultiplexerProtocol and PickerProtocol so tests (or a future native
tmux control-socket client) can stand in for them.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

from ws.schemas.state import SessionInfo


class LoggerProtocol(Protocol):
    """
    Protocol for logger - enables services to work with any logging implementation.

    Implementations:
    - CLILogger (cli/logger.py): Logs to stderr with optional verbose mode
    - NullLogger (below): No-op implementation for when logging is optional
    """

    def info(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...


class NullLogger:
    """
    No-op logger implementation for when logging is optional.

    Use this when a function requires a LoggerProtocol but the caller
    doesn't need logging output.
    """

    def info(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass


@runtime_checkable
class MultiplexerProtocol(Protocol):
    """
    Protocol for the terminal multiplexer, addressed by session name.

    Query methods (current_session_name, list_sessions, session_exists) return
    parsed results or raise MultiplexerError. Commands return True on success
    and False when the multiplexer rejected them; callers decide whether that
    is fatal.
    """

    def is_inside_session(self) -> bool:
        """True if this process runs inside a multiplexer session."""
        ...

    def current_session_name(self) -> str:
        """Name of the session the current client is attached to."""
        ...

    def list_sessions(self) -> Sequence[SessionInfo]:
        """Live sessions; empty when no server is running."""
        ...

    def session_exists(self, name: str) -> bool: ...

    def create_session(self, name: str, root: Path) -> bool:
        """Create a detached session with an editor window and a files window."""
        ...

    def switch_client(self, name: str) -> bool: ...
    def attach(self, name: str) -> bool: ...
    def kill_session(self, name: str) -> bool: ...


@runtime_checkable
class PickerProtocol(Protocol):
    """Protocol for the interactive fuzzy picker."""

    def pick(self, labels: Sequence[str], prompt: str) -> int | None:
        """
        Let the user choose one label.

        Args:
            labels: Display strings, in order
            prompt: Prompt shown next to the query field

        Returns:
            Index into labels, or None if the user aborted

        Raises:
            PickerError: If the picker could not run
        """
        ...
