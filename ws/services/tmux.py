"""
tmux adapter - implements MultiplexerProtocol by running the tmux binary.

Session names are always passed as exact-match targets (`=name`), so `api`
never resolves to a session called `api-v2`.
"""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Sequence
from pathlib import Path

from ws.exceptions import MultiplexerError
from ws.schemas.state import SessionInfo

__all__ = ['EDITOR_WINDOW_INDEX', 'FILES_WINDOW_INDEX', 'TmuxClient']

logger = logging.getLogger(__name__)

EDITOR_WINDOW_INDEX = 1
FILES_WINDOW_INDEX = 9

_LIST_FORMAT = '#{session_name}|#{session_last_attached}'


def _session_target(name: str) -> str:
    return f'={name}'


def _window_target(name: str, index: int) -> str:
    return f'={name}:{index}'


class TmuxClient:
    """Blocking tmux client. Every call spawns one tmux process."""

    def __init__(
        self,
        binary: str = 'tmux',
        editor_command: str = 'fish -C "hx"',
        files_command: str = 'fx',
    ) -> None:
        self.binary = binary
        self.editor_command = editor_command
        self.files_command = files_command

    def _run(self, args: Sequence[str], *, capture: bool = True) -> subprocess.CompletedProcess[str]:
        """
        Run one tmux command.

        Args:
            args: Arguments after the tmux binary
            capture: Capture stdout/stderr. attach-session needs the terminal,
                so it runs with inherited stdio.

        Raises:
            MultiplexerError: If tmux could not be executed
        """
        command = [self.binary, *args]
        logger.debug('Running %s', command)
        try:
            return subprocess.run(command, capture_output=capture, text=True, check=False)
        except OSError as e:
            raise MultiplexerError(f'Failed to run {self.binary}: {e}') from e

    def _ok(self, args: Sequence[str], *, capture: bool = True) -> bool:
        result = self._run(args, capture=capture)
        if result.returncode != 0:
            logger.debug('tmux %s exited %d: %s', args[0], result.returncode, (result.stderr or '').strip())
        return result.returncode == 0

    # -- queries ----------------------------------------------------------------

    def is_inside_session(self) -> bool:
        return 'TMUX' in os.environ

    def current_session_name(self) -> str:
        result = self._run(['display-message', '-p', '#{session_name}'])
        if result.returncode != 0:
            raise MultiplexerError(f'Failed to get current session: {result.stderr.strip()}')
        return result.stdout.strip()

    def list_sessions(self) -> list[SessionInfo]:
        """
        List live sessions in tmux order.

        A non-zero exit (typically "no server running") means there are no
        sessions, not an error.
        """
        result = self._run(['list-sessions', '-F', _LIST_FORMAT])
        if result.returncode != 0:
            return []

        sessions = []
        for line in result.stdout.splitlines():
            name, sep, last_attached = line.rpartition('|')
            if not sep:
                continue
            try:
                last_active = int(last_attached)
            except ValueError:
                last_active = 0  # Never attached sessions report an empty field
            sessions.append(SessionInfo(name=name, last_active=last_active))
        return sessions

    def session_exists(self, name: str) -> bool:
        return self._ok(['has-session', '-t', _session_target(name)])

    # -- commands ---------------------------------------------------------------

    def create_session(self, name: str, root: Path) -> bool:
        """
        Create a detached project session.

        Window 1 runs the editor, window 9 runs the file browser, and the
        editor window is left selected.
        """
        root_str = str(root)
        if not self._ok(['new-session', '-d', '-s', name, '-c', root_str, '-n', 'editor', self.editor_command]):
            return False
        files_ok = self._ok(
            [
                'new-window',
                '-t',
                _window_target(name, FILES_WINDOW_INDEX),
                '-c',
                root_str,
                '-n',
                'files',
                self.files_command,
            ]
        )
        select_ok = self._ok(['select-window', '-t', _window_target(name, EDITOR_WINDOW_INDEX)])
        return files_ok and select_ok

    def switch_client(self, name: str) -> bool:
        return self._ok(['switch-client', '-t', _session_target(name)])

    def attach(self, name: str) -> bool:
        return self._ok(['attach-session', '-t', _session_target(name)], capture=False)

    def kill_session(self, name: str) -> bool:
        return self._ok(['kill-session', '-t', _session_target(name)])
