"""
Session lifecycle - the pick, kill, back and refresh flows.

SessionSwitcher drives tmux through MultiplexerProtocol and the user through
PickerProtocol, and records every visit in the StateStore it was given.
Each public method is one CLI command: it mutates the store in memory and
saves it before returning.

Informational outcomes (aborted picker, separator row, nothing to kill, no
previous session) come back as result values. Surfaced failures raise
WsError subclasses.
"""

from __future__ import annotations

from pathlib import Path

from ws.exceptions import InvalidSelectionError, MultiplexerError
from ws.protocols import LoggerProtocol, MultiplexerProtocol, NullLogger, PickerProtocol
from ws.schemas.operations import BackResult, KillResult, PickResult, RefreshResult
from ws.schemas.selection import ProjectItem, SelectableItem, SessionItem
from ws.services.selection import build_selection
from ws.services.state import StateStore

__all__ = ['KILL_PROMPT', 'PICK_PROMPT', 'SessionSwitcher']

PICK_PROMPT = '> '
KILL_PROMPT = 'kill> '


class SessionSwitcher:
    """Runs ws commands against one loaded StateStore."""

    def __init__(
        self,
        store: StateStore,
        tmux: MultiplexerProtocol,
        picker: PickerProtocol,
        logger: LoggerProtocol | None = None,
    ) -> None:
        self.store = store
        self.tmux = tmux
        self.picker = picker
        self.logger = logger or NullLogger()

    # -- pick -------------------------------------------------------------------

    def pick(self, workspace: Path) -> PickResult:
        """Let the user choose a session or project and go there."""
        refreshed = self.store.ensure_cache_valid(workspace)
        if refreshed:
            self.logger.info(f'Project cache refreshed: {len(self.store.projects)} projects')

        inside = self.tmux.is_inside_session()
        sessions = self.tmux.list_sessions()
        selection = build_selection(sessions, self.store.projects, inside_multiplexer=inside)

        raw_index = self.picker.pick(selection.labels, PICK_PROMPT)
        item = selection.resolve(raw_index) if raw_index is not None else None
        if item is None:
            if refreshed:
                self.store.save()
            return PickResult(session_name=None, cache_refreshed=refreshed)

        name, created = self.activate(item)
        return PickResult(session_name=name, created=created, cache_refreshed=refreshed)

    def activate(self, item: SelectableItem) -> tuple[str, bool]:
        """
        Make sure the item's session exists, record it, and go to it.

        History is saved before switching: attach blocks until the user
        detaches, and ws runs inside that session save their own history.

        Returns:
            (session name, whether a new session was created)
        """
        created = False
        match item:
            case SessionItem(name=name):
                pass
            case ProjectItem(project=project):
                name = project.session_name
                if not self.tmux.session_exists(name):
                    self.logger.info(f'Creating session {name} in {project.path}')
                    if not self.tmux.create_session(name, Path(project.path)):
                        self.logger.warning(f'tmux did not fully set up session {name}')
                    created = True

        self.store.push_history(name)
        self.store.save()
        self._switch_or_attach(name)
        return name, created

    def _switch_or_attach(self, name: str) -> None:
        if self.tmux.is_inside_session():
            ok = self.tmux.switch_client(name)
        else:
            ok = self.tmux.attach(name)
        if not ok:
            self.logger.warning(f'Failed to open session {name}')

    # -- kill -------------------------------------------------------------------

    def kill(self) -> KillResult:
        """
        Let the user choose a session to kill.

        Killing the focused session moves the client to the previous session
        from history, so the user keeps a place to land.

        Raises:
            MultiplexerError: If tmux refuses the kill; history is left as is
        """
        sessions = self.tmux.list_sessions()
        if not sessions:
            return KillResult(killed=None, reason='no_sessions')

        current = self.tmux.current_session_name() if self.tmux.is_inside_session() else None

        names = [s.name for s in sessions]
        index = self.picker.pick(names, KILL_PROMPT)
        if index is None:
            return KillResult(killed=None, reason='aborted')
        if not 0 <= index < len(names):
            raise InvalidSelectionError(index, len(names))
        selected = names[index]

        previous = self.store.previous_session()

        if not self.tmux.kill_session(selected):
            raise MultiplexerError(f'Failed to kill session {selected}')

        switched_to = None
        if current == selected and previous is not None and previous != selected:
            switched_to = self._fallback_switch(previous)

        self.store.remove_session(selected)
        self.store.save()
        return KillResult(killed=selected, switched_to=switched_to)

    def _fallback_switch(self, name: str) -> str | None:
        """Best-effort switch after a kill; failures are logged, never raised."""
        try:
            ok = self.tmux.switch_client(name)
        except MultiplexerError as e:
            self.logger.warning(f'Could not switch to {name}: {e}')
            return None
        if not ok:
            self.logger.warning(f'Could not switch to {name}')
            return None
        return name

    # -- back -------------------------------------------------------------------

    def back(self) -> BackResult:
        """Switch to the previous session and promote it to most recent."""
        previous = self.store.previous_session()
        if previous is None:
            return BackResult(session_name=None)

        if not self.tmux.switch_client(previous):
            self.logger.warning(f'Failed to switch to {previous}')

        self.store.push_history(previous)
        self.store.save()
        return BackResult(session_name=previous)

    # -- refresh ----------------------------------------------------------------

    def refresh(self, workspace: Path) -> RefreshResult:
        """Rescan the workspace unconditionally."""
        self.store.refresh_cache(workspace)
        self.store.save()
        cache = self.store.record.cache
        return RefreshResult(project_count=len(cache.projects), updated_at=cache.updated_at)
