"""Shared fakes and fixtures for ws tests."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from ws.exceptions import MultiplexerError
from ws.schemas.state import ProjectInfo, SessionInfo
from ws.services.state import StateStore

T0 = 1_700_000_000


class FakeClock:
    """Callable clock returning a settable epoch second."""

    def __init__(self, now: int = T0) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now


class FakeTmux:
    """In-memory MultiplexerProtocol that records every command."""

    def __init__(
        self,
        sessions: Sequence[str] = (),
        *,
        inside: bool = True,
        current: str | None = None,
    ) -> None:
        self.sessions = list(sessions)
        self.inside = inside
        self.current = current
        self.calls: list[tuple[str, ...]] = []
        self.switch_ok = True
        self.kill_ok = True
        self.switch_error: Exception | None = None

    def is_inside_session(self) -> bool:
        return self.inside

    def current_session_name(self) -> str:
        if self.current is None:
            raise MultiplexerError('Failed to get current session')
        return self.current

    def list_sessions(self) -> list[SessionInfo]:
        return [SessionInfo(name=name, last_active=0) for name in self.sessions]

    def session_exists(self, name: str) -> bool:
        return name in self.sessions

    def create_session(self, name: str, root: Path) -> bool:
        self.calls.append(('create', name, str(root)))
        self.sessions.append(name)
        return True

    def switch_client(self, name: str) -> bool:
        self.calls.append(('switch', name))
        if self.switch_error is not None:
            raise self.switch_error
        return self.switch_ok

    def attach(self, name: str) -> bool:
        self.calls.append(('attach', name))
        return True

    def kill_session(self, name: str) -> bool:
        self.calls.append(('kill', name))
        if not self.kill_ok:
            return False
        self.sessions.remove(name)
        return True


class FakePicker:
    """PickerProtocol returning a preset choice and recording what it was shown."""

    def __init__(self, choice: int | None) -> None:
        self.choice = choice
        self.labels: list[str] | None = None
        self.prompt: str | None = None

    def pick(self, labels: Sequence[str], prompt: str) -> int | None:
        self.labels = list(labels)
        self.prompt = prompt
        return self.choice


def make_project(category: str, name: str, root: str = '/home/me/workspace') -> ProjectInfo:
    return ProjectInfo(path=f'{root}/{category}/{name}', category=category, name=name)


SAMPLE_PROJECTS = (
    make_project('personal', 'beta'),
    make_project('work', 'alpha'),
    make_project('work', 'zulu'),
)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def state_path(tmp_path: Path) -> Path:
    return tmp_path / 'data' / 'ws' / 'state.json'


@pytest.fixture
def store(state_path: Path, clock: FakeClock) -> StateStore:
    """Store with an expired cache whose scanner yields SAMPLE_PROJECTS."""
    return StateStore(state_path, clock=clock, scanner=lambda workspace: SAMPLE_PROJECTS)
