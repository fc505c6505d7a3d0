"""Tests for the Typer command-line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from conftest import FakePicker, FakeTmux
from typer.testing import CliRunner

from ws.cli import main as cli_main
from ws.config.cli import CliSettings
from ws.exceptions import PickerError

runner = CliRunner()


class FailingPicker:
    def pick(self, labels: object, prompt: str) -> int | None:
        raise PickerError('Failed to run fzf: not found')


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    root = tmp_path / 'workspace'
    for rel in ('work/alpha', 'work/zulu', 'personal/beta'):
        (root / rel).mkdir(parents=True)
    return root


@pytest.fixture
def state_file(tmp_path: Path) -> Path:
    return tmp_path / 'state' / 'state.json'


@pytest.fixture
def wire(monkeypatch: pytest.MonkeyPatch, workspace: Path, state_file: Path):
    """Point the CLI at temp paths and replace tmux/fzf with fakes."""

    def _wire(tmux: FakeTmux, picker: object) -> None:
        monkeypatch.setattr(cli_main, 'settings', CliSettings(STATE_FILE=state_file, WORKSPACE=str(workspace)))
        monkeypatch.setattr(cli_main, 'TmuxClient', lambda **kwargs: tmux)
        monkeypatch.setattr(cli_main, 'FzfPicker', lambda **kwargs: picker)

    return _wire


def test_refresh_reports_project_count(wire, state_file: Path) -> None:
    wire(FakeTmux([]), FakePicker(None))

    result = runner.invoke(cli_main.app, ['refresh'])

    assert result.exit_code == 0, result.output
    assert 'Cache refreshed: 3 projects found' in result.output
    saved = json.loads(state_file.read_text())
    assert [p['name'] for p in saved['cache']['projects']] == ['beta', 'alpha', 'zulu']


def test_refresh_with_explicit_workspace(wire, tmp_path: Path) -> None:
    other = tmp_path / 'other'
    (other / 'misc' / 'only').mkdir(parents=True)
    wire(FakeTmux([]), FakePicker(None))

    result = runner.invoke(cli_main.app, ['refresh', '--workspace', str(other)])

    assert result.exit_code == 0, result.output
    assert 'Cache refreshed: 1 projects found' in result.output


def test_refresh_expands_home(wire, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('HOME', str(tmp_path))
    (tmp_path / 'code' / 'misc' / 'tool').mkdir(parents=True)
    wire(FakeTmux([]), FakePicker(None))

    result = runner.invoke(cli_main.app, ['refresh', '-w', '~/code'])

    assert 'Cache refreshed: 1 projects found' in result.output


def test_pick_project_creates_session(wire, state_file: Path, workspace: Path) -> None:
    tmux = FakeTmux([], inside=True)
    wire(tmux, FakePicker(1))

    result = runner.invoke(cli_main.app, ['pick'])

    assert result.exit_code == 0, result.output
    assert 'Created session alpha' in result.output
    assert tmux.calls == [('create', 'alpha', str(workspace / 'work' / 'alpha')), ('switch', 'alpha')]
    assert json.loads(state_file.read_text())['history'] == ['alpha']


def test_pick_abort_exits_cleanly(wire) -> None:
    tmux = FakeTmux(['api'], inside=True)
    wire(tmux, FakePicker(None))

    result = runner.invoke(cli_main.app, ['pick'])

    assert result.exit_code == 0
    assert tmux.calls == []


def test_pick_picker_failure_exits_nonzero(wire) -> None:
    wire(FakeTmux([]), FailingPicker())

    result = runner.invoke(cli_main.app, ['pick'])

    assert result.exit_code == 1
    assert 'Error: Failed to run fzf' in result.output


def test_kill_without_sessions_is_a_notice(wire) -> None:
    wire(FakeTmux([]), FakePicker(0))

    result = runner.invoke(cli_main.app, ['kill'])

    assert result.exit_code == 0
    assert 'No sessions to kill' in result.output


def test_kill_reports_fallback(wire, state_file: Path) -> None:
    state_file.parent.mkdir(parents=True)
    state_file.write_text(json.dumps({'history': ['P', 'S']}))
    wire(FakeTmux(['P', 'S'], current='S'), FakePicker(1))

    result = runner.invoke(cli_main.app, ['kill'])

    assert result.exit_code == 0, result.output
    assert 'Killed session S' in result.output
    assert 'Switched to: P' in result.output
    assert json.loads(state_file.read_text())['history'] == ['P']


def test_kill_refused_by_tmux_exits_nonzero(wire, state_file: Path) -> None:
    state_file.parent.mkdir(parents=True)
    state_file.write_text(json.dumps({'history': ['P', 'S']}))
    tmux = FakeTmux(['P', 'S'], current='S')
    tmux.kill_ok = False
    wire(tmux, FakePicker(1))

    result = runner.invoke(cli_main.app, ['kill'])

    assert result.exit_code == 1
    assert 'Error: Failed to kill session S' in result.output
    assert 'Killed session' not in result.output
    assert json.loads(state_file.read_text())['history'] == ['P', 'S']


def test_back_without_history_is_a_notice(wire) -> None:
    wire(FakeTmux([]), FakePicker(None))

    result = runner.invoke(cli_main.app, ['back'])

    assert result.exit_code == 0
    assert 'No previous session in history' in result.output


def test_back_with_corrupt_state_is_a_notice(wire, state_file: Path) -> None:
    state_file.parent.mkdir(parents=True)
    state_file.write_text('{{{ definitely not json')
    wire(FakeTmux([]), FakePicker(None))

    result = runner.invoke(cli_main.app, ['back'])

    assert result.exit_code == 0
    assert 'No previous session in history' in result.output


def test_back_switches(wire, state_file: Path) -> None:
    state_file.parent.mkdir(parents=True)
    state_file.write_text(json.dumps({'history': ['A', 'B']}))
    tmux = FakeTmux(['A', 'B'])
    wire(tmux, FakePicker(None))

    result = runner.invoke(cli_main.app, ['back'])

    assert result.exit_code == 0, result.output
    assert tmux.calls == [('switch', 'A')]
    assert json.loads(state_file.read_text())['history'] == ['B', 'A']


def test_unexpected_error_exits_nonzero(wire, monkeypatch: pytest.MonkeyPatch) -> None:
    tmux = FakeTmux([])
    wire(tmux, FakePicker(None))

    def explode() -> list:
        raise RuntimeError('boom')

    monkeypatch.setattr(tmux, 'list_sessions', explode)

    result = runner.invoke(cli_main.app, ['kill'])

    assert result.exit_code == 1
    assert 'Failed to kill session: boom' in result.output
