"""
Selectable items shown by the pick command.

SelectableItem is a closed union: consumers dispatch with `match` on the two
variants rather than calling methods on a shared base class.
"""

from __future__ import annotations

from typing import Literal

from ws.schemas.state import ProjectInfo
from ws.schemas.types import StrictModel


class SessionItem(StrictModel):
    """An already running tmux session."""

    kind: Literal['session'] = 'session'
    name: str

    @property
    def label(self) -> str:
        return f'session: {self.name}'


class ProjectItem(StrictModel):
    """A discovered project that may not have a session yet."""

    kind: Literal['project'] = 'project'
    project: ProjectInfo

    @property
    def label(self) -> str:
        return f'project: {self.project.display_name}'


SelectableItem = SessionItem | ProjectItem

SEPARATOR_LABEL = '---'
