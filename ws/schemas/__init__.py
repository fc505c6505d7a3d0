"""Pydantic schemas for ws state, selection items and operation results."""

from __future__ import annotations

from ws.schemas.operations import BackResult, KillResult, PickResult, RefreshResult
from ws.schemas.selection import SEPARATOR_LABEL, ProjectItem, SelectableItem, SessionItem
from ws.schemas.state import STATE_VERSION, ProjectCache, ProjectInfo, SessionInfo, StateRecord

__all__ = [
    'BackResult',
    'KillResult',
    'PickResult',
    'ProjectCache',
    'ProjectInfo',
    'ProjectItem',
    'RefreshResult',
    'SEPARATOR_LABEL',
    'STATE_VERSION',
    'SelectableItem',
    'SessionInfo',
    'SessionItem',
    'StateRecord',
]
