"""
Operation result schemas.

Each CLI command returns one of these from SessionSwitcher. A `None` target
means the command resolved to an informational no-op.
"""

from __future__ import annotations

from typing import Literal

from ws.schemas.types import StrictModel


class PickResult(StrictModel):
    """Outcome of the pick command."""

    session_name: str | None  # None = aborted or separator chosen
    created: bool = False  # True if a project session was materialized
    cache_refreshed: bool = False


class KillResult(StrictModel):
    """Outcome of the kill command."""

    killed: str | None  # None = nothing to kill or aborted
    reason: Literal['killed', 'no_sessions', 'aborted'] = 'killed'
    switched_to: str | None = None  # Fallback session after killing the focused one


class BackResult(StrictModel):
    """Outcome of the back command."""

    session_name: str | None  # None = no previous session in history


class RefreshResult(StrictModel):
    """Outcome of the refresh command."""

    project_count: int
    updated_at: int
