"""
Shared exceptions for ws.

Domain-specific exceptions used across services. Informational outcomes
(nothing to kill, no previous session, aborted picker) are result values,
not exceptions.

Exception Hierarchy:
    WsError (base)
    ├── MultiplexerError (tmux query failures, tmux missing)
    ├── PickerError (fzf missing or crashed)
    ├── InvalidSelectionError (picker index outside the selection list)
    └── StatePersistenceError (state file could not be written)
"""

from __future__ import annotations

from pathlib import Path


class WsError(Exception):
    """Base exception for all ws errors."""


class MultiplexerError(WsError):
    """Raised when a tmux query fails or tmux cannot be executed."""


class PickerError(WsError):
    """Raised when the interactive picker cannot run."""


class InvalidSelectionError(WsError):
    """Raised when a picker index does not map to a selectable item."""

    def __init__(self, raw_index: int, item_count: int) -> None:
        self.raw_index = raw_index
        self.item_count = item_count
        super().__init__(f'Invalid selection: index {raw_index} (have {item_count} items)')


class StatePersistenceError(WsError):
    """Raised when the state file cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f'Failed to save state to {path}: {reason}')
