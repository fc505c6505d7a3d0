"""
Pydantic models for the persisted ws state file.

The state file holds a single StateRecord:

    {
      "version": 1,
      "history": ["api", "dotfiles"],
      "cache": {
        "projects": [{"path": "/home/me/workspace/work/api", "category": "work", "name": "api"}],
        "updated_at": 1760000000,
        "ttl": 3600
      }
    }

Every field has a default so a partial file still loads. Unknown fields are
preserved (see StateModel).
"""

from __future__ import annotations

from ws.schemas.types import StateModel, StrictModel

STATE_VERSION = 1
DEFAULT_CACHE_TTL_SECONDS = 3600


class ProjectInfo(StateModel):
    """A project directory discovered at workspace/<category>/<name>."""

    path: str
    category: str
    name: str

    @property
    def display_name(self) -> str:
        return f'{self.category}/{self.name}'

    @property
    def session_name(self) -> str:
        """tmux session name; tmux rejects `.` and `:` in session names."""
        return self.name.replace('.', '_').replace(':', '_')


class ProjectCache(StateModel):
    """Scan results plus the timestamp they were taken at."""

    projects: tuple[ProjectInfo, ...] = ()
    updated_at: int = 0  # Epoch seconds, 0 = never scanned
    ttl: int = DEFAULT_CACHE_TTL_SECONDS

    def is_valid(self, now: int) -> bool:
        return now - self.updated_at < self.ttl


class StateRecord(StateModel):
    """The sole unit of durable state."""

    version: int = STATE_VERSION
    history: tuple[str, ...] = ()  # Newest last
    cache: ProjectCache = ProjectCache()


class SessionInfo(StrictModel):
    """A live tmux session as reported by list-sessions. Never persisted."""

    name: str
    last_active: int
