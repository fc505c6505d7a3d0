"""
Persisted state store.

StateStore owns one StateRecord for the duration of a single command:
load at start, mutate in memory, save at the end. There is no locking;
concurrent ws invocations against the same file are not supported.

A missing or unreadable state file is a normal first-run condition and
loads as the default record. A failed save is surfaced as
StatePersistenceError.
"""

from __future__ import annotations

import logging
import os
import tempfile
import time
from collections.abc import Callable
from pathlib import Path

import pydantic

from ws.exceptions import StatePersistenceError
from ws.schemas.state import DEFAULT_CACHE_TTL_SECONDS, ProjectInfo, StateRecord
from ws.services import history
from ws.services.scanner import scan_projects

__all__ = ['StateStore', 'current_timestamp']

logger = logging.getLogger(__name__)

Clock = Callable[[], int]
Scanner = Callable[[Path], tuple[ProjectInfo, ...]]


def current_timestamp() -> int:
    """Current time in whole epoch seconds."""
    return int(time.time())


class StateStore:
    """
    Load/save wrapper around StateRecord with history and cache operations.

    The record itself is immutable; every mutation replaces `self.record`
    with an updated copy.
    """

    def __init__(
        self,
        path: Path,
        record: StateRecord | None = None,
        *,
        clock: Clock = current_timestamp,
        scanner: Scanner = scan_projects,
        max_history_size: int = history.MAX_HISTORY_SIZE,
    ) -> None:
        self.path = path
        self.record = record if record is not None else StateRecord()
        self.clock = clock
        self.scanner = scanner
        self.max_history_size = max_history_size

    @classmethod
    def load(
        cls,
        path: Path,
        *,
        clock: Clock = current_timestamp,
        scanner: Scanner = scan_projects,
        max_history_size: int = history.MAX_HISTORY_SIZE,
        cache_ttl: int = DEFAULT_CACHE_TTL_SECONDS,
    ) -> StateStore:
        """
        Read the state file, falling back to the default record.

        Never raises: I/O errors, invalid JSON and schema mismatches all
        yield an empty history and an empty, expired cache. A loaded history
        is deduplicated and bounded, and the cache takes the configured TTL.

        Args:
            path: State file location
            clock: Source of epoch seconds
            scanner: Project scanner used on cache refresh
            max_history_size: History bound applied on load and push
            cache_ttl: Cache TTL in seconds, replacing whatever the file holds
        """
        try:
            record = StateRecord.model_validate_json(path.read_bytes())
        except (OSError, pydantic.ValidationError) as e:
            logger.debug('Using default state (%s): %s', path, e)
            record = StateRecord()
        record = record.model_copy(
            update={
                'history': history.normalize_history(record.history, max_history_size),
                'cache': record.cache.model_copy(update={'ttl': cache_ttl}),
            }
        )
        return cls(path, record, clock=clock, scanner=scanner, max_history_size=max_history_size)

    def save(self) -> None:
        """
        Write the record as indented JSON, replacing the file atomically.

        Raises:
            StatePersistenceError: If the directory or file cannot be written
        """
        data = self.record.model_dump_json(indent=2) + '\n'
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f'.{self.path.name}.', dir=self.path.parent)
            try:
                with os.fdopen(fd, 'w', encoding='utf-8') as f:
                    f.write(data)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StatePersistenceError(self.path, str(e)) from e

    # -- history --------------------------------------------------------------

    @property
    def history(self) -> tuple[str, ...]:
        return self.record.history

    def push_history(self, name: str) -> None:
        updated = history.push_history(self.record.history, name, self.max_history_size)
        self.record = self.record.model_copy(update={'history': updated})

    def previous_session(self) -> str | None:
        return history.previous_session(self.record.history)

    def remove_session(self, name: str) -> None:
        updated = history.remove_session(self.record.history, name)
        self.record = self.record.model_copy(update={'history': updated})

    # -- project cache --------------------------------------------------------

    @property
    def projects(self) -> tuple[ProjectInfo, ...]:
        return self.record.cache.projects

    def cache_valid(self) -> bool:
        return self.record.cache.is_valid(self.clock())

    def refresh_cache(self, workspace: Path) -> None:
        """Rescan the workspace and stamp the cache with the current time."""
        projects = self.scanner(workspace)
        cache = self.record.cache.model_copy(update={'projects': projects, 'updated_at': self.clock()})
        self.record = self.record.model_copy(update={'cache': cache})
        logger.debug('Scanned %d projects under %s', len(projects), workspace)

    def ensure_cache_valid(self, workspace: Path) -> bool:
        """
        Refresh the cache only if it has expired.

        Returns:
            True if a rescan happened
        """
        if self.cache_valid():
            return False
        self.refresh_cache(workspace)
        return True
