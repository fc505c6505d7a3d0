"""
Recently visited sessions.

History is a tuple of session names ordered oldest to newest, each name at
most once. All functions are pure and return a new tuple.
"""

from __future__ import annotations

from collections.abc import Sequence

MAX_HISTORY_SIZE = 10


def push_history(history: Sequence[str], name: str, max_size: int = MAX_HISTORY_SIZE) -> tuple[str, ...]:
    """
    Record a visit to `name`.

    An existing occurrence is moved to the newest position rather than
    duplicated. The oldest entries are evicted beyond `max_size`.
    """
    updated = [entry for entry in history if entry != name]
    updated.append(name)
    return tuple(updated[-max_size:])


def previous_session(history: Sequence[str]) -> str | None:
    """
    The session `back` returns to.

    Second-to-last entry when there are at least two, the only entry when
    there is exactly one, None for an empty history.
    """
    if len(history) >= 2:
        return history[-2]
    if history:
        return history[-1]
    return None


def remove_session(history: Sequence[str], name: str) -> tuple[str, ...]:
    """Drop every occurrence of `name`, keeping the order of the rest."""
    return tuple(entry for entry in history if entry != name)


def normalize_history(history: Sequence[str], max_size: int = MAX_HISTORY_SIZE) -> tuple[str, ...]:
    """Drop duplicates, keeping each name's newest position, then apply the bound."""
    updated: list[str] = []
    for name in history:
        updated = [entry for entry in updated if entry != name]
        updated.append(name)
    return tuple(updated[-max_size:])
