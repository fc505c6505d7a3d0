"""
Selection list for the pick command.

Live sessions and cached projects are flattened into one list of display
labels. Inside tmux, when both groups are non-empty, a separator row sits
between them:

    index  label
    0      session: api
    1      session: dotfiles
    2      ---                  <- separator, not selectable
    3      project: personal/blog
    4      project: work/api

The picker returns an index into the labels; SelectionList.resolve maps it
back to the item, skipping over the separator slot.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ws.exceptions import InvalidSelectionError
from ws.schemas.selection import SEPARATOR_LABEL, ProjectItem, SelectableItem, SessionItem
from ws.schemas.state import ProjectInfo, SessionInfo

__all__ = ['SelectionList', 'build_selection', 'resolve_index']


def resolve_index(raw_index: int, session_count: int, separator_present: bool) -> int | None:
    """
    Map a picker index to an index into the logical (separator-free) item list.

    Args:
        raw_index: Index into the displayed labels
        session_count: Number of session rows preceding the separator
        separator_present: Whether a separator row was inserted

    Returns:
        Logical index, or None if the separator row itself was chosen.
        The result is not bounds-checked.
    """
    if separator_present:
        if raw_index == session_count:
            return None
        if raw_index > session_count:
            return raw_index - 1
    return raw_index


@dataclass(frozen=True)
class SelectionList:
    """Items in picker order, plus the labels actually displayed."""

    items: tuple[SelectableItem, ...]
    labels: tuple[str, ...]
    session_count: int
    separator_present: bool

    def resolve(self, raw_index: int) -> SelectableItem | None:
        """
        Map a picker index back to the chosen item.

        Returns:
            The item, or None if the separator row was chosen

        Raises:
            InvalidSelectionError: If the index does not land on an item
        """
        logical = resolve_index(raw_index, self.session_count, self.separator_present)
        if logical is None:
            return None
        if not 0 <= logical < len(self.items):
            raise InvalidSelectionError(raw_index, len(self.items))
        return self.items[logical]


def build_selection(
    sessions: Sequence[SessionInfo],
    projects: Sequence[ProjectInfo],
    inside_multiplexer: bool,
) -> SelectionList:
    """
    Merge sessions and projects into one selection list.

    Sessions come first in the order given, then projects in cache order.
    The separator is only inserted inside tmux and only when both groups
    have at least one entry.
    """
    items: list[SelectableItem] = [SessionItem(name=s.name) for s in sessions]
    items.extend(ProjectItem(project=p) for p in projects)

    labels = [item.label for item in items]
    separator_present = inside_multiplexer and bool(sessions) and bool(projects)
    if separator_present:
        labels.insert(len(sessions), SEPARATOR_LABEL)

    return SelectionList(
        items=tuple(items),
        labels=tuple(labels),
        session_count=len(sessions),
        separator_present=separator_present,
    )
