"""
Project discovery.

A project is any directory exactly two levels below the workspace root:

    ~/workspace/<category>/<name>

Symlinks are not followed, hidden directories are included, and anything
that cannot be read is skipped. The result is sorted by (category, name) so
picker indexes are stable across runs on an unchanged filesystem.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from ws.schemas.state import ProjectInfo

__all__ = ['scan_projects']

logger = logging.getLogger(__name__)


def scan_projects(workspace: Path) -> tuple[ProjectInfo, ...]:
    """
    Enumerate projects under a workspace root.

    Args:
        workspace: Workspace root, already `~`-expanded

    Returns:
        ProjectInfo for every workspace/<category>/<name> directory,
        sorted by (category, name)
    """
    root = Path(workspace).absolute()
    projects = [
        ProjectInfo(path=entry.path, category=category.name, name=entry.name)
        for category in _iter_directories(root)
        if _is_representable(category.name)
        for entry in _iter_directories(category.path)
        if _is_representable(entry.name)
    ]
    projects.sort(key=lambda p: (p.category, p.name))
    return tuple(projects)


def _iter_directories(parent: Path | str) -> Iterator[os.DirEntry[str]]:
    """Yield real (non-symlink) subdirectories, skipping unreadable ones."""
    try:
        with os.scandir(parent) as entries:
            children = list(entries)
    except OSError as e:
        logger.debug('Skipping unreadable directory %s: %s', parent, e)
        return

    for child in children:
        try:
            if child.is_dir(follow_symlinks=False):
                yield child
        except OSError as e:
            logger.debug('Skipping %s: %s', child.path, e)


def _is_representable(name: str) -> bool:
    """
    False for names that are not valid text.

    os.scandir decodes undecodable bytes with surrogateescape; such names
    cannot be written to the JSON state file or used as tmux session names.
    """
    try:
        name.encode('utf-8')
    except UnicodeEncodeError:
        logger.debug('Skipping undecodable directory name %r', name)
        return False
    return True
