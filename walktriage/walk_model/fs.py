"""Filesystem traversal producing ordered ``TraversalEntry`` values."""

from __future__ import annotations

import os
import stat
from collections.abc import Iterator
from pathlib import Path

from ..errors import TraversalError
from .types import TraversalEntry


def stat_entry(path: Path) -> TraversalEntry:
    """Build a traversal entry for ``path`` without following symlinks.

    Raises ``TraversalError`` when ``path`` cannot be stat'ed.
    """
    try:
        info = path.lstat()
    except OSError as exc:
        raise TraversalError(f"{path}: {exc.strerror or exc}", path) from exc
    is_dir = stat.S_ISDIR(info.st_mode)
    return TraversalEntry(path=path, is_dir=is_dir, size=int(info.st_size))


def list_directory_children(directory: Path) -> list[Path]:
    """List child paths of ``directory`` sorted lexically by name.

    Children are not stat'ed here; ``walk_tree`` does that as each one is
    visited. A scan failure is raised as ``TraversalError``.
    """
    try:
        with os.scandir(directory) as entries:
            names = [child.name for child in entries]
    except OSError as exc:
        raise TraversalError(f"{directory}: {exc.strerror or exc}", directory) from exc

    names.sort()
    return [directory / name for name in names]


def walk_tree(root: Path) -> Iterator[TraversalEntry]:
    """Yield ``root`` and everything beneath it in pre-order.

    Directories are yielded before their children; siblings come in lexical
    name order. The first traversal failure is raised and ends iteration.
    """
    root_entry = stat_entry(root)
    yield root_entry
    if not root_entry.is_dir:
        return

    stack: list[Iterator[Path]] = [iter(list_directory_children(root))]
    while stack:
        child_path = next(stack[-1], None)
        if child_path is None:
            stack.pop()
            continue
        entry = stat_entry(child_path)
        yield entry
        if entry.is_dir:
            stack.append(iter(list_directory_children(entry.path)))


__all__ = [
    "stat_entry",
    "list_directory_children",
    "walk_tree",
]
