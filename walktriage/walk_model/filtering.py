"""Skip predicate applied to every traversal entry."""

from __future__ import annotations

from pathlib import Path

from .types import TraversalEntry


def file_extension(path: Path) -> str:
    """Return the substring from the last ``.`` of the base name, or ``""``."""
    name = path.name
    dot = name.rfind(".")
    if dot < 0:
        return ""
    return name[dot:]


def should_skip(path: Path, extension: str, min_size: int, entry: TraversalEntry) -> bool:
    """Return whether ``entry`` is excluded from the walk's action.

    Directories are always skipped, then files below ``min_size`` bytes, then
    files whose extension differs from a non-empty ``extension``.
    """
    if entry.is_dir or entry.size < min_size:
        return True
    if extension and file_extension(path) != extension:
        return True
    return False


__all__ = ["file_extension", "should_skip"]
