"""Domain model for tree traversal and entry filtering.

This package contains the non-action walk primitives:
- traversal entry, option, and action datatypes
- ordered filesystem traversal
- the skip predicate
"""

from __future__ import annotations

from .types import (
    ArchiveAction,
    DeleteAction,
    ListAction,
    TraversalEntry,
    WalkAction,
    WalkOptions,
    WalkSummary,
)
from .fs import list_directory_children, stat_entry, walk_tree
from .filtering import file_extension, should_skip

__all__ = [
    "TraversalEntry",
    "ListAction",
    "DeleteAction",
    "ArchiveAction",
    "WalkAction",
    "WalkOptions",
    "WalkSummary",
    "stat_entry",
    "list_directory_children",
    "walk_tree",
    "file_extension",
    "should_skip",
]
