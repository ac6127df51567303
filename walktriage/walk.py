"""Walk driver: traverse, filter, and dispatch exactly one action per file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

from .actions import DeletionLog, archive_file, delete_file, list_file
from .walk_model import (
    ArchiveAction,
    DeleteAction,
    ListAction,
    WalkOptions,
    WalkSummary,
    should_skip,
    walk_tree,
)

logger = logging.getLogger(__name__)


def run(root: Path | str, list_sink: TextIO, options: WalkOptions) -> WalkSummary:
    """Walk ``root`` and apply the configured action to every qualifying file.

    The first traversal or action error propagates and stops the walk;
    entries already processed keep their effects. In archive mode each
    archived path is also written to ``list_sink``.
    """
    root = Path(root)
    action = options.action()
    deletion_log: DeletionLog | None = None
    if isinstance(action, DeleteAction):
        if options.log_sink is None:
            raise ValueError("delete mode requires a log_sink")
        deletion_log = DeletionLog(options.log_sink)

    logger.debug(
        "walking %s action=%s ext=%r min_size=%d",
        root,
        type(action).__name__,
        options.extension,
        options.min_size,
    )

    visited = skipped = acted = 0
    for entry in walk_tree(root):
        visited += 1
        if should_skip(entry.path, options.extension, options.min_size, entry):
            skipped += 1
            continue

        if isinstance(action, ListAction):
            list_file(entry.path, list_sink)
        elif isinstance(action, DeleteAction):
            delete_file(entry.path, deletion_log)
        elif isinstance(action, ArchiveAction):
            archive_file(action.destination, root, entry.path)
            list_file(entry.path, list_sink)
        acted += 1

    summary = WalkSummary(visited=visited, skipped=skipped, acted=acted)
    logger.debug("walk finished: %s", summary)
    return summary


__all__ = ["run"]
