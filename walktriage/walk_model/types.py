"""Domain datatypes for traversal entries, walk options, and actions."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TextIO


@dataclass(frozen=True)
class TraversalEntry:
    """One visited filesystem node observed with ``lstat`` semantics."""

    path: Path
    is_dir: bool
    size: int = 0


@dataclass(frozen=True)
class ListAction:
    """Write qualifying paths to the list sink."""


@dataclass(frozen=True)
class DeleteAction:
    """Remove qualifying files and record each removal."""


@dataclass(frozen=True)
class ArchiveAction:
    """Gzip qualifying files into a mirrored tree under ``destination``."""

    destination: Path


WalkAction = ListAction | DeleteAction | ArchiveAction


@dataclass(frozen=True)
class WalkOptions:
    """Options bundle handed from the CLI layer to the walk driver.

    ``extension`` is an exact-match filter (empty disables it) and
    ``min_size`` is an inclusive lower bound in bytes. ``log_sink`` receives
    deletion records and must be supplied whenever deletion can run.
    """

    extension: str = ""
    min_size: int = 0
    list_enabled: bool = False
    delete_enabled: bool = False
    archive_destination: Path | None = None
    log_sink: TextIO | None = None

    def action(self) -> WalkAction:
        """Resolve flag booleans into the single action the walk performs.

        Precedence is list, then delete, then archive; with nothing set the
        walk lists.
        """
        if self.list_enabled:
            return ListAction()
        if self.delete_enabled:
            return DeleteAction()
        if self.archive_destination is not None:
            return ArchiveAction(self.archive_destination)
        return ListAction()


@dataclass(frozen=True)
class WalkSummary:
    """Counters reported after a completed walk."""

    visited: int = 0
    skipped: int = 0
    acted: int = 0


__all__ = [
    "TraversalEntry",
    "ListAction",
    "DeleteAction",
    "ArchiveAction",
    "WalkAction",
    "WalkOptions",
    "WalkSummary",
]
