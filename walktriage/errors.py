"""Exception hierarchy for walk, filter, and action failures.

Every error aborts the current walk. The underlying cause is kept as
``__cause__`` and the failing path is carried on the exception.
"""

from __future__ import annotations

from pathlib import Path


class WalkError(Exception):
    """Base class for all errors surfaced by a walk."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class TraversalError(WalkError):
    """Enumerating or stat'ing a tree entry failed."""


class ActionError(WalkError):
    """A list, delete, or archive action failed for one file."""

    def __init__(self, action: str, message: str, path: Path | None = None) -> None:
        super().__init__(message, path)
        self.action = action


class ArchiveDestinationError(ActionError):
    """Archive destination is missing or is not a directory."""

    def __init__(self, destination: Path, reason: str) -> None:
        super().__init__("archive", f"{destination}: {reason}", destination)
        self.destination = destination


__all__ = [
    "WalkError",
    "TraversalError",
    "ActionError",
    "ArchiveDestinationError",
]
