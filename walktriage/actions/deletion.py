"""Delete action plus the append-only record of confirmed deletions."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import TextIO

from ..errors import ActionError

logger = logging.getLogger(__name__)

DELETION_RECORD_PREFIX = "DELETED FILE: "
DELETION_TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"


class DeletionLog:
    """Writes ``DELETED FILE: <timestamp> <path>`` lines to an injected sink."""

    def __init__(self, sink: TextIO, clock: Callable[[], datetime] = datetime.now) -> None:
        self.sink = sink
        self.clock = clock

    def format_record(self, path: Path) -> str:
        timestamp = self.clock().strftime(DELETION_TIMESTAMP_FORMAT)
        return f"{DELETION_RECORD_PREFIX}{timestamp} {path}\n"

    def record(self, path: Path) -> None:
        """Append one record and flush so it survives an aborted walk."""
        self.sink.write(self.format_record(path))
        self.sink.flush()


def delete_file(path: Path, deletion_log: DeletionLog) -> None:
    """Remove ``path`` and log it; nothing is logged if removal fails.

    A failing log write is still reported, after the file is already gone.
    """
    try:
        path.unlink()
    except OSError as exc:
        raise ActionError("delete", f"{path}: {exc.strerror or exc}", path) from exc

    logger.debug("deleted %s", path)
    try:
        deletion_log.record(path)
    except (OSError, ValueError) as exc:
        raise ActionError("delete", f"{path}: deleted but log write failed: {exc}", path) from exc


__all__ = [
    "DELETION_RECORD_PREFIX",
    "DELETION_TIMESTAMP_FORMAT",
    "DeletionLog",
    "delete_file",
]
