"""Per-file actions dispatched by the walk driver."""

from __future__ import annotations

from .listing import list_file
from .deletion import DELETION_RECORD_PREFIX, DELETION_TIMESTAMP_FORMAT, DeletionLog, delete_file
from .archiving import ARCHIVE_SUFFIX, archive_file, archive_target_path, check_archive_destination

__all__ = [
    "list_file",
    "DELETION_RECORD_PREFIX",
    "DELETION_TIMESTAMP_FORMAT",
    "DeletionLog",
    "delete_file",
    "ARCHIVE_SUFFIX",
    "archive_file",
    "archive_target_path",
    "check_archive_destination",
]
