"""Archive action: gzip a file into a mirrored tree under a destination.

The artifact for ``root/a/b/file.log`` lands at ``destination/a/b/file.log.gz``
with the source base name stored in the gzip header. Re-archiving overwrites
the previous artifact. The source file is never touched.
"""

from __future__ import annotations

import gzip
import logging
import os
import shutil
import stat
from pathlib import Path

from ..errors import ActionError, ArchiveDestinationError

logger = logging.getLogger(__name__)

ARCHIVE_SUFFIX = ".gz"


def check_archive_destination(destination: Path) -> None:
    """Raise ``ArchiveDestinationError`` unless ``destination`` is an existing directory."""
    try:
        info = destination.stat()
    except FileNotFoundError as exc:
        raise ArchiveDestinationError(destination, "no such directory") from exc
    except OSError as exc:
        raise ArchiveDestinationError(destination, exc.strerror or str(exc)) from exc
    if not stat.S_ISDIR(info.st_mode):
        raise ArchiveDestinationError(destination, "is not a directory")


def archive_target_path(destination: Path, root: Path, path: Path) -> Path:
    """Return where the artifact for ``path`` is written under ``destination``."""
    if path == root:
        return destination / f"{path.name}{ARCHIVE_SUFFIX}"
    relative_dir = os.path.relpath(path.parent, root)
    return destination / relative_dir / f"{path.name}{ARCHIVE_SUFFIX}"


def archive_file(destination: Path, root: Path, path: Path) -> Path:
    """Compress ``path`` into its mirrored location and return the artifact path.

    Intermediate directories below ``destination`` are created; the
    destination itself must already exist. A partially written artifact is
    left in place when compression fails.
    """
    check_archive_destination(destination)
    try:
        target = archive_target_path(destination, root, path)
    except ValueError as exc:
        raise ActionError("archive", f"{path}: not relative to {root}: {exc}", path) from exc

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "wb") as raw_out, open(path, "rb") as source:
            with gzip.GzipFile(filename=path.name, mode="wb", fileobj=raw_out, mtime=0) as compressed:
                shutil.copyfileobj(source, compressed)
    except OSError as exc:
        raise ActionError("archive", f"{path}: {exc.strerror or exc}", path) from exc

    logger.debug("archived %s -> %s", path, target)
    return target


__all__ = [
    "ARCHIVE_SUFFIX",
    "check_archive_destination",
    "archive_target_path",
    "archive_file",
]
