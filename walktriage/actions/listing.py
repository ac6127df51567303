"""List action: write one qualifying path per line."""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

from ..errors import ActionError


def list_file(path: Path, out: TextIO) -> None:
    """Write ``path`` followed by a newline to ``out``."""
    try:
        out.write(f"{path}\n")
    except (OSError, ValueError) as exc:
        raise ActionError("list", f"{path}: cannot write listing: {exc}", path) from exc


__all__ = ["list_file"]
