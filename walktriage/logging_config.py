"""Diagnostic logging setup for the ``walktriage`` logger.

Diagnostics go to stderr so stdout carries only listed paths. Deletion
records are written to their own sink and never pass through ``logging``.

Environment Variables:
    WALKTRIAGE_LOG_LEVEL - Set log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

LOGGER_NAME = "walktriage"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(verbose: bool) -> int:
    override = os.environ.get("WALKTRIAGE_LOG_LEVEL", "").strip().upper()
    if override:
        level = logging.getLevelName(override)
        if isinstance(level, int):
            return level
    return logging.DEBUG if verbose else logging.WARNING


def configure_logging(verbose: bool = False, stream: TextIO | None = None) -> logging.Logger:
    """Install a single stderr handler on the package logger and return it.

    Existing handlers are cleared so repeated CLI invocations in one process
    do not duplicate output.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    level = _resolve_level(verbose)
    logger.setLevel(level)
    logger.propagate = False

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT))
    logger.addHandler(handler)
    return logger
