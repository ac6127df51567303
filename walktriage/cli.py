"""Command-line front door for walktriage.

Parses flags, fills unset ones from persisted defaults, and opens the
deletion log. Then hands a ``WalkOptions`` bundle to the walk driver and maps
walk errors to a non-zero exit status.
"""

from __future__ import annotations

import argparse
import contextlib
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import TextIO

from . import config
from .errors import WalkError
from .logging_config import configure_logging
from .walk import run
from .walk_model import DeleteAction, WalkOptions

logger = logging.getLogger(__name__)


def _nonnegative_int(value: str) -> int:
    """argparse type for byte sizes."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def _escape_undecodable_names(stream: TextIO) -> TextIO:
    """Let ``stream`` round-trip path names that are not valid in its encoding.

    Undecodable bytes in names arrive as lone surrogates; ``surrogateescape``
    writes them back as the original bytes instead of failing.
    """
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape")
    return stream


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="walktriage",
        description="Walk a directory tree and list, delete, or archive matching files.",
    )
    parser.add_argument("--root", default=".", help="Root directory to start from (default: current directory).")
    parser.add_argument("--log", default=None, help="Append deletion records to this file (default: stdout).")
    parser.add_argument("--ext", default=None, help="Only act on files with this exact extension, e.g. .log.")
    parser.add_argument(
        "--size",
        type=_nonnegative_int,
        default=None,
        help="Only act on files of at least this many bytes.",
    )
    parser.add_argument("--list", action="store_true", help="List matching files only.")
    parser.add_argument("--del", dest="delete", action="store_true", help="Delete matching files.")
    parser.add_argument("--archive", default=None, metavar="DIR", help="Gzip matching files into DIR.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log diagnostics to stderr.")
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Remember --ext, --size and --log as defaults for later runs.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run one walk.

    Flags left unset fall back to the persisted config, then to built-in
    defaults. Any ``WalkError`` exits with status 1 and a message on stderr.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    extension = args.ext if args.ext is not None else config.load_default_extension()
    min_size = args.size if args.size is not None else config.load_default_min_size()
    log_path = Path(args.log) if args.log else config.load_default_log_path()
    archive_destination = Path(args.archive) if args.archive else None

    if args.save_defaults:
        config.save_defaults(extension, min_size, log_path)
        logger.info("saved defaults to %s", config.CONFIG_PATH)

    options = WalkOptions(
        extension=extension,
        min_size=min_size,
        list_enabled=args.list,
        delete_enabled=args.delete,
        archive_destination=archive_destination,
    )
    if args.delete and archive_destination is not None and not args.list:
        logger.warning("--del takes precedence; --archive %s is ignored", archive_destination)

    with contextlib.ExitStack() as stack:
        if isinstance(options.action(), DeleteAction):
            if log_path is None:
                log_sink = _escape_undecodable_names(sys.stdout)
            else:
                try:
                    log_sink = stack.enter_context(open(log_path, "a", encoding="utf-8", errors="surrogateescape"))
                except OSError as exc:
                    raise SystemExit(f"walktriage: cannot open log {log_path}: {exc.strerror or exc}") from exc
            options = replace(options, log_sink=log_sink)

        try:
            summary = run(Path(args.root), _escape_undecodable_names(sys.stdout), options)
        except WalkError as exc:
            raise SystemExit(f"walktriage: {exc}") from exc

    logger.info(
        "visited %d entries, skipped %d, acted on %d",
        summary.visited,
        summary.skipped,
        summary.acted,
    )


if __name__ == "__main__":
    main()
