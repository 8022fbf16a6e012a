# sourcebundle/cli.py

"""
Command-line interface.

Usage:
    sourcebundle <directory>
    sourcebundle <directory> -o bundle.txt --skip .csv --skip-folders node_modules .git
    sourcebundle <directory> --extensions .py .toml --full-path -v

Exit codes
----------
  0   Success: report written, or no matching files (nothing written)
  2   Error: invalid arguments, unreadable tree, unwritable report
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from enum import IntEnum
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from sourcebundle import __version__
from sourcebundle.pipeline import BundleStatus, bundle
from sourcebundle.config import ScanConfig
from sourcebundle.errors import BundleError

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


class ExitCode(IntEnum):
    SUCCESS = 0
    ERROR = 2


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Route the package logger to stderr through rich, replacing earlier handlers."""

    logger = logging.getLogger("sourcebundle")
    logger.setLevel(level)
    logger.handlers.clear()

    handler = RichHandler(
        console=err_console,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger


def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="sourcebundle",
        description="Finds specified files in a directory and creates a summary.",
    )
    p.add_argument("directory", type=Path, help="The directory to search in")
    p.add_argument(
        "-o", "--output",
        type=Path,
        default=Path("summary.txt"),
        help="Output summary file name (default: summary.txt)",
    )
    p.add_argument(
        "-s", "--skip",
        nargs="+",
        default=[],
        metavar="EXT",
        help="List of extensions to skip (e.g. .ico .jpg)",
    )
    p.add_argument(
        "-e", "--extensions",
        nargs="+",
        default=None,
        metavar="EXT",
        help="List of valid extensions to look for, replacing the built-in set (e.g. .txt .dart .json)",
    )
    p.add_argument(
        "--full-path",
        action="store_true",
        help="Include full paths in the output",
    )
    p.add_argument(
        "--skip-folders",
        nargs="+",
        default=[],
        metavar="NAME",
        help="List of folder names to skip (e.g. folder1 folder2)",
    )
    p.add_argument(
        "-j", "--workers",
        type=_positive_int,
        default=None,
        metavar="N",
        help="Number of files read in parallel (default: CPU count)",
    )
    p.add_argument(
        "--encoding",
        default="utf-8",
        help="Text encoding used to read files (default: utf-8)",
    )
    verbosity = p.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every traversal decision",
    )
    verbosity.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only log errors",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.INFO
    setup_logging(level)

    try:
        config = ScanConfig.create(
            args.directory,
            extensions=args.extensions,
            skip=args.skip,
            skip_folders=args.skip_folders,
            full_path=args.full_path,
            encoding=args.encoding,
        )
        result = bundle(config, args.output, max_workers=args.workers)
    except BundleError as exc:
        err_console.print(f"error: {exc}", style="bold red", markup=False, soft_wrap=True)
        return ExitCode.ERROR

    if result.status is BundleStatus.NO_OP:
        console.print("No matching files found.", markup=False, soft_wrap=True)
        return ExitCode.SUCCESS

    message = f"Summary created: {result.output} ({result.file_count} files"
    if result.failed_count:
        message += f", {result.failed_count} unreadable"
    console.print(message + ")", markup=False, soft_wrap=True)
    return ExitCode.SUCCESS
