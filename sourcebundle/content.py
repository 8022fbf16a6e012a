# sourcebundle/content.py

"""
File content extraction.

This module turns candidate paths into :class:`FileRecord` objects: the path
string shown in the report plus the file's text. Reads are independent, so
:func:`load_files` spreads them over a thread pool and then restores the
original order by index. Report order therefore always follows traversal
order, never worker-completion order.

Read failures are recovered here. A file that cannot be opened or decoded is
logged at ``ERROR`` level and yields a record without content; it never
aborts the run.
"""


from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path

from sourcebundle.config import ScanConfig
from sourcebundle.errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileRecord:
    """One collected file: its display path and its text, or ``None`` if unreadable."""

    display_path: str
    content: str | None


def display_path(path: Path, root: Path, full_path: bool) -> str:
    """
    Compute the path string written into the report for ``path``.

    Parameters
    ----------
    path : pathlib.Path
        Candidate path as produced by the tree scan.
    root : pathlib.Path
        Scan root the candidate was found under.
    full_path : bool
        If ``True``, return ``path`` unchanged (absolute or relative, exactly
        as the scan produced it). Otherwise return it relative to ``root``.

    Returns
    -------
    str
        The display path.

    Raises
    ------
    ConfigurationError
        If relative display is requested and ``path`` is not under ``root``.
    """

    if full_path:
        return str(path)
    try:
        return str(path.relative_to(root))
    except ValueError as exc:
        raise ConfigurationError(
            f"'{path}' is not under the scan root '{root}'", path=path
        ) from exc


def read_file(path: Path, *, encoding: str = "utf-8") -> str:
    """
    Return the full text of ``path``.

    Newlines are kept exactly as stored on disk and decoding is strict.

    Raises
    ------
    OSError
        If the file cannot be read.
    UnicodeDecodeError
        If the file cannot be decoded using ``encoding``.
    """

    with path.open("r", encoding=encoding, newline="") as f:
        return f.read()


def _read_record(path: Path, shown: str, encoding: str) -> FileRecord:
    try:
        content = read_file(path, encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Error reading file %s: %s", path, exc)
        return FileRecord(shown, None)
    return FileRecord(shown, content)


def load_file(path: Path, config: ScanConfig) -> FileRecord:
    """Read a single candidate into a :class:`FileRecord`."""

    return _read_record(
        path, display_path(path, config.root, config.full_path), config.encoding
    )


def load_files(
    paths: Sequence[Path],
    config: ScanConfig,
    *,
    max_workers: int | None = None,
) -> list[FileRecord]:
    """
    Read every candidate in parallel and return records in input order.

    Display paths are computed before any read is scheduled, so an
    inconsistent candidate fails the whole call up front.

    Parameters
    ----------
    paths : Sequence[pathlib.Path]
        Candidates in traversal order.
    config : ScanConfig
        Provides the root, the display mode and the text encoding.
    max_workers : int | None, optional
        Size of the worker pool. ``None`` uses ``os.cpu_count()``.

    Returns
    -------
    list[FileRecord]
        One record per input path, ``records[i]`` matching ``paths[i]``.

    Raises
    ------
    ConfigurationError
        If a candidate is not under ``config.root`` in relative display mode.
    ValueError
        If ``max_workers`` is lower than 1.
    """

    shown = [display_path(p, config.root, config.full_path) for p in paths]
    if not paths:
        return []

    if max_workers is None:
        max_workers = os.cpu_count() or 1
    if max_workers < 1:
        raise ValueError(f"max_workers must be at least 1, got {max_workers}")

    records: list[FileRecord | None] = [None] * len(paths)

    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="sourcebundle") as executor:
        future_to_index = {
            executor.submit(_read_record, p, s, config.encoding): i
            for i, (p, s) in enumerate(zip(paths, shown))
        }
        for future in as_completed(future_to_index):
            records[future_to_index[future]] = future.result()

    logger.debug("Loaded %d files with %d workers", len(records), max_workers)
    return records  # type: ignore[return-value]
