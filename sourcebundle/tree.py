# sourcebundle/tree.py

"""
Filesystem traversal and selection.

This module decides which files end up in a bundle. :class:`PathFilter` holds
the pure selection predicates, and :func:`scan_tree` walks a directory with
them, producing the ordered list of candidate paths.

Traversal is deterministic (case-insensitive sorting inside each directory),
does not follow symbolic links to directories, and relies on strict
pruning-based filtering: if a directory is skipped, its entire subtree is
skipped. Unlike per-file reads, traversal is all-or-nothing: any entry that
cannot be inspected aborts the scan with :class:`~sourcebundle.errors.TraversalError`.
"""


from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from sourcebundle.config import ScanConfig
from sourcebundle.errors import TraversalError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathFilter:
    """
    Selection predicates for directories and files.

    Parameters
    ----------
    valid_extensions : frozenset[str]
        Lowercase, dot-prefixed extensions eligible for collection.
    skip_extensions : frozenset[str]
        Lowercase, dot-prefixed extensions excluded even when valid.
    skip_folders : frozenset[str]
        Exact directory names that are never descended into.
    """

    valid_extensions: frozenset[str]
    skip_extensions: frozenset[str] = frozenset()
    skip_folders: frozenset[str] = frozenset()

    @classmethod
    def from_config(cls, config: ScanConfig) -> PathFilter:
        return cls(
            valid_extensions=config.valid_extensions,
            skip_extensions=config.skip_extensions,
            skip_folders=config.skip_folders,
        )

    def should_descend(self, folder_name: str) -> bool:
        """Return ``False`` iff ``folder_name`` is exactly a skipped folder name."""

        return folder_name not in self.skip_folders

    def should_collect(self, extension: str) -> bool:
        """
        Return ``True`` if a file with ``extension`` belongs in the bundle.

        The extension is compared on its lowercase form. An empty extension
        is never collected, and the skip set takes precedence over the valid
        set.
        """

        ext = extension.lower()
        if not ext:
            return False
        return ext in self.valid_extensions and ext not in self.skip_extensions


def _check_name(dirpath: Path, name: str) -> str:
    # Names that are not valid text cannot be written into a UTF-8 report.
    try:
        name.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise TraversalError(
            f"Path is not valid text: {dirpath / name!r}", path=dirpath / name
        ) from exc
    return name


def _raise_traversal_error(error: OSError) -> None:
    path = error.filename
    raise TraversalError(f"Cannot read '{path}': {error.strerror or error}", path=path) from error


def scan_tree(root: Path, path_filter: PathFilter) -> list[Path]:
    """
    Walk ``root`` and return the files selected by ``path_filter``.

    Directory traversal follows ``pathlib.Path.walk`` semantics (top-down,
    symbolic links are not followed). Directory pruning is performed in-place
    so skipped folders are never listed. Within each directory, entries are
    visited in case-insensitive name order; the files of a directory come
    before the contents of its subdirectories.

    Every decision is reported on this module's logger at ``DEBUG`` level.

    Parameters
    ----------
    root : pathlib.Path
        Directory to walk. It is never pruned itself, even if its name is a
        skipped folder name.
    path_filter : PathFilter
        Predicates deciding what to descend into and what to collect.

    Returns
    -------
    list[pathlib.Path]
        Candidate files, each rooted under ``root`` exactly as given.

    Raises
    ------
    TraversalError
        If a directory cannot be listed, or if a directory name or the name
        of a collected file is not valid text. No partial result is returned.
    """

    found: list[Path] = []

    for dirpath, dirnames, filenames in root.walk(on_error=_raise_traversal_error):
        logger.debug("Checking path: %s", dirpath)

        kept = []
        for name in dirnames:
            _check_name(dirpath, name)
            if path_filter.should_descend(name):
                kept.append(name)
            else:
                logger.debug("Skipping folder: %s", dirpath / name)
        # Prune dirs in-place + stable sort
        dirnames[:] = sorted(kept, key=lambda n: (n.casefold(), n))

        for name in sorted(filenames, key=lambda n: (n.casefold(), n)):
            p = dirpath / name
            logger.debug("Checking path: %s", p)

            ext = p.suffix.lower()
            if not ext:
                continue

            if path_filter.should_collect(ext):
                _check_name(dirpath, name)
                logger.debug("Found valid file: %s", p)
                found.append(p)
            elif ext in path_filter.skip_extensions:
                logger.debug("Skipping file: %s (extension %s is in skip list)", p, ext)
            else:
                logger.debug("Skipping file: %s (extension %s is not valid)", p, ext)

    return found
