# sourcebundle/pipeline.py

"""
End-to-end bundling pipeline: scan, load, write.

The pipeline is linear and stateless. It either writes a report
(:attr:`BundleStatus.SUCCESS`), finds nothing to bundle and writes nothing
(:attr:`BundleStatus.NO_OP`), or raises a
:class:`~sourcebundle.errors.BundleError` subclass.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from pathlib import Path

from sourcebundle.config import ScanConfig
from sourcebundle.content import FileRecord, load_files
from sourcebundle.report import write_report
from sourcebundle.tree import PathFilter, scan_tree

logger = logging.getLogger(__name__)


class BundleStatus(enum.Enum):
    SUCCESS = "success"
    NO_OP = "no_op"


@dataclass(frozen=True)
class BundleResult:
    status: BundleStatus
    output: Path | None = None
    records: tuple[FileRecord, ...] = ()

    @property
    def file_count(self) -> int:
        return len(self.records)

    @property
    def failed_count(self) -> int:
        """Number of records whose content could not be read."""
        return sum(1 for r in self.records if r.content is None)


def bundle(
    config: ScanConfig,
    output: Path,
    *,
    max_workers: int | None = None,
) -> BundleResult:
    """
    Bundle every selected file under ``config.root`` into ``output``.

    Parameters
    ----------
    config : ScanConfig
        Validated scan configuration.
    output : pathlib.Path
        Report destination. Created or truncated only if at least one file
        is selected.
    max_workers : int | None, optional
        Worker-pool size for reading files. ``None`` uses the CPU count.

    Returns
    -------
    BundleResult
        ``SUCCESS`` with the written records, or ``NO_OP`` when nothing
        matched.

    Raises
    ------
    TraversalError
        If the tree cannot be walked.
    ConfigurationError
        If a candidate cannot be displayed relative to the root.
    WriteError
        If the report cannot be written.
    """

    logger.debug(
        "Scanning %s (valid extensions: %s, skip extensions: %s, skip folders: %s)",
        config.root,
        sorted(config.valid_extensions),
        sorted(config.skip_extensions),
        sorted(config.skip_folders),
    )

    candidates = scan_tree(config.root, PathFilter.from_config(config))
    if not candidates:
        logger.debug("No matching files found under %s", config.root)
        return BundleResult(BundleStatus.NO_OP)

    logger.info("Found %d matching files", len(candidates))
    records = load_files(candidates, config, max_workers=max_workers)
    write_report(records, output)
    logger.debug("Wrote %d records to %s", len(records), output)

    return BundleResult(BundleStatus.SUCCESS, output, tuple(records))
