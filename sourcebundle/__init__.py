"""
sourcebundle — bundle the source files of a directory tree into one text report.

This package provides a small pipeline to:
- walk a directory, pruning skipped folders and selecting files by extension,
- read the selected files in parallel,
- write them, in traversal order, into a single human-readable report.

The API is based on ``pathlib.Path`` and is suitable for programmatic use as
well as from the ``sourcebundle`` command line.
"""

from __future__ import annotations

__version__ = "1.0.0"

from .config import DEFAULT_EXTENSIONS, ScanConfig
from .errors import BundleError, ConfigurationError, TraversalError, ValidationError, WriteError
from .tree import PathFilter, scan_tree
from .content import FileRecord, display_path, load_file, load_files
from .report import render_record, render_report, write_report
from .pipeline import BundleResult, BundleStatus, bundle

__all__ = [
    "__version__",
    "DEFAULT_EXTENSIONS",
    "ScanConfig",
    "BundleError",
    "ConfigurationError",
    "TraversalError",
    "ValidationError",
    "WriteError",
    "PathFilter",
    "scan_tree",
    "FileRecord",
    "display_path",
    "load_file",
    "load_files",
    "render_record",
    "render_report",
    "write_report",
    "BundleResult",
    "BundleStatus",
    "bundle",
]
