# sourcebundle/errors.py

"""
Error taxonomy for the bundling pipeline.

Every fatal failure derives from :class:`BundleError` so callers can surface a
single clean message at the process boundary. Each subclass also derives from
the builtin exception it refines (``ValueError`` or ``OSError``), which keeps
``except OSError`` style handling working for library users.

Per-file read failures are intentionally absent from this module: they are
recovered inside :mod:`sourcebundle.content` and never escape it.
"""

from __future__ import annotations

from pathlib import Path


class BundleError(Exception):
    """Base class for fatal bundling errors."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        return self.message


class ValidationError(BundleError, ValueError):
    """The requested configuration is invalid (e.g. the root is not a directory)."""


class TraversalError(BundleError, OSError):
    """A filesystem entry could not be inspected while walking the tree."""


class ConfigurationError(BundleError, ValueError):
    """A candidate path is inconsistent with the configured root."""


class WriteError(BundleError, OSError):
    """The report could not be created or written."""
