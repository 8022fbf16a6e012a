# sourcebundle/config.py

"""
Scan configuration.

:class:`ScanConfig` is the single immutable object the pipeline consumes. It is
built once (usually by the CLI) through :meth:`ScanConfig.create`, which
validates the root directory and normalizes every extension to its lowercase,
dot-prefixed form.
"""

from __future__ import annotations

import codecs
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from sourcebundle.errors import ValidationError

DEFAULT_EXTENSIONS: frozenset[str] = frozenset(
    {
        ".txt", ".py", ".c", ".cpp", ".h",
        ".cs", ".cake", ".cshtml", ".csx",
        ".ps1", ".vbs",
        ".js", ".mjs",
        ".ts",
        ".svelte",
        ".rb",
        ".rs",
        ".html", ".htm", ".xhtml",
        ".css",
        ".dart",
        ".jsx",
        ".bat",
        ".autoexe",
        ".sh", ".bash",
        ".php", ".phtml",
        ".pl", ".pm",
        ".sql",
        ".xml",
        ".csv",
    }
)


def normalize_extension(ext: str) -> str:
    """
    Return ``ext`` lowercased and prefixed with a single dot.

    Parameters
    ----------
    ext : str
        Extension as typed by a user, e.g. ``"PY"``, ``".Py"`` or ``" .py "``.

    Returns
    -------
    str
        The normalized extension, e.g. ``".py"``.

    Raises
    ------
    ValidationError
        If ``ext`` is empty or only made of dots/whitespace.
    """

    value = ext.strip().lower()
    if not value.lstrip("."):
        raise ValidationError(f"Invalid extension: {ext!r}")
    return "." + value.lstrip(".")


def normalize_extensions(exts: Iterable[str]) -> frozenset[str]:
    return frozenset(normalize_extension(e) for e in exts)


@dataclass(frozen=True)
class ScanConfig:
    """Immutable description of one bundling run."""

    root: Path
    valid_extensions: frozenset[str] = DEFAULT_EXTENSIONS
    skip_extensions: frozenset[str] = frozenset()
    skip_folders: frozenset[str] = frozenset()
    full_path: bool = False
    encoding: str = "utf-8"

    @classmethod
    def create(
        cls,
        root: Path | str,
        *,
        extensions: Iterable[str] | None = None,
        skip: Iterable[str] = (),
        skip_folders: Iterable[str] = (),
        full_path: bool = False,
        encoding: str = "utf-8",
    ) -> ScanConfig:
        """
        Validate user input and build a :class:`ScanConfig`.

        Parameters
        ----------
        root : pathlib.Path | str
            Directory to scan. Kept exactly as given (relative stays relative)
            so that full-path display mode reflects what the user typed.
        extensions : Iterable[str] | None, optional
            Replacement for the built-in valid-extension set. ``None`` keeps
            :data:`DEFAULT_EXTENSIONS`.
        skip : Iterable[str], optional
            Extensions to exclude even when they are valid.
        skip_folders : Iterable[str], optional
            Exact directory names whose subtrees are never visited.
        full_path : bool, default=False
            Display paths as produced by the walk instead of root-relative.
        encoding : str, default="utf-8"
            Text encoding used to decode collected files.

        Raises
        ------
        ValidationError
            If ``root`` does not exist or is not a directory, if an
            extension value is empty, or if ``encoding`` is not a known codec.
        """

        root = Path(root)
        if not root.is_dir():
            raise ValidationError(
                f"The provided directory '{root}' does not exist or is not a directory.",
                path=root,
            )

        try:
            codecs.lookup(encoding)
        except LookupError as exc:
            raise ValidationError(f"Unknown encoding: {encoding!r}") from exc

        valid = DEFAULT_EXTENSIONS if extensions is None else normalize_extensions(extensions)

        return cls(
            root=root,
            valid_extensions=valid,
            skip_extensions=normalize_extensions(skip),
            skip_folders=frozenset(skip_folders),
            full_path=full_path,
            encoding=encoding,
        )
