# sourcebundle/report.py

"""
Report rendering and writing.

Each :class:`~sourcebundle.content.FileRecord` is rendered as::

    Path: src/app.py
    ================
    <file content>
    ---------------------------------------------------

The header underline is exactly as long as the display path, the content is
written verbatim followed by a newline (nothing is written for an unreadable
file), and every record ends with a fixed-width separator and a blank line.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from sourcebundle.content import FileRecord
from sourcebundle.errors import WriteError

SEPARATOR = "-" * 51


def render_record(record: FileRecord) -> str:
    parts = [
        f"Path: {record.display_path}\n",
        "=" * len(record.display_path) + "\n",
    ]
    if record.content is not None:
        parts.append(record.content + "\n")
    parts.append(SEPARATOR + "\n")
    parts.append("\n")
    return "".join(parts)


def render_report(records: Iterable[FileRecord]) -> str:
    return "".join(render_record(r) for r in records)


def write_report(records: Iterable[FileRecord], output: Path) -> Path:
    """
    Write ``records`` to ``output`` in order.

    The file is created (or truncated) once and written sequentially as
    UTF-8, without newline translation.

    Parameters
    ----------
    records : Iterable[FileRecord]
        Records in report order.
    output : pathlib.Path
        Destination file.

    Returns
    -------
    pathlib.Path
        ``output``.

    Raises
    ------
    WriteError
        If the file cannot be created or written. Content already written
        before the failure is left in place.
    """

    try:
        with output.open("w", encoding="utf-8", newline="") as f:
            for record in records:
                f.write(render_record(record))
    except (OSError, UnicodeEncodeError) as exc:
        raise WriteError(f"Cannot write report '{output}': {exc}", path=output) from exc
    return output
