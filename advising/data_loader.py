"""Helpers for loading course files into a catalog."""

from __future__ import annotations

from pathlib import Path
from typing import List

from .catalog import CourseCatalog
from .schemas import LoadReport


def read_course_lines(path: Path) -> List[str]:
    """Return every line of the course file without its ``\\n`` terminator.

    Only ``\\n`` ends a line; a ``\\r`` from CRLF files stays on the line and
    is trimmed by the field parser. Undecodable bytes are replaced rather
    than failing the load. The whole file is read up front so that an
    unreadable file is detected before any catalog is touched.
    """
    if not path.exists():
        raise FileNotFoundError(f"Course file not found: {path}")
    if not path.is_file():
        raise IsADirectoryError(f"Course path is not a file: {path}")

    with path.open("r", encoding="utf-8-sig", errors="replace", newline="") as course_file:
        lines = course_file.read().split("\n")

    if lines[-1] == "":
        lines.pop()
    return lines


def load_course_file(catalog: CourseCatalog, path: Path | str) -> LoadReport:
    """Rebuild ``catalog`` from the file at ``path``.

    Returns a failed report, leaving the catalog untouched, when the file
    cannot be opened. Per-line problems are reported as warnings
    on a successful report.
    """
    path = Path(path)
    try:
        lines = read_course_lines(path)
    except OSError as exc:
        return LoadReport(
            ok=False,
            source=str(path),
            course_count=len(catalog),
            error=f"Could not open file: {path} ({exc})",
        )

    return catalog.load(lines, source=str(path))
