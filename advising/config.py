"""Locations of the course data the advising tools read by default."""

from __future__ import annotations

import os
from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parent
COURSE_DATA_DIR = PACKAGE_ROOT / "courseData"
DEFAULT_COURSE_FILE = COURSE_DATA_DIR / "abcu_courses.csv"

COURSE_FILE_ENV = "ADVISING_COURSE_FILE"


def resolve_course_file(override: Path | str | None = None) -> Path:
    """Pick the course file: explicit override, then the env var, then the bundled sample."""
    if override:
        return Path(override)

    from_env = os.environ.get(COURSE_FILE_ENV, "").strip()
    if from_env:
        return Path(from_env)

    return DEFAULT_COURSE_FILE
