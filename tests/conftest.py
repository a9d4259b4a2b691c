from pathlib import Path

import pytest

from advising.catalog import CourseCatalog

SAMPLE_LINES = [
    "CSCI101,Intro to CS,CSCI100",
    "CSCI100,Intro Seminar",
    "",
    "CSCI300,Algorithms,CSCI200,MATH201",
    "CSCI200,Data Structures,CSCI101",
]


@pytest.fixture
def catalog():
    catalog = CourseCatalog()
    catalog.load(SAMPLE_LINES)
    return catalog


@pytest.fixture
def course_file(tmp_path) -> Path:
    path = tmp_path / "courses.csv"
    path.write_text("\n".join(SAMPLE_LINES) + "\n", encoding="utf-8")
    return path
