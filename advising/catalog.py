"""In-memory course catalog built from delimited course lines."""

from __future__ import annotations

import string
from typing import Dict, Iterable, Iterator, List

from .fields import ASCII_WHITESPACE, parse_fields
from .schemas import (
    Course,
    CourseDetail,
    CourseSummary,
    LoadReport,
    LookupResult,
    LookupStatus,
    PrerequisiteRef,
)

ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def normalize_course_id(course_id: str) -> str:
    """Trim ASCII whitespace and uppercase ASCII letters only."""
    return course_id.strip(ASCII_WHITESPACE).translate(ASCII_UPPER)


class CourseCatalog:
    """Mapping of normalized course ID -> Course.

    Courses referenced only as prerequisites are kept as placeholders with an
    empty title, so every prerequisite ID resolves to an entry after a load.
    """

    def __init__(self) -> None:
        self.courses: Dict[str, Course] = {}

    def __len__(self) -> int:
        return len(self.courses)

    def __contains__(self, course_id: object) -> bool:
        return isinstance(course_id, str) and normalize_course_id(course_id) in self.courses

    def __iter__(self) -> Iterator[Course]:
        return iter(self.courses.values())

    def get_or_create(self, course_id: str) -> Course:
        """Return the record for an already normalized ID, inserting a placeholder if absent."""
        course = self.courses.get(course_id)
        if course is None:
            course = Course(id=course_id)
            self.courses[course_id] = course
        return course

    def load(self, lines: Iterable[str], source: str | None = None) -> LoadReport:
        """Rebuild the catalog from ``lines`` (``CourseID, Title, Prereq...``).

        Malformed lines never abort the load. Each one produces a single
        warning naming its 1-based line number and is skipped or partially
        applied.
        """
        self.courses.clear()
        warnings: List[str] = []

        for line_num, line in enumerate(lines, start=1):
            if not line.strip(ASCII_WHITESPACE):
                continue

            fields = parse_fields(line)
            if len(fields) < 2:
                warnings.append(f"Line {line_num} skipped: fewer than 2 fields")
                continue

            course_id = normalize_course_id(fields[0])
            title = fields[1]

            if not course_id:
                warnings.append(f"Line {line_num} skipped: empty course ID")
                continue
            if not title:
                warnings.append(f"Line {line_num} has empty title for course {course_id}")

            course = self.get_or_create(course_id)
            if title:
                course.title = title

            for raw_prereq in fields[2:]:
                prereq_id = normalize_course_id(raw_prereq)
                # Blank prerequisite cells are dropped without a warning.
                if not prereq_id:
                    continue
                course.prereqs.append(prereq_id)
                self.get_or_create(prereq_id)

        return LoadReport(
            ok=True,
            source=source,
            course_count=len(self.courses),
            warnings=warnings,
        )

    def list_courses(self) -> List[CourseSummary]:
        return [
            CourseSummary(id=course.id, title=course.title)
            for course in sorted(self.courses.values(), key=lambda course: course.id)
            if course.title
        ]

    def lookup(self, query: str) -> LookupResult:
        normalized = normalize_course_id(query)
        if not normalized:
            return LookupResult(status=LookupStatus.INVALID_QUERY, query=normalized)

        course = self.courses.get(normalized)
        if course is None or course.is_placeholder:
            return LookupResult(status=LookupStatus.NOT_FOUND, query=normalized)

        detail = CourseDetail(
            id=course.id,
            title=course.title,
            prerequisites=[self._resolve_prereq(prereq_id) for prereq_id in course.prereqs],
        )
        return LookupResult(status=LookupStatus.FOUND, query=normalized, course=detail)

    def _resolve_prereq(self, prereq_id: str) -> PrerequisiteRef:
        match = self.courses.get(prereq_id)
        if match is None or match.is_placeholder:
            return PrerequisiteRef(id=prereq_id)
        return PrerequisiteRef(id=prereq_id, title=match.title)
