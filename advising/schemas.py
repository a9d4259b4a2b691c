"""Pydantic models shared across the advising catalog."""

from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class Course(BaseModel):
    id: str
    title: str = Field(
        default="",
        description="Display title. Empty while the course is only a placeholder.",
    )
    prereqs: List[str] = Field(
        default_factory=list,
        description="Prerequisite course IDs in file order; duplicates are kept.",
    )

    @property
    def is_placeholder(self) -> bool:
        return not self.title


class CourseSummary(BaseModel):
    id: str
    title: str


class PrerequisiteRef(BaseModel):
    id: str
    title: str | None = Field(
        default=None,
        description="Resolved title, or None when the prerequisite was never defined.",
    )


class CourseDetail(BaseModel):
    id: str
    title: str
    prerequisites: List[PrerequisiteRef] = Field(
        default_factory=list,
        description="Prerequisites in declaration order with their titles resolved.",
    )


class LoadReport(BaseModel):
    ok: bool
    source: str | None = None
    course_count: int = 0
    warnings: List[str] = Field(
        default_factory=list,
        description="One message per skipped or partially applied line.",
    )
    error: str | None = Field(
        default=None,
        description="Why the source could not be read when ok is False.",
    )


class LookupStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    INVALID_QUERY = "invalid_query"


class LookupResult(BaseModel):
    status: LookupStatus
    query: str
    course: CourseDetail | None = None

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND
