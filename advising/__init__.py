"""Course catalog loading and prerequisite lookup for the ABCU advising assistant."""

from .catalog import CourseCatalog, normalize_course_id
from .data_loader import load_course_file
from .fields import parse_fields

__all__ = ["CourseCatalog", "load_course_file", "normalize_course_id", "parse_fields"]
