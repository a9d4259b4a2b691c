from advising.catalog import CourseCatalog, normalize_course_id
from advising.schemas import LookupStatus


def load(lines):
    catalog = CourseCatalog()
    report = catalog.load(lines)
    return catalog, report


def test_normalize_course_id():
    assert normalize_course_id("  csci101 ") == "CSCI101"
    assert normalize_course_id("   ") == ""


def test_forward_reference_is_resolved_in_either_order():
    for lines in (
        ["CSCI101,Intro to CS,CSCI100", "CSCI100,Intro Seminar"],
        ["CSCI100,Intro Seminar", "CSCI101,Intro to CS,CSCI100"],
    ):
        catalog, report = load(lines)
        assert report.ok
        assert report.warnings == []
        assert catalog.courses["CSCI100"].title == "Intro Seminar"
        assert catalog.courses["CSCI101"].prereqs == ["CSCI100"]


def test_prerequisite_creates_placeholder():
    catalog, _ = load(["CSCI200,Data Structures,CSCI999"])
    placeholder = catalog.courses["CSCI999"]
    assert placeholder.title == ""
    assert placeholder.prereqs == []
    assert placeholder.is_placeholder


def test_empty_title_warns_but_keeps_record():
    catalog, report = load(["CSCI300,"])
    assert report.ok
    assert report.warnings == ["Line 1 has empty title for course CSCI300"]
    assert "CSCI300" in catalog
    assert catalog.courses["CSCI300"].title == ""
    assert catalog.list_courses() == []


def test_empty_title_still_applies_prerequisites():
    catalog, report = load(["CSCI300,,CSCI200"])
    assert len(report.warnings) == 1
    assert catalog.courses["CSCI300"].prereqs == ["CSCI200"]
    assert "CSCI200" in catalog


def test_empty_title_does_not_erase_existing_title():
    catalog, _ = load(["CSCI300,Algorithms", "csci300,,MATH201"])
    course = catalog.courses["CSCI300"]
    assert course.title == "Algorithms"
    assert course.prereqs == ["MATH201"]


def test_case_insensitive_ids_merge():
    catalog, report = load(["csci101,Old Title,CSCI100", "CSCI101,New Title,MATH101"])
    assert report.warnings == []
    assert len([c for c in catalog if c.id == "CSCI101"]) == 1
    course = catalog.courses["CSCI101"]
    assert course.title == "New Title"
    assert course.prereqs == ["CSCI100", "MATH101"]


def test_single_field_line_is_skipped():
    catalog, report = load(["CSCI101"])
    assert report.ok
    assert report.warnings == ["Line 1 skipped: fewer than 2 fields"]
    assert len(catalog) == 0


def test_empty_course_id_is_skipped():
    catalog, report = load(["  ,Orphan Title,CSCI100"])
    assert report.warnings == ["Line 1 skipped: empty course ID"]
    assert len(catalog) == 0


def test_blank_lines_skipped_without_warning_and_counted():
    catalog, report = load(["", "   ", "CSCI101"])
    assert report.warnings == ["Line 3 skipped: fewer than 2 fields"]
    assert len(catalog) == 0


def test_blank_prerequisites_are_dropped_silently():
    catalog, report = load(["CSCI101,Intro, , ,csci100,"])
    assert report.warnings == []
    assert catalog.courses["CSCI101"].prereqs == ["CSCI100"]


def test_duplicates_and_self_references_are_kept():
    catalog, _ = load(["CSCI101,Intro,CSCI100,CSCI100,CSCI101"])
    assert catalog.courses["CSCI101"].prereqs == ["CSCI100", "CSCI100", "CSCI101"]
    assert catalog.courses["CSCI101"].title == "Intro"


def test_quoted_title_with_comma():
    catalog, _ = load(['CSCI400,"Large Software Development, Capstone",CSCI301'])
    assert catalog.courses["CSCI400"].title == "Large Software Development, Capstone"
    assert catalog.courses["CSCI400"].prereqs == ["CSCI301"]


def test_reload_replaces_previous_catalog(catalog):
    report = catalog.load(["MATH201,Discrete Mathematics"])
    assert report.course_count == 1
    assert [c.id for c in catalog.list_courses()] == ["MATH201"]
    assert "CSCI101" not in catalog


def test_list_courses_is_sorted_and_skips_placeholders(catalog):
    assert [(c.id, c.title) for c in catalog.list_courses()] == [
        ("CSCI100", "Intro Seminar"),
        ("CSCI101", "Intro to CS"),
        ("CSCI200", "Data Structures"),
        ("CSCI300", "Algorithms"),
    ]


def test_list_courses_excludes_untitled_record():
    catalog, _ = load(["CSCI101,Intro", "CSCI300,"])
    assert [(c.id, c.title) for c in catalog.list_courses()] == [("CSCI101", "Intro")]


def test_lookup_resolves_prerequisite_titles(catalog):
    result = catalog.lookup("  csci300 ")
    assert result.status is LookupStatus.FOUND
    assert result.found
    assert result.course.id == "CSCI300"
    assert result.course.title == "Algorithms"
    assert [(p.id, p.title) for p in result.course.prerequisites] == [
        ("CSCI200", "Data Structures"),
        ("MATH201", None),
    ]


def test_lookup_without_prerequisites(catalog):
    result = catalog.lookup("CSCI100")
    assert result.found
    assert result.course.prerequisites == []


def test_lookup_empty_query_is_invalid(catalog):
    assert catalog.lookup("").status is LookupStatus.INVALID_QUERY
    assert catalog.lookup("   ").status is LookupStatus.INVALID_QUERY


def test_lookup_placeholder_is_not_found(catalog):
    result = catalog.lookup("MATH201")
    assert result.status is LookupStatus.NOT_FOUND
    assert result.query == "MATH201"
    assert result.course is None


def test_lookup_unknown_is_not_found(catalog):
    assert catalog.lookup("CSCI999").status is LookupStatus.NOT_FOUND


def test_lookup_treats_missing_prerequisite_record_as_unknown(catalog):
    del catalog.courses["CSCI200"]
    result = catalog.lookup("CSCI300")
    assert [(p.id, p.title) for p in result.course.prerequisites] == [
        ("CSCI200", None),
        ("MATH201", None),
    ]


def test_get_or_create_returns_existing_record(catalog):
    existing = catalog.courses["CSCI101"]
    assert catalog.get_or_create("CSCI101") is existing
    created = catalog.get_or_create("PHYS100")
    assert created.title == ""
    assert catalog.courses["PHYS100"] is created


def test_normalization_is_ascii_only():
    assert normalize_course_id("stra\u00dfe101") == "STRA\u00dfE101"
    assert normalize_course_id("\xa0csci101\xa0") == "\xa0CSCI101\xa0"
    assert normalize_course_id("\tcsci101\x0b") == "CSCI101"
