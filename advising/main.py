"""FastAPI application serving the advising course catalog."""

from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path
from typing import List

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from .catalog import CourseCatalog
from .config import resolve_course_file
from .data_loader import load_course_file
from .schemas import CourseDetail, CourseSummary, LoadReport, LookupStatus


def create_app(course_file: Path | str | None = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        catalog = CourseCatalog()
        report = load_course_file(catalog, app.state.course_file)
        if not report.ok:
            raise FileNotFoundError(report.error)
        app.state.course_catalog = catalog
        app.state.load_report = report
        yield

    app = FastAPI(
        title="ABCU Advising Catalog",
        description="Course listing and prerequisite lookup over a CSV course file.",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.course_file = resolve_course_file(course_file)

    @app.get("/courses", response_model=List[CourseSummary])
    def list_courses() -> List[CourseSummary]:
        return _get_course_catalog(app).list_courses()

    @app.get("/courses/{course_id}", response_model=CourseDetail)
    def get_course(course_id: str) -> CourseDetail:
        result = _get_course_catalog(app).lookup(course_id)
        if result.status is LookupStatus.INVALID_QUERY:
            raise HTTPException(status_code=400, detail="Course ID must not be empty.")
        if result.status is LookupStatus.NOT_FOUND:
            raise HTTPException(status_code=404, detail=f"Course '{result.query}' not found.")
        return result.course

    @app.get("/catalog/report", response_model=LoadReport)
    def get_load_report() -> LoadReport:
        _get_course_catalog(app)
        return app.state.load_report

    @app.post("/catalog/reload", response_model=LoadReport)
    def reload_catalog() -> LoadReport:
        catalog = _get_course_catalog(app)
        report = load_course_file(catalog, app.state.course_file)
        if not report.ok:
            raise HTTPException(status_code=404, detail=report.error)
        app.state.load_report = report
        return report

    return app


def _get_course_catalog(app: FastAPI) -> CourseCatalog:
    catalog = getattr(app.state, "course_catalog", None)
    if catalog is None:
        raise RuntimeError("Course catalog not loaded; has startup event run?")
    return catalog


app = create_app()
