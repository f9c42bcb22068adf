"""
API route: Diaries (upload a hearing sheet, get a diary back)
"""
from __future__ import annotations

import logging
import os
import uuid
from datetime import date

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from fastapi.responses import Response
from pydantic import BaseModel, ValidationError

from packages.shared.models import (
    CalendarDay,
    CaseType,
    CourtHeading,
    DateSelection,
    DiaryConfig,
    DiaryReport,
    ExportFormat,
    Language,
    SelectionMode,
)
from apps.worker.lib.calendar_board import summarize_calendar
from apps.worker.pipeline import compile_diary_deferred, load_records
from apps.worker.steps.step00_validate import InvalidInputError
from apps.worker.steps.step01_read_sheet import SheetDecodeError, read_sheet
from apps.worker.steps.export_render import MIME_TYPES, export_filename, render_diary

router = APIRouter(tags=["diaries"])
logger = logging.getLogger(__name__)
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))


class CalendarResponse(BaseModel):
    days: list[CalendarDay]
    undated: int


def diary_config_form(
    mode: SelectionMode = Form(SelectionMode.ALL),
    start: date | None = Form(None),
    end: date | None = Form(None),
    case_type: CaseType = Form(CaseType.CIVIL),
    language: Language = Form(Language.ENGLISH),
    search: str = Form(""),
    restrict_to_case_type: bool = Form(False),
    court_level: str = Form(""),
    court_village: str = Form(""),
    taluka: str = Form(""),
    district: str = Form(""),
) -> DiaryConfig:
    try:
        selection = DateSelection(mode=mode, start=start, end=end)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail="Range selection requires both start and end dates") from exc
    return DiaryConfig(
        selection=selection,
        case_type=case_type,
        language=language,
        search_term=search,
        restrict_to_case_type=restrict_to_case_type,
        court=CourtHeading(
            court_level=court_level,
            court_village=court_village,
            taluka=taluka,
            district=district,
            language=language,
        ),
    )


async def _read_rows(file: UploadFile) -> list[dict]:
    content = await file.read()
    if len(content) == 0:
        raise HTTPException(status_code=400, detail="Empty file")
    if len(content) > MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail="Upload exceeds configured size limit")
    try:
        return read_sheet(content, file.filename or "")
    except SheetDecodeError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


async def _compile(file: UploadFile, config: DiaryConfig) -> DiaryReport:
    rows = await _read_rows(file)
    request_id = uuid.uuid4().hex[:8]
    try:
        return await compile_diary_deferred(rows, config, request_id=request_id)
    except InvalidInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.post("/diaries/preview", response_model=DiaryReport)
async def preview_diary(
    file: UploadFile = File(...),
    config: DiaryConfig = Depends(diary_config_form),
):
    """Compile the diary and return its pages as JSON. Empty selections return status 'empty'."""
    return await _compile(file, config)


@router.post("/diaries/export")
async def export_diary(
    file: UploadFile = File(...),
    fmt: ExportFormat = Form(ExportFormat.PDF, alias="format"),
    config: DiaryConfig = Depends(diary_config_form),
):
    """Compile the diary and return the rendered document."""
    report = await _compile(file, config)
    if report.is_empty:
        raise HTTPException(status_code=404, detail="No records selected")

    data = render_diary(report, fmt)
    filename = export_filename(report, fmt)
    return Response(
        content=data,
        media_type=MIME_TYPES[fmt],
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"',
            "X-Record-Count": str(report.record_count),
            "X-Warning-Count": str(len(report.warnings)),
        },
    )


@router.post("/diaries/calendar", response_model=CalendarResponse)
async def diary_calendar(
    file: UploadFile = File(...),
    year: int | None = Form(None),
    month: int | None = Form(None, ge=1, le=12),
):
    """Per-day civil / criminal counts for the calendar board."""
    rows = await _read_rows(file)
    try:
        records, _ = load_records(rows)
    except InvalidInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return CalendarResponse(
        days=summarize_calendar(records, year=year, month=month),
        undated=sum(1 for r in records if r.normalized_date is None),
    )
