"""
Orchestrator for export rendering.

Dispatches an assembled DiaryReport to the PDF, DOCX or CSV backend.
"""
from __future__ import annotations

import logging
from collections.abc import Callable

from packages.shared.models import DiaryReport, ExportFormat
from apps.worker.steps.export_render.csv_render import generate_diary_csv
from apps.worker.steps.export_render.diary_pdf import generate_diary_pdf
from apps.worker.steps.export_render.docx_render import generate_diary_docx

logger = logging.getLogger(__name__)

RENDERERS: dict[ExportFormat, Callable[[DiaryReport], bytes]] = {
    ExportFormat.PDF: generate_diary_pdf,
    ExportFormat.DOCX: generate_diary_docx,
    ExportFormat.CSV: generate_diary_csv,
}


def render_diary(report: DiaryReport, fmt: ExportFormat | str = ExportFormat.PDF) -> bytes:
    """Render a non-empty report. Empty selections must be handled by the caller."""
    fmt = ExportFormat(fmt)
    if report.is_empty or not report.pages:
        raise ValueError("No records selected; nothing to render")
    data = RENDERERS[fmt](report)
    logger.info(f"Rendered {fmt.value}: pages={len(report.pages)}, bytes={len(data)}")
    return data
