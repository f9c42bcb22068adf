"""
Shared formatting helpers for diary export rendering.
"""
from __future__ import annotations

from datetime import date
from xml.sax.saxutils import escape

from packages.shared.models import DiaryReport, ExportFormat

SEAT_LINE = "Took Seat at: _________  Rise at: _________"
SIGNATURE_LINE = "Officer Signature: ____________________"

MIME_TYPES: dict[ExportFormat, str] = {
    ExportFormat.PDF: "application/pdf",
    ExportFormat.DOCX: "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ExportFormat.CSV: "text/csv",
}


def export_filename(report: DiaryReport, fmt: ExportFormat, generated_on: date | None = None) -> str:
    stamp = (generated_on or date.today()).strftime("%Y%m%d")
    return f"Court_Report_{stamp}_{report.case_type.value}.{fmt.value}"


def _markup(text: str) -> str:
    """Escape cell text for reportlab Paragraph markup."""
    return escape(text or "").replace("\n", "<br/>")


def _set_cell_shading(cell, hex_color: str):
    """Set background shading on a DOCX table cell."""
    from docx.oxml.ns import qn
    from lxml import etree
    shading = etree.SubElement(cell._element.get_or_add_tcPr(), qn("w:shd"))
    shading.set(qn("w:fill"), hex_color)
    shading.set(qn("w:val"), "clear")
