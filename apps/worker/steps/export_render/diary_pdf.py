"""
Diary rendering logic for PDF export.
"""
from __future__ import annotations

import logging
import os
from io import BytesIO

from reportlab.lib import colors
from reportlab.lib.enums import TA_RIGHT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.platypus import (
    BaseDocTemplate,
    Frame,
    PageBreak,
    PageTemplate,
    Paragraph,
    Spacer,
    Table,
    TableStyle,
)

from packages.shared.models import DiaryReport, PageSection
from apps.worker.steps.export_render.common import SEAT_LINE, SIGNATURE_LINE, _markup

logger = logging.getLogger(__name__)

_CUSTOM_FONT = "DiaryFont"


def _resolve_fonts() -> tuple[str, str]:
    """(regular, bold) font names. DIARY_PDF_FONT_PATH supplies a TTF with Devanagari glyphs."""
    font_path = os.getenv("DIARY_PDF_FONT_PATH", "").strip()
    if not font_path:
        return "Helvetica", "Helvetica-Bold"
    if _CUSTOM_FONT not in pdfmetrics.getRegisteredFontNames():
        try:
            pdfmetrics.registerFont(TTFont(_CUSTOM_FONT, font_path))
        except Exception:
            logger.exception(f"Could not load PDF font {font_path}; falling back to Helvetica")
            return "Helvetica", "Helvetica-Bold"
    return _CUSTOM_FONT, _CUSTOM_FONT


def _section_flowables(section: PageSection, styles: dict, col_width: float) -> list:
    flowables = [
        Paragraph(_markup(section.title), styles["date"]),
        Paragraph(_markup(SEAT_LINE), styles["normal"]),
        Spacer(1, 2 * mm),
    ]
    data = [[Paragraph(_markup(h), styles["head"]) for h in section.head]]
    data.extend([[Paragraph(_markup(c), styles["cell"]) for c in row] for row in section.body])
    table = Table(data, colWidths=[col_width] * len(section.head), repeatRows=1)
    table.setStyle(TableStyle([
        ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
        ("BACKGROUND", (0, 0), (-1, 0), colors.Color(40 / 255, 40 / 255, 40 / 255)),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("TOPPADDING", (0, 0), (-1, -1), 3),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 3),
    ]))
    flowables.append(table)
    flowables.append(Spacer(1, 3 * mm))
    flowables.append(Paragraph(_markup(SIGNATURE_LINE), styles["signature"]))
    flowables.append(Spacer(1, 8 * mm))
    return flowables


def generate_diary_pdf(report: DiaryReport) -> bytes:
    buffer = BytesIO()
    doc = BaseDocTemplate(
        buffer,
        pagesize=A4,
        leftMargin=14 * mm,
        rightMargin=14 * mm,
        topMargin=15 * mm,
        bottomMargin=15 * mm,
        title=report.heading,
        invariant=1,
    )
    regular, bold = _resolve_fonts()
    base = getSampleStyleSheet()
    styles = {
        "title": ParagraphStyle("DiaryTitle", parent=base["Title"], fontName=bold, fontSize=15, spaceAfter=8),
        "date": ParagraphStyle("DiaryDate", parent=base["Normal"], fontName=bold, fontSize=12, spaceAfter=3),
        "normal": ParagraphStyle("DiaryNormal", parent=base["Normal"], fontName=regular, fontSize=10),
        "head": ParagraphStyle("DiaryHead", parent=base["Normal"], fontName=bold, fontSize=9, textColor=colors.white),
        "cell": ParagraphStyle("DiaryCell", parent=base["Normal"], fontName=regular, fontSize=9),
        "signature": ParagraphStyle("DiarySignature", parent=base["Normal"], fontName=regular, fontSize=9, alignment=TA_RIGHT),
    }

    flowables: list = [Paragraph(_markup(report.heading), styles["title"])]
    for i, page in enumerate(report.pages):
        if i > 0:
            flowables.append(PageBreak())
        for section in page.sections:
            col_width = doc.width / max(len(section.head), 1)
            flowables.extend(_section_flowables(section, styles, col_width))

    def footer(canvas, doc):
        canvas.saveState()
        canvas.setFont(regular, 8)
        canvas.drawString(doc.leftMargin, 8 * mm, report.heading)
        canvas.drawRightString(A4[0] - doc.rightMargin, 8 * mm, f"Page {doc.page}")
        canvas.restoreState()

    frame = Frame(doc.leftMargin, doc.bottomMargin, doc.width, doc.height, id="normal")
    template = PageTemplate(id="diary", frames=[frame], onPage=footer)
    doc.addPageTemplates([template])
    doc.build(flowables)
    return buffer.getvalue()
