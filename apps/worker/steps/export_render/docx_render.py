"""
DOCX rendering for the hearing diary.

Same sections as the PDF, for registries that edit the diary before printing.
"""
from __future__ import annotations

import io

from docx import Document as DocxDocument
from docx.enum.table import WD_TABLE_ALIGNMENT
from docx.enum.text import WD_ALIGN_PARAGRAPH, WD_BREAK
from docx.shared import Inches, Pt, RGBColor

from packages.shared.models import DiaryReport
from apps.worker.steps.export_render.common import (
    SEAT_LINE,
    SIGNATURE_LINE,
    _set_cell_shading,
)


def generate_diary_docx(report: DiaryReport) -> bytes:
    doc = DocxDocument()

    for section in doc.sections:
        section.left_margin = Inches(0.6)
        section.right_margin = Inches(0.6)
        section.top_margin = Inches(0.6)
        section.bottom_margin = Inches(0.6)

    title_para = doc.add_heading(report.heading, level=0)
    title_para.alignment = WD_ALIGN_PARAGRAPH.CENTER

    for page_idx, page in enumerate(report.pages):
        if page_idx > 0:
            doc.add_paragraph().add_run().add_break(WD_BREAK.PAGE)

        for sec in page.sections:
            doc.add_heading(sec.title, level=2)
            seat = doc.add_paragraph(SEAT_LINE)
            seat.runs[0].font.size = Pt(10)

            tbl = doc.add_table(rows=1, cols=len(sec.head))
            tbl.style = "Table Grid"
            tbl.alignment = WD_TABLE_ALIGNMENT.CENTER
            hdr_row = tbl.rows[0]
            for idx, hdr_text in enumerate(sec.head):
                cell = hdr_row.cells[idx]
                cell.text = hdr_text
                _set_cell_shading(cell, "282828")
                for paragraph in cell.paragraphs:
                    for run in paragraph.runs:
                        run.font.bold = True
                        run.font.size = Pt(9)
                        run.font.color.rgb = RGBColor(0xFF, 0xFF, 0xFF)
            for body_row in sec.body:
                cells = tbl.add_row().cells
                for idx, value in enumerate(body_row):
                    cells[idx].text = value
                    for paragraph in cells[idx].paragraphs:
                        for run in paragraph.runs:
                            run.font.size = Pt(9)

            sig = doc.add_paragraph(SIGNATURE_LINE)
            sig.alignment = WD_ALIGN_PARAGRAPH.RIGHT
            sig.runs[0].font.size = Pt(9)

    buf = io.BytesIO()
    doc.save(buf)
    return buf.getvalue()
