"""
CSV rendering for the hearing diary.

One output row per body row, prefixed with the page number and date key,
so the sheet can be re-filtered without losing the diary layout.
"""
from __future__ import annotations

import csv
import io

from packages.shared.models import DiaryReport


def generate_diary_csv(report: DiaryReport) -> bytes:
    """Generate CSV from the assembled diary pages."""
    buf = io.StringIO()
    writer = csv.writer(buf)
    head_written = False
    for page in report.pages:
        for section in page.sections:
            if not head_written:
                writer.writerow(["page", "date", *section.head])
                head_written = True
            for row in section.body:
                writer.writerow([page.page_number, section.date_key, *row])
    return buf.getvalue().encode("utf-8")
