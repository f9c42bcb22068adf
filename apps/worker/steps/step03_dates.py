"""
Step 3: Date normalization.

Spreadsheet date cells arrive either as native date objects (xlsx) or as
strings typed by court staff. Strings are read day-month-year, the local
convention, with either '-' or '/' as separator. A four-digit leading part
is read as ISO year-month-day. Anything unreadable becomes None; callers
treat None as "unknown date" and never substitute another date.
"""
from __future__ import annotations

import logging
import re
from datetime import date, datetime
from typing import Any

from packages.shared.models import CaseRecord, MappedRow, Warning

logger = logging.getLogger(__name__)

_SEPARATOR_RE = re.compile(r"[-/]")

_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


def _to_date(year: str, month: str, day: str) -> date | None:
    # Only a two-digit year is shorthand for 20yy
    try:
        y = int(year) + 2000 if len(year) <= 2 else int(year)
        return date(y, int(month), int(day))
    except (ValueError, OverflowError):
        return None


def normalize_date(value: Any) -> date | None:
    """Convert a raw cell value to a calendar date, or None if unreadable."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    parts = [p.strip() for p in _SEPARATOR_RE.split(value.strip())]
    if len(parts) != 3 or not all(p.isdecimal() for p in parts):
        return None

    if len(parts[0]) == 4:
        year, month, day = parts
    else:
        day, month, year = parts
    return _to_date(year, month, day)


def format_display_date(d: date) -> str:
    """DD-MM-YYYY, zero padded."""
    return f"{d.day:02d}-{d.month:02d}-{d.year:04d}"


def weekday_name(d: date) -> str:
    return _WEEKDAYS[d.weekday()]


def normalize_records(rows: list[MappedRow]) -> tuple[list[CaseRecord], list[Warning]]:
    """
    Build immutable CaseRecords from mapped rows.
    Returns (records, warnings). Unparseable dates keep the record with normalized_date=None.
    """
    warnings: list[Warning] = []
    records: list[CaseRecord] = []

    for m in rows:
        d = normalize_date(m.date_value)
        if d is None:
            shown = m.date_value if m.date_value != "" else "(blank)"
            warnings.append(Warning(
                code="UNPARSEABLE_DATE",
                message=f"Row {m.row_number}: could not read date {shown!r} for case '{m.case_number}'",
                row=m.row_number,
            ))
        records.append(CaseRecord(
            case_number=m.case_number,
            raw_date=m.date_value,
            normalized_date=d,
            purpose=m.purpose,
            row_number=m.row_number,
        ))

    if warnings:
        logger.warning(f"{len(warnings)} of {len(rows)} rows have no usable hearing date")
    return records, warnings
