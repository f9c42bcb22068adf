from __future__ import annotations

from collections import defaultdict

from packages.shared.models import CalendarDay, CaseRecord, CaseType
from apps.worker.steps.step05_select import infer_case_type


def summarize_calendar(records: list[CaseRecord], year: int | None = None, month: int | None = None) -> list[CalendarDay]:
    """
    Per-day civil / criminal case counts, ordered by date.
    Undated records are not counted. Sundays are flagged as weekly off.
    """
    counts: dict = defaultdict(lambda: {CaseType.CIVIL: 0, CaseType.CRIMINAL: 0})
    for rec in records:
        d = rec.normalized_date
        if d is None:
            continue
        if year is not None and d.year != year:
            continue
        if month is not None and d.month != month:
            continue
        counts[d][infer_case_type(rec.case_number)] += 1

    return [
        CalendarDay(
            hearing_date=d,
            civil=counts[d][CaseType.CIVIL],
            criminal=counts[d][CaseType.CRIMINAL],
            weekly_off=d.weekday() == 6,
        )
        for d in sorted(counts)
    ]
