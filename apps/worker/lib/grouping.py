from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date

from packages.shared.models import CaseRecord, DateGroup, StageCategory
from apps.worker.steps.step03_dates import format_display_date, weekday_name
from apps.worker.steps.step04_classify import classify_purpose

logger = logging.getLogger(__name__)

UNKNOWN_DATE_KEY = "Unknown Date"
# Printed in place of an empty case number
MISSING_CASE_LABEL = "(no case no.)"


def group_by_date(records: list[CaseRecord], include_unknown: bool = True) -> list[DateGroup]:
    """
    Group records into one DateGroup per hearing date.
    - Groups are ordered by calendar date, not by their display key.
    - Records without a date form a trailing "Unknown Date" group when
      include_unknown is set, and are dropped otherwise.
    - Within a group, case numbers are bucketed per stage in input order;
      an empty case number is bucketed as MISSING_CASE_LABEL.
    """
    by_date: dict[date, list[CaseRecord]] = defaultdict(list)
    undated: list[CaseRecord] = []

    for rec in records:
        if rec.normalized_date is None:
            undated.append(rec)
        else:
            by_date[rec.normalized_date].append(rec)

    groups = [_build_group(format_display_date(d), d, by_date[d]) for d in sorted(by_date)]

    if undated:
        if include_unknown:
            groups.append(_build_group(UNKNOWN_DATE_KEY, None, undated))
        else:
            logger.info(f"Grouping: dropped {len(undated)} records without a hearing date")

    return groups


def _build_group(key: str, d: date | None, records: list[CaseRecord]) -> DateGroup:
    buckets: dict[StageCategory, list[str]] = {c: [] for c in StageCategory}
    for rec in records:
        buckets[classify_purpose(rec.purpose)].append(rec.case_number or MISSING_CASE_LABEL)
    return DateGroup(key=key, hearing_date=d, records=records, buckets=buckets)


def group_title(group: DateGroup) -> str:
    """'DATE: 05-01-2024 (FRIDAY)'. The weekday is taken from the group's date."""
    if group.hearing_date is None:
        return f"DATE: {group.key}"
    return f"DATE: {group.key} ({weekday_name(group.hearing_date).upper()})"
