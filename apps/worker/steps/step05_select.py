"""
Step 5: Record selection.
Date window (all records, or a closed range of whole days), optional
free-text search, and optional civil/criminal restriction.
"""
from __future__ import annotations

from packages.shared.models import CaseRecord, CaseType, DateSelection, SelectionMode

# Case-number markers used by the registry for civil matters.
CIVIL_MARKERS: tuple[str, ...] = ("RCS", "CMA", "DARKHAST")


def select_records(records: list[CaseRecord], selection: DateSelection) -> list[CaseRecord]:
    """
    Keep records inside the selection, preserving input order.
    Range mode drops records without a normalized date; an inverted range selects nothing.
    """
    if selection.mode == SelectionMode.ALL:
        return list(records)
    return [r for r in records if selection.contains(r.normalized_date)]


def search_records(records: list[CaseRecord], term: str) -> list[CaseRecord]:
    """Case-insensitive substring match over case number, purpose and raw date."""
    needle = (term or "").strip().lower()
    if not needle:
        return list(records)
    return [
        r for r in records
        if any(needle in v.lower() for v in (r.case_number, r.purpose, r.raw_date_display))
    ]


def infer_case_type(case_number: str) -> CaseType:
    c = (case_number or "").upper()
    if any(marker in c for marker in CIVIL_MARKERS):
        return CaseType.CIVIL
    return CaseType.CRIMINAL


def filter_case_type(records: list[CaseRecord], case_type: CaseType) -> list[CaseRecord]:
    return [r for r in records if infer_case_type(r.case_number) == case_type]
