"""
Step 6: Report assembly.
Flatten paginated date groups into ReportPages of title / head / body
sections. The column layout depends on the case type: civil diaries carry
an Issues column, criminal diaries do not.
"""
from __future__ import annotations

from collections import Counter

from packages.shared.models import (
    STAGE_LABELS,
    CaseType,
    DateGroup,
    Language,
    PageSection,
    ReportPage,
    StageCategory,
)
from apps.worker.lib.grouping import group_title

CIVIL_COLUMNS: tuple[StageCategory, ...] = tuple(StageCategory)
CRIMINAL_COLUMNS: tuple[StageCategory, ...] = tuple(c for c in StageCategory if c != StageCategory.ISSUES)


def columns_for(case_type: CaseType) -> tuple[StageCategory, ...]:
    return CIVIL_COLUMNS if case_type == CaseType.CIVIL else CRIMINAL_COLUMNS


def head_row(case_type: CaseType, language: Language = Language.ENGLISH) -> list[str]:
    labels = STAGE_LABELS[language]
    return [labels[c] for c in columns_for(case_type)]


def _column_values(group: DateGroup, columns: tuple[StageCategory, ...]) -> list[list[str]]:
    values = {c: list(group.buckets.get(c, [])) for c in columns}
    if StageCategory.ISSUES not in columns:
        # No Issues column: those cases are listed under Other.
        values[StageCategory.OTHER].extend(group.buckets.get(StageCategory.ISSUES, []))
    return [values[c] for c in columns]


def build_section(group: DateGroup, case_type: CaseType, language: Language = Language.ENGLISH) -> PageSection:
    columns = columns_for(case_type)
    column_values = _column_values(group, columns)
    row_count = max((len(v) for v in column_values), default=0)
    body = [
        [col[i] if i < len(col) else "" for col in column_values]
        for i in range(row_count)
    ]
    return PageSection(
        title=group_title(group),
        date_key=group.key,
        head=head_row(case_type, language),
        body=body,
    )


def assemble_report(
    paged_groups: list[list[DateGroup]],
    case_type: CaseType,
    language: Language = Language.ENGLISH,
) -> list[ReportPage]:
    return [
        ReportPage(
            page_number=i,
            sections=[build_section(g, case_type, language) for g in page],
        )
        for i, page in enumerate(paged_groups, start=1)
    ]


def flatten_report(pages: list[ReportPage]) -> Counter:
    """Multiset of non-blank case numbers present in the report bodies."""
    found: Counter = Counter()
    for page in pages:
        for section in page.sections:
            for row in section.body:
                found.update(cell for cell in row if cell)
    return found
