"""
Page-break planning for the diary.

The engine only decides where a new page starts; the rendering backend
still handles overflow inside a page. Height estimates come from a
HeightPolicy so they can be recalibrated per backend.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from packages.shared.models import CaseType, DateGroup, PageBudget

logger = logging.getLogger(__name__)


class HeightPolicy(Protocol):
    @property
    def page_top(self) -> float: ...

    @property
    def page_bottom(self) -> float: ...

    def group_height(self, row_count: int) -> float: ...


@dataclass(frozen=True)
class LinearHeightPolicy:
    """Fixed header/footer allowance plus a constant height per body row."""
    page_height: float = 277.0
    top_margin: float = 20.0
    header_allowance: float = 10.0
    head_row_height: float = 8.0
    row_height: float = 7.0
    footer_allowance: float = 15.0

    @classmethod
    def from_budget(cls, budget: PageBudget) -> "LinearHeightPolicy":
        return cls(**budget.model_dump())

    @property
    def page_top(self) -> float:
        return self.top_margin

    @property
    def page_bottom(self) -> float:
        return self.page_height

    def group_height(self, row_count: int) -> float:
        rows = max(row_count, 1)
        return self.header_allowance + self.head_row_height + rows * self.row_height + self.footer_allowance


def paginate_groups(
    groups: list[DateGroup],
    policy: HeightPolicy,
    case_type: CaseType = CaseType.CIVIL,
) -> list[list[DateGroup]]:
    """
    Split ordered groups into pages. A group that does not fit the space left
    on a non-empty page starts the next page; groups are never split.
    Heights are sized for the case type's column layout.
    """
    pages: list[list[DateGroup]] = []
    current: list[DateGroup] = []
    cursor = policy.page_top

    for group in groups:
        row_count = group.row_count_for(case_type)
        needed = policy.group_height(row_count)
        if current and cursor + needed > policy.page_bottom:
            pages.append(current)
            current = []
            cursor = policy.page_top
        if not current and policy.page_top + needed > policy.page_bottom:
            logger.info(f"Pagination: group {group.key} is taller than one page ({row_count} rows)")
        current.append(group)
        cursor += needed

    if current:
        pages.append(current)
    return pages
