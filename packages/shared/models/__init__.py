from .enums import (
    STAGE_LABELS,
    CaseType,
    ExportFormat,
    Language,
    ReportStatus,
    SelectionMode,
    StageCategory,
)
from .common import CourtHeading, DateSelection
from .domain import (
    CalendarDay,
    CaseRecord,
    DateGroup,
    DiaryConfig,
    DiaryReport,
    MappedRow,
    PageBudget,
    PageSection,
    ReportPage,
    Warning,
)

__all__ = [
    "STAGE_LABELS",
    "CalendarDay",
    "CaseRecord",
    "CaseType",
    "CourtHeading",
    "DateGroup",
    "DateSelection",
    "DiaryConfig",
    "DiaryReport",
    "ExportFormat",
    "Language",
    "MappedRow",
    "PageBudget",
    "PageSection",
    "ReportPage",
    "ReportStatus",
    "SelectionMode",
    "StageCategory",
    "Warning",
]
