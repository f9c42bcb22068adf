from datetime import date, datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from .enums import CaseType, Language, ReportStatus, StageCategory
from .common import CourtHeading, DateSelection


class Warning(BaseModel):
    code: str
    message: str
    row: Optional[int] = None


class PageBudget(BaseModel):
    """Layout constants (millimetres on A4) used by the default height policy."""
    page_height: float = 277.0
    top_margin: float = 20.0
    header_allowance: float = 10.0
    head_row_height: float = 8.0
    row_height: float = 7.0
    footer_allowance: float = 15.0


class DiaryConfig(BaseModel):
    """Configuration for a single diary generation request."""
    selection: DateSelection = Field(default_factory=DateSelection)
    case_type: CaseType = CaseType.CIVIL
    language: Language = Language.ENGLISH
    search_term: str = ""
    restrict_to_case_type: bool = False
    court: CourtHeading = Field(default_factory=CourtHeading)
    page_budget: PageBudget = Field(default_factory=PageBudget)


class CaseRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    case_number: str = ""
    raw_date: Any = None
    normalized_date: Optional[date] = None
    purpose: str = ""
    row_number: Optional[int] = None

    @property
    def raw_date_display(self) -> str:
        if self.raw_date is None:
            return ""
        if isinstance(self.raw_date, datetime):
            return self.raw_date.date().isoformat()
        if isinstance(self.raw_date, date):
            return self.raw_date.isoformat()
        return str(self.raw_date)


class DateGroup(BaseModel):
    key: str
    hearing_date: Optional[date] = None
    records: list[CaseRecord] = Field(default_factory=list)
    buckets: dict[StageCategory, list[str]] = Field(default_factory=dict)

    @property
    def row_count(self) -> int:
        return max((len(v) for v in self.buckets.values()), default=0)

    def row_count_for(self, case_type: CaseType) -> int:
        """Body rows in the case type's layout; criminal diaries list Issues under Other."""
        if case_type == CaseType.CIVIL:
            return self.row_count
        folded = (StageCategory.OTHER, StageCategory.ISSUES)
        other = sum(len(self.buckets.get(c, [])) for c in folded)
        rest = [len(v) for c, v in self.buckets.items() if c not in folded]
        return max([other, *rest])


class PageSection(BaseModel):
    title: str
    date_key: str
    head: list[str]
    body: list[list[str]] = Field(default_factory=list)


class ReportPage(BaseModel):
    page_number: int
    sections: list[PageSection] = Field(default_factory=list)


class DiaryReport(BaseModel):
    heading: str
    case_type: CaseType
    language: Language = Language.ENGLISH
    status: ReportStatus = ReportStatus.OK
    record_count: int = 0
    pages: list[ReportPage] = Field(default_factory=list)
    warnings: list[Warning] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.status == ReportStatus.EMPTY


class CalendarDay(BaseModel):
    hearing_date: date
    civil: int = 0
    criminal: int = 0
    weekly_off: bool = False


class MappedRow(BaseModel):
    """Canonical fields pulled from a raw spreadsheet row, before date normalization."""
    case_number: str = ""
    date_value: Any = ""
    purpose: str = ""
    row_number: Optional[int] = None
