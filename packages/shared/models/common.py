from datetime import date
from typing import Optional

from pydantic import BaseModel, model_validator

from .enums import Language, SelectionMode


class DateSelection(BaseModel):
    """Either every record (`all`) or a closed window of whole days (`range`)."""
    mode: SelectionMode = SelectionMode.ALL
    start: Optional[date] = None
    end: Optional[date] = None

    @model_validator(mode="after")
    def _require_bounds(self):
        if self.mode == SelectionMode.RANGE and (self.start is None or self.end is None):
            raise ValueError("range selection requires both start and end dates")
        return self

    @classmethod
    def all(cls) -> "DateSelection":
        return cls(mode=SelectionMode.ALL)

    @classmethod
    def between(cls, start: date, end: date) -> "DateSelection":
        return cls(mode=SelectionMode.RANGE, start=start, end=end)

    def contains(self, d: date | None) -> bool:
        if self.mode == SelectionMode.ALL:
            return True
        if d is None:
            return False
        return self.start <= d <= self.end


class CourtHeading(BaseModel):
    court_level: str = ""
    court_village: str = ""
    taluka: str = ""
    district: str = ""
    language: Language = Language.ENGLISH

    def render(self) -> str:
        """Build the document heading line, e.g. 'Civil Judge, Kharda, Taluka X, District Y'."""
        marathi = self.language == Language.MARATHI
        if not self.court_level.strip():
            return "दैनंदिनी" if marathi else "Legal Diary"
        taluka_label = "तालुका " if marathi else "Taluka "
        district_label = "जिल्हा " if marathi else "District "

        output = self.court_level.strip()
        if self.court_village.strip():
            output += f", {self.court_village.strip()}"
        if self.taluka.strip():
            output += f", {taluka_label}{self.taluka.strip()}"
        if self.district.strip():
            output += f", {district_label}{self.district.strip()}"
        return output
