"""
Unit tests for record selection (Step 5).
"""
from datetime import date

import pytest
from pydantic import ValidationError

from packages.shared.models import CaseRecord, CaseType, DateSelection, SelectionMode
from apps.worker.steps.step05_select import (
    filter_case_type,
    infer_case_type,
    search_records,
    select_records,
)


def _rec(case: str, d: date | None, purpose: str = "Hearing", raw: str | None = None) -> CaseRecord:
    return CaseRecord(case_number=case, raw_date=raw or (d.isoformat() if d else "N/A"), normalized_date=d, purpose=purpose)


class TestSelectRecords:
    def test_all_mode_keeps_undated(self):
        recs = [_rec("A", date(2024, 1, 1)), _rec("B", None)]
        assert select_records(recs, DateSelection.all()) == recs

    def test_range_is_inclusive_on_both_ends(self):
        recs = [
            _rec("before", date(2023, 12, 31)),
            _rec("start", date(2024, 1, 1)),
            _rec("mid", date(2024, 1, 15)),
            _rec("end", date(2024, 1, 31)),
            _rec("after", date(2024, 2, 1)),
        ]
        sel = DateSelection.between(date(2024, 1, 1), date(2024, 1, 31))
        assert [r.case_number for r in select_records(recs, sel)] == ["start", "mid", "end"]

    def test_single_day_range_excludes_next_day(self):
        recs = [_rec("A", date(2024, 1, 1)), _rec("B", date(2024, 1, 2))]
        sel = DateSelection.between(date(2024, 1, 1), date(2024, 1, 1))
        assert [r.case_number for r in select_records(recs, sel)] == ["A"]

    def test_range_excludes_undated(self):
        recs = [_rec("A", None), _rec("B", date(2024, 1, 1))]
        sel = DateSelection.between(date(2020, 1, 1), date(2030, 1, 1))
        assert [r.case_number for r in select_records(recs, sel)] == ["B"]

    def test_inverted_range_selects_nothing(self):
        recs = [_rec("A", date(2024, 1, 5))]
        sel = DateSelection.between(date(2024, 1, 10), date(2024, 1, 1))
        assert select_records(recs, sel) == []

    def test_range_requires_bounds(self):
        with pytest.raises(ValidationError):
            DateSelection(mode=SelectionMode.RANGE, start=date(2024, 1, 1))


class TestSearchRecords:
    def test_empty_term_keeps_everything(self):
        recs = [_rec("A", None), _rec("B", None)]
        assert search_records(recs, "  ") == recs

    def test_matches_case_number_purpose_and_raw_date(self):
        recs = [
            _rec("RCS 10/2023", date(2024, 1, 5), "Evidence"),
            _rec("SCC 4/2022", date(2024, 1, 5), "Final Arguments"),
            _rec("MCA 1/2021", None, "Hearing", raw="pending"),
        ]
        assert [r.case_number for r in search_records(recs, "rcs")] == ["RCS 10/2023"]
        assert [r.case_number for r in search_records(recs, "ARGUMENTS")] == ["SCC 4/2022"]
        assert [r.case_number for r in search_records(recs, "pend")] == ["MCA 1/2021"]


class TestCaseType:
    @pytest.mark.parametrize("case", ["RCS 12/2023", "rcs 1/2020", "CMA 4/2022", "Darkhast 9/2019"])
    def test_civil_markers(self, case):
        assert infer_case_type(case) == CaseType.CIVIL

    @pytest.mark.parametrize("case", ["SCC 4/2022", "RCC 10/2021", ""])
    def test_everything_else_is_criminal(self, case):
        assert infer_case_type(case) == CaseType.CRIMINAL

    def test_filter_case_type(self):
        recs = [_rec("RCS 1/2024", None), _rec("SCC 2/2024", None)]
        assert [r.case_number for r in filter_case_type(recs, CaseType.CRIMINAL)] == ["SCC 2/2024"]
