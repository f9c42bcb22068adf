from datetime import date

from packages.shared.models import CaseRecord, StageCategory
from apps.worker.lib.grouping import MISSING_CASE_LABEL, UNKNOWN_DATE_KEY, group_by_date, group_title


def mk_rec(case, d, purpose="Hearing"):
    return CaseRecord(case_number=case, raw_date=str(d), normalized_date=d, purpose=purpose)


def test_grouping_basic():
    recs = [
        mk_rec("A1", date(2024, 1, 5), "Final Arguments"),
        mk_rec("A2", date(2024, 1, 5), "Part Heard evidence recording"),
    ]
    groups = group_by_date(recs)
    assert len(groups) == 1
    assert groups[0].key == "05-01-2024"
    assert groups[0].buckets[StageCategory.ARGUMENTS] == ["A1"]
    assert groups[0].buckets[StageCategory.EVIDENCE_PH] == ["A2"]
    assert groups[0].buckets[StageCategory.EVIDENCE] == []


def test_grouping_chronological_not_lexical():
    # "02-12-2024" sorts before "15-01-2024" as a string
    recs = [mk_rec("late", date(2024, 12, 2)), mk_rec("early", date(2024, 1, 15))]
    groups = group_by_date(recs)
    assert [g.key for g in groups] == ["15-01-2024", "02-12-2024"]


def test_grouping_row_count_is_largest_bucket():
    d = date(2024, 3, 1)
    recs = [
        mk_rec("H1", d, "Hearing"),
        mk_rec("H2", d, "Notice"),
        mk_rec("H3", d, "Summons"),
        mk_rec("J1", d, "Judgment"),
    ]
    group = group_by_date(recs)[0]
    assert group.row_count == 3
    assert group.buckets[StageCategory.HEARING] == ["H1", "H2", "H3"]


def test_grouping_unknown_date_last():
    recs = [mk_rec("X", None), mk_rec("A", date(2024, 1, 1))]
    groups = group_by_date(recs, include_unknown=True)
    assert [g.key for g in groups] == ["01-01-2024", UNKNOWN_DATE_KEY]
    assert groups[-1].hearing_date is None


def test_grouping_drops_unknown_when_not_included():
    recs = [mk_rec("X", None), mk_rec("A", date(2024, 1, 1))]
    groups = group_by_date(recs, include_unknown=False)
    assert [g.key for g in groups] == ["01-01-2024"]


def test_group_title_uses_weekday_from_date():
    group = group_by_date([mk_rec("A", date(2024, 1, 5))])[0]
    assert group_title(group) == "DATE: 05-01-2024 (FRIDAY)"


def test_group_title_unknown_has_no_weekday():
    group = group_by_date([mk_rec("A", None)])[0]
    assert group_title(group) == "DATE: Unknown Date"


def test_grouping_empty_input():
    assert group_by_date([]) == []


def test_empty_case_number_gets_visible_label():
    recs = [mk_rec("", date(2024, 1, 5), "Hearing"), mk_rec("A", date(2024, 1, 5), "Hearing")]
    group = group_by_date(recs)[0]
    assert group.buckets[StageCategory.HEARING] == [MISSING_CASE_LABEL, "A"]
    assert group.row_count == 2
