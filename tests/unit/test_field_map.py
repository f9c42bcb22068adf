"""
Unit tests for field mapping (Step 2).
"""
from datetime import datetime

from apps.worker.steps.step02_field_map import (
    FIELD_ALIASES,
    map_row,
    map_rows,
    resolve_field,
)


class TestResolveField:
    def test_exact_header(self):
        assert resolve_field({"Case": "RCS 12/2023"}, FIELD_ALIASES["case_number"]) == "RCS 12/2023"

    def test_padded_and_mixed_case_header(self):
        row = {"  case NUMBER ": "SCC 4/2022"}
        assert resolve_field(row, FIELD_ALIASES["case_number"]) == "SCC 4/2022"

    def test_missing_header_returns_empty_string(self):
        assert resolve_field({"Something": 1}, FIELD_ALIASES["purpose"]) == ""

    def test_first_key_in_row_order_wins(self):
        row = {"Purpose": "Evidence", "Next Purpose": "Arguments"}
        assert resolve_field(row, FIELD_ALIASES["purpose"]) == "Evidence"


class TestAliasTable:
    def test_aliases_are_mutually_exclusive(self):
        seen: dict[str, str] = {}
        for field, aliases in FIELD_ALIASES.items():
            for alias in aliases:
                key = alias.strip().lower()
                assert key not in seen, f"{alias} used by {seen.get(key)} and {field}"
                seen[key] = field


class TestMapRow:
    def test_maps_all_three_fields(self):
        m = map_row({"Cases": "A1", "Next Date": "05-01-2024", "Next Purpose": "Final Arguments"}, 3)
        assert m.case_number == "A1"
        assert m.date_value == "05-01-2024"
        assert m.purpose == "Final Arguments"
        assert m.row_number == 3

    def test_native_date_value_is_passed_through(self):
        dt = datetime(2024, 1, 5)
        m = map_row({"Case": "A1", "Date": dt})
        assert m.date_value == dt

    def test_numeric_case_number_has_no_decimal_suffix(self):
        assert map_row({"Case": 1234.0}).case_number == "1234"

    def test_none_values_become_blank(self):
        m = map_row({"Case": None, "Purpose": None, "Date": None})
        assert m.case_number == ""
        assert m.purpose == ""
        assert m.date_value == ""


class TestMapRows:
    def test_rows_without_case_number_are_kept_with_warning(self):
        mapped, warnings = map_rows([(1, {"Purpose": "Hearing"}), (2, {"Case": "B2"})])
        assert [m.case_number for m in mapped] == ["", "B2"]
        assert any(w.code == "MISSING_CASE_NUMBER" and w.row == 1 for w in warnings)

    def test_unmapped_column_reported_once(self):
        rows = [(1, {"Case": "A", "Court Hall": "2"}), (2, {"Case": "B", "Court Hall": "3"})]
        _, warnings = map_rows(rows)
        assert [w.code for w in warnings].count("UNMAPPED_COLUMN") == 1
