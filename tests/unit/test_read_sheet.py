"""
Unit tests for sheet decoding (Step 1).
"""
from __future__ import annotations

import io
from datetime import datetime

import pytest
from openpyxl import Workbook

from apps.worker.steps.step01_read_sheet import SheetDecodeError, read_csv, read_sheet, read_xlsx


def _xlsx_bytes(rows: list[list]) -> bytes:
    wb = Workbook()
    ws = wb.active
    for row in rows:
        ws.append(row)
    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()


class TestReadXlsx:
    def test_header_row_becomes_keys(self):
        data = _xlsx_bytes([
            ["Case", "Next Date", "Purpose"],
            ["RCS 1/2024", datetime(2024, 1, 5), "Evidence"],
            ["RCS 2/2024", "06-01-2024", "Hearing"],
        ])
        rows = read_xlsx(data)
        assert len(rows) == 2
        assert rows[0]["Case"] == "RCS 1/2024"
        assert rows[0]["Next Date"] == datetime(2024, 1, 5)
        assert rows[1]["Next Date"] == "06-01-2024"

    def test_blank_header_gets_placeholder(self):
        data = _xlsx_bytes([["Case", None, "Purpose"], ["A", "x", "Hearing"]])
        rows = read_xlsx(data)
        assert rows[0]["Column 2"] == "x"

    def test_not_a_workbook(self):
        with pytest.raises(SheetDecodeError):
            read_xlsx(b"definitely not a zip archive")


class TestReadCsv:
    def test_csv_rows(self):
        data = "Case,Next Date,Purpose\nRCS 1/2024,05/01/2024,Evidence\n".encode("utf-8")
        assert read_csv(data) == [{"Case": "RCS 1/2024", "Next Date": "05/01/2024", "Purpose": "Evidence"}]

    def test_bom_is_stripped(self):
        data = "\ufeffCase,Purpose\nA,Hearing\n".encode("utf-8")
        assert list(read_csv(data)[0]) == ["Case", "Purpose"]

    def test_overflow_cells_dropped(self):
        data = b"Case,Purpose\nA,Hearing,extra\n"
        assert read_csv(data) == [{"Case": "A", "Purpose": "Hearing"}]

    def test_marathi_text_survives(self):
        data = "Case,Purpose\nA,सुनावणी\n".encode("utf-8")
        assert read_csv(data)[0]["Purpose"] == "सुनावणी"

    def test_invalid_utf8(self):
        with pytest.raises(SheetDecodeError):
            read_csv(b"Case\n\xff\xfe\xfa")


class TestReadSheet:
    def test_dispatch_on_suffix(self):
        assert read_sheet(b"Case\nA\n", "Diary.CSV") == [{"Case": "A"}]
        data = _xlsx_bytes([["Case"], ["A"]])
        assert read_sheet(data, "diary.xlsx") == [{"Case": "A"}]

    def test_unsupported_extension(self):
        with pytest.raises(SheetDecodeError, match="Unsupported file type"):
            read_sheet(b"whatever", "diary.pdf")

    def test_empty_upload(self):
        with pytest.raises(SheetDecodeError, match="Empty file"):
            read_sheet(b"", "diary.csv")
