"""
Step 1: Sheet decoding.
Turn an uploaded .xlsx / .csv export into loosely-typed row mappings
(header -> cell value). Header names are passed through untouched; the
field mapper is responsible for reconciling them.
"""
from __future__ import annotations

import csv
import io
import logging
import zipfile
from pathlib import Path
from typing import Any

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

logger = logging.getLogger(__name__)

EXCEL_SUFFIXES = (".xlsx", ".xlsm")
CSV_SUFFIXES = (".csv",)
SUPPORTED_SUFFIXES = EXCEL_SUFFIXES + CSV_SUFFIXES


class SheetDecodeError(ValueError):
    """The upload could not be decoded into spreadsheet rows."""


def _header_names(header_cells: tuple[Any, ...]) -> list[str]:
    names: list[str] = []
    for i, cell in enumerate(header_cells, start=1):
        if cell is None or not str(cell).strip():
            names.append(f"Column {i}")
        else:
            names.append(str(cell))
    return names


def read_xlsx(data: bytes) -> list[dict[str, Any]]:
    """Read the first worksheet. Date cells arrive as datetime objects."""
    try:
        wb = load_workbook(io.BytesIO(data), read_only=True, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError) as exc:
        raise SheetDecodeError(f"Error reading Excel file: {exc}") from exc

    try:
        ws = wb.worksheets[0]
        row_iter = ws.iter_rows(values_only=True)
        header_cells = next(row_iter, None)
        if header_cells is None:
            return []
        headers = _header_names(header_cells)
        rows: list[dict[str, Any]] = []
        for values in row_iter:
            if values is None:
                continue
            rows.append({h: v for h, v in zip(headers, values)})
        return rows
    finally:
        wb.close()


def read_csv(data: bytes) -> list[dict[str, Any]]:
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise SheetDecodeError("CSV export is not valid UTF-8") from exc

    reader = csv.DictReader(io.StringIO(text))
    if not reader.fieldnames:
        return []
    rows: list[dict[str, Any]] = []
    for raw in reader:
        # DictReader stores overflow cells under the None key
        rows.append({k: v for k, v in raw.items() if k is not None})
    return rows


def read_sheet(data: bytes, filename: str) -> list[dict[str, Any]]:
    """Decode a spreadsheet export, dispatching on the file extension."""
    if not data:
        raise SheetDecodeError("Empty file")
    suffix = Path(filename or "").suffix.lower()
    if suffix in EXCEL_SUFFIXES:
        rows = read_xlsx(data)
    elif suffix in CSV_SUFFIXES:
        rows = read_csv(data)
    else:
        raise SheetDecodeError(
            f"Unsupported file type '{suffix or filename}'. Expected one of: {', '.join(SUPPORTED_SUFFIXES)}"
        )
    logger.info(f"Decoded {len(rows)} rows from {filename}")
    return rows
