"""
Step 0: Input validation.
Verify the decoded sheet is a non-empty sequence of row mappings.
Rows that are not mappings or carry no values are skipped with a warning.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from packages.shared.models import Warning


class InvalidInputError(ValueError):
    """The input is not a recognizable tabular structure."""


def validate_rows(rows: Any) -> tuple[list[tuple[int, dict[str, Any]]], list[Warning]]:
    """
    Validate raw rows and return ([(row_number, row), ...], warnings).
    Raises InvalidInputError when no row objects can be produced at all.
    """
    if rows is None or isinstance(rows, (str, bytes, Mapping)) or not isinstance(rows, Sequence):
        raise InvalidInputError("Input is not a sequence of spreadsheet rows")
    if len(rows) == 0:
        raise InvalidInputError("Spreadsheet contains no rows")

    warnings: list[Warning] = []
    valid: list[tuple[int, dict[str, Any]]] = []

    for idx, row in enumerate(rows, start=1):
        if not isinstance(row, Mapping):
            warnings.append(Warning(
                code="INVALID_ROW",
                message=f"Row {idx} is not a mapping of column headers to values",
                row=idx,
            ))
            continue

        if all(v is None or (isinstance(v, str) and not v.strip()) for v in row.values()):
            warnings.append(Warning(
                code="BLANK_ROW",
                message=f"Row {idx} has no values",
                row=idx,
            ))
            continue

        valid.append((idx, dict(row)))

    if not valid:
        raise InvalidInputError("Spreadsheet contains no usable rows")

    return valid, warnings
