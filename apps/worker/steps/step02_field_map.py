"""
Step 2: Field mapping.
Resolve the three canonical fields (case number, hearing date, purpose)
from rows whose headers vary in spelling, case and padding.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from packages.shared.models import MappedRow, Warning

# Ordered alias lists per canonical field. No alias may appear under two
# fields, so a header can never satisfy more than one of them.
FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "case_number": ("Cases", "Case Number", "Case", "Case No", "Case No."),
    "date": ("Next Date", "Date", "Next Hearing Date"),
    "purpose": ("Next Purpose", "Purpose", "Stage"),
}


def _norm_key(key: Any) -> str:
    return str(key).strip().lower()


def resolve_field(row: Mapping[str, Any], aliases: Sequence[str]) -> Any:
    """Return the value under the first row key matching any alias, else ''."""
    targets = {_norm_key(a) for a in aliases}
    for key, value in row.items():
        if _norm_key(key) in targets:
            return value
    return ""


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def map_row(row: Mapping[str, Any], row_number: int | None = None) -> MappedRow:
    date_value = resolve_field(row, FIELD_ALIASES["date"])
    if isinstance(date_value, str):
        date_value = date_value.strip()
    return MappedRow(
        case_number=_text(resolve_field(row, FIELD_ALIASES["case_number"])),
        date_value="" if date_value is None else date_value,
        purpose=_text(resolve_field(row, FIELD_ALIASES["purpose"])),
        row_number=row_number,
    )


def map_rows(rows: list[tuple[int, dict[str, Any]]]) -> tuple[list[MappedRow], list[Warning]]:
    """
    Map validated rows to canonical fields.
    Returns (mapped_rows, warnings). Rows are never dropped here.
    """
    warnings: list[Warning] = []
    mapped: list[MappedRow] = []
    known = {_norm_key(a) for aliases in FIELD_ALIASES.values() for a in aliases}
    unmapped_reported: set[str] = set()

    for row_number, row in rows:
        for key in row:
            nk = _norm_key(key)
            if nk not in known and nk not in unmapped_reported:
                unmapped_reported.add(nk)
                warnings.append(Warning(
                    code="UNMAPPED_COLUMN",
                    message=f"Column '{str(key).strip()}' is not used by the diary",
                    row=row_number,
                ))

        m = map_row(row, row_number)
        if not m.case_number:
            warnings.append(Warning(
                code="MISSING_CASE_NUMBER",
                message=f"Row {row_number} has no recognised case number column value",
                row=row_number,
            ))
        mapped.append(m)

    return mapped, warnings
