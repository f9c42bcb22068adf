"""
Pipeline orchestrator: runs the diary steps in sequence.

Each call works on its own input snapshot and keeps no state between
calls, so concurrent requests need no locking.
"""
from __future__ import annotations

import asyncio
import logging
import time
import uuid
from typing import Any

from packages.shared.models import (
    CaseRecord,
    DiaryConfig,
    DiaryReport,
    ReportStatus,
    SelectionMode,
    Warning,
)

from apps.worker.lib.grouping import group_by_date
from apps.worker.lib.pagination import HeightPolicy, LinearHeightPolicy, paginate_groups
from apps.worker.steps.step00_validate import validate_rows
from apps.worker.steps.step02_field_map import map_rows
from apps.worker.steps.step03_dates import normalize_records
from apps.worker.steps.step05_select import filter_case_type, search_records, select_records
from apps.worker.steps.step06_assemble import assemble_report

logger = logging.getLogger(__name__)


def load_records(rows: Any, request_id: str = "-") -> tuple[list[CaseRecord], list[Warning]]:
    """Steps 0, 2, 3: validate, map fields, normalize dates."""
    all_warnings: list[Warning] = []

    logger.info(f"[{request_id}] Step 0: Input validation")
    valid_rows, step_warnings = validate_rows(rows)
    all_warnings.extend(step_warnings)

    logger.info(f"[{request_id}] Step 2: Field mapping ({len(valid_rows)} rows)")
    mapped, step_warnings = map_rows(valid_rows)
    all_warnings.extend(step_warnings)

    logger.info(f"[{request_id}] Step 3: Date normalization")
    records, step_warnings = normalize_records(mapped)
    all_warnings.extend(step_warnings)

    return records, all_warnings


def select_for_config(records: list[CaseRecord], config: DiaryConfig) -> list[CaseRecord]:
    selected = select_records(records, config.selection)
    selected = search_records(selected, config.search_term)
    if config.restrict_to_case_type:
        selected = filter_case_type(selected, config.case_type)
    return selected


def compile_diary(
    rows: Any,
    config: DiaryConfig | None = None,
    policy: HeightPolicy | None = None,
    request_id: str | None = None,
) -> DiaryReport:
    """
    Run the full diary pipeline over decoded spreadsheet rows.
    Raises InvalidInputError only when the input is not tabular at all.
    An empty selection returns a report with status "empty" and no pages.
    """
    config = config or DiaryConfig()
    policy = policy or LinearHeightPolicy.from_budget(config.page_budget)
    request_id = request_id or uuid.uuid4().hex[:8]
    start_time = time.time()

    records, all_warnings = load_records(rows, request_id)
    heading = config.court.render()

    logger.info(f"[{request_id}] Step 5: Record selection (mode={config.selection.mode.value})")
    selected = select_for_config(records, config)

    if not selected:
        logger.info(f"[{request_id}] No records selected; report not generated")
        return DiaryReport(
            heading=heading,
            case_type=config.case_type,
            language=config.language,
            status=ReportStatus.EMPTY,
            record_count=0,
            warnings=all_warnings,
        )

    logger.info(f"[{request_id}] Step 6: Grouping and pagination ({len(selected)} records)")
    groups = group_by_date(selected, include_unknown=config.selection.mode == SelectionMode.ALL)
    paged = paginate_groups(groups, policy, config.case_type)
    pages = assemble_report(paged, config.case_type, config.language)

    logger.info(
        f"[{request_id}] Diary compiled: records={len(selected)}, groups={len(groups)}, "
        f"pages={len(pages)}, warnings={len(all_warnings)}, seconds={time.time() - start_time:.3f}"
    )
    return DiaryReport(
        heading=heading,
        case_type=config.case_type,
        language=config.language,
        status=ReportStatus.OK,
        record_count=len(selected),
        pages=pages,
        warnings=all_warnings,
    )


async def compile_diary_deferred(
    rows: Any,
    config: DiaryConfig | None = None,
    policy: HeightPolicy | None = None,
    request_id: str | None = None,
) -> DiaryReport:
    """Yield once to the event loop, then run the synchronous pipeline."""
    await asyncio.sleep(0)
    return compile_diary(rows, config, policy=policy, request_id=request_id)
