from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from packages.shared.models import (  # noqa: E402
    CaseType,
    CourtHeading,
    DateSelection,
    DiaryConfig,
    ExportFormat,
    Language,
)
from apps.worker.pipeline import compile_diary  # noqa: E402
from apps.worker.steps.step00_validate import InvalidInputError  # noqa: E402
from apps.worker.steps.step01_read_sheet import SheetDecodeError, read_sheet  # noqa: E402
from apps.worker.steps.export_render import export_filename, render_diary  # noqa: E402

logger = logging.getLogger("kharda.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compile a hearing diary from a registry spreadsheet.")
    parser.add_argument("sheet", help="Path to the .xlsx or .csv export")
    parser.add_argument("--start", type=date.fromisoformat, help="First hearing date (YYYY-MM-DD)")
    parser.add_argument("--end", type=date.fromisoformat, help="Last hearing date (YYYY-MM-DD)")
    parser.add_argument("--case-type", choices=[c.value for c in CaseType], default=CaseType.CIVIL.value)
    parser.add_argument("--language", choices=[lang.value for lang in Language], default=Language.ENGLISH.value)
    parser.add_argument("--format", dest="fmt", choices=[f.value for f in ExportFormat], default=ExportFormat.PDF.value)
    parser.add_argument("--search", default="", help="Only include records containing this text")
    parser.add_argument("--only-case-type", action="store_true", help="Drop records of the other case type")
    parser.add_argument("--court-level", default="")
    parser.add_argument("--court-village", default="")
    parser.add_argument("--taluka", default="")
    parser.add_argument("--district", default="")
    parser.add_argument("--output-dir", default=".", help="Directory for the rendered diary")
    parser.add_argument("--warnings-json", help="Optional path to write collected row warnings")
    return parser


def config_from_args(args: argparse.Namespace) -> DiaryConfig:
    if (args.start is None) != (args.end is None):
        raise SystemExit("--start and --end must be given together")
    selection = DateSelection.between(args.start, args.end) if args.start else DateSelection.all()
    language = Language(args.language)
    return DiaryConfig(
        selection=selection,
        case_type=CaseType(args.case_type),
        language=language,
        search_term=args.search,
        restrict_to_case_type=args.only_case_type,
        court=CourtHeading(
            court_level=args.court_level,
            court_village=args.court_village,
            taluka=args.taluka,
            district=args.district,
            language=language,
        ),
    )


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    args = build_parser().parse_args(argv)
    config = config_from_args(args)
    sheet = Path(args.sheet)
    if not sheet.exists():
        logger.error(f"File not found: {sheet}")
        return 2

    try:
        rows = read_sheet(sheet.read_bytes(), sheet.name)
        report = compile_diary(rows, config)
    except (SheetDecodeError, InvalidInputError) as exc:
        logger.error(str(exc))
        return 2

    if args.warnings_json:
        Path(args.warnings_json).write_text(
            json.dumps([w.model_dump() for w in report.warnings], indent=2, ensure_ascii=False),
            encoding="utf-8",
        )

    if report.is_empty:
        logger.error("No records selected!")
        return 1

    fmt = ExportFormat(args.fmt)
    out_dir = Path(args.output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / export_filename(report, fmt)
    out_path.write_bytes(render_diary(report, fmt))
    logger.info(f"Wrote {out_path} ({report.record_count} records, {len(report.pages)} pages)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
