from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from ..config.loader import AppConfig, ConfigError, load_config_or_default
from ..logging.error_log import ErrorLogBuffer
from ..logging.init import log_summary, set_level, setup_logging
from ..models.ingestion_result import IngestionResult
from ..models.selection import (
    EQUIPMENT_TYPES,
    OTHER_DETAILS,
    REASONS,
    REQUIRED_TESTS,
    SAMPLE_SOURCES,
    SelectionConfig,
    SelectionError,
)
from ..services.export import apply_date_overrides, export_report
from ..services.filters import FilterState, filter_records, select_records
from ..services.ingestion import IngestionError, load_workbook, process_workbook
from ..services.mock_data import SEED_SOURCE, build_mock_workbook
from ..services.pagination import paginate
from ..services.report_builder import build_report_items
from ..services.summary import render_ingestion_summary, render_report_summary

"""Command line entry point.

Flow:
- Load .env and the YAML config
- Ingest the workbook (or the seed workbook when none is given)
- Filter the chosen sheet by area / station, apply the explicit row selection
- Validate the sample selection, expand it into forms, paginate and export
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1
EXIT_SELECTION_BLOCKED = 2

CONFIG_ENV_VAR = "OILFORMS_CONFIG"


def _load_env_file(path: Path, override: bool = False) -> None:
    """Load .env via python-dotenv; failures only warn."""
    try:
        if path.exists():
            load_dotenv(dotenv_path=path, override=override)
    except OSError as e:
        print(f"WARNING: failed to load .env via python-dotenv: {e}")


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Oil sample request form generator")
    p.add_argument("workbook", nargs="?", type=Path, help="Excel workbook (omit to use the seed dataset)")
    p.add_argument("--config", type=Path, default=None, help="YAML config file")
    p.add_argument("--sheet", help="Sheet to report on (default: first loaded sheet)")
    p.add_argument("--area", default="", help="Filter by area name")
    p.add_argument("--station", default="", help="Filter by station name")
    p.add_argument("--select", action="append", default=[], metavar="RECORD_ID", help="Explicit record selection")
    p.add_argument("--source", action="append", default=[], choices=SAMPLE_SOURCES, help="Sample source")
    p.add_argument("--other-detail", action="append", default=[], choices=OTHER_DETAILS, help="Detail for the 'Other' source")
    p.add_argument("--test", action="append", default=[], choices=REQUIRED_TESTS, help="Required test")
    p.add_argument("--reason", action="append", default=[], choices=REASONS, help="Reason for test")
    p.add_argument("--equipment", action="append", default=[], choices=EQUIPMENT_TYPES, help="Equipment type")
    p.add_argument("--date", default=None, help="Sample date printed on every form (default: today)")
    p.add_argument("--output", type=Path, default=None, help="Report manifest path (.json)")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--inspect-data", action="store_true", help="Print sheets, header rows and sample records then exit")
    return p.parse_args(argv)


def _inspect_data(result: IngestionResult) -> int:
    for stat in result.sheet_stats:
        state = "skipped" if stat.skipped else f"records={stat.records}"
        print(
            f"SHEET: {stat.sheet_name} header_row={stat.header_row} "
            f"station_col={stat.station_column!r} area_col={stat.area_column!r} {state}"
        )
        for record in result.sheets.get(stat.sheet_name, [])[:3]:
            safe = {k: (v.isoformat() if hasattr(v, "isoformat") else v) for k, v in record.as_dict().items()}
            print("    sample=", safe)
    return EXIT_SUCCESS


def _ingest(args: argparse.Namespace, cfg: AppConfig) -> IngestionResult:
    if args.workbook is None:
        return process_workbook(build_mock_workbook(), cfg, source=SEED_SOURCE)
    return load_workbook(args.workbook, cfg)


def _report_title(filters: FilterState) -> str:
    if filters.station:
        return filters.station
    if filters.area:
        return f"Area: {filters.area}"
    return "All"


def _default_output(cfg: AppConfig, sheet: str) -> Path:
    slug = "".join(c if c.isalnum() else "-" for c in sheet).strip("-").lower() or "sheet"
    return Path(cfg.output_directory) / f"oil-sample-forms-{slug}.json"


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # None only: an empty list must not fall back to sys.argv (pytest flags)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"))

    config_path = args.config
    if config_path is None and os.getenv(CONFIG_ENV_VAR):
        config_path = Path(os.environ[CONFIG_ENV_VAR])
    try:
        cfg = load_config_or_default(config_path)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    if args.debug:
        set_level(logging.DEBUG)
        logger.debug("debug mode enabled")

    source_name = args.workbook.name if args.workbook is not None else SEED_SOURCE
    logger.info(f"Loading workbook: {source_name}")
    try:
        result = _ingest(args, cfg)
    except IngestionError as e:
        logger.error(f"ingestion: {e}")
        errors = ErrorLogBuffer(Path(cfg.log_directory))
        errors.record_failure(source_name, e.error_type, str(e))
        path = errors.flush()
        logger.info(f"error log: {path}")
        return EXIT_FATAL
    log_summary(render_ingestion_summary(result))

    if args.inspect_data:
        return _inspect_data(result)

    sheet = args.sheet or result.sheet_names[0]
    if sheet not in result.sheets:
        logger.error(f"sheet not found or empty: {sheet!r} (available: {', '.join(result.sheet_names)})")
        return EXIT_FATAL

    filters = FilterState(station=args.station, area=args.area)
    records = select_records(filter_records(result.sheets[sheet], filters), args.select)
    logger.info(f"sheet={sheet!r} records={len(records)}")

    try:
        selection = SelectionConfig.create(
            sources=args.source,
            other_details=args.other_detail,
            tests=args.test,
            reasons=args.reason,
            equipment_types=args.equipment,
        )
    except SelectionError as e:
        logger.error(f"selection: {e}")
        return EXIT_SELECTION_BLOCKED
    missing = selection.missing_requirements()
    if missing:
        for problem in missing:
            logger.warning(f"selection: {problem}")
        return EXIT_SELECTION_BLOCKED

    items = apply_date_overrides(build_report_items(records, selection), default=args.date)
    pages = paginate(items, cfg.forms_per_page)
    output = args.output or _default_output(cfg, sheet)
    export_report(pages, output, title=_report_title(filters))
    log_summary(render_report_summary(len(records), pages))
    return EXIT_SUCCESS
