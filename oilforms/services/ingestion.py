from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from ..config.loader import AppConfig
from ..excel.columns import map_columns
from ..excel.header import locate_header_row
from ..excel.normalizer import normalize_rows
from ..excel.reader import WorkbookReadError, header_keys, read_workbook, rows_to_objects
from ..models.ingestion_result import IngestionResult, SheetStat
from ..models.record import NormalizedRecord, SheetCollection
from .progress import SheetProgressIndicator

"""Workbook ingestion service (sheet processor).

Coordinates header location, column mapping and record normalization for every
sheet of a workbook and aggregates the results into a SheetCollection:

1. Locate the header row (bounded scan)
2. Build header-keyed row objects from the rows below it
3. Normalize every row into a NormalizedRecord
4. Keep the sheet only when it produced at least one record

Sheets yielding nothing are skipped silently. A workbook without sheets, or
one where no sheet yields a record, fails as a whole and installs no partial
state.
"""

logger = logging.getLogger(__name__)

__all__ = [
    "IngestionError",
    "process_sheet",
    "process_workbook",
    "load_workbook",
]


class IngestionError(Exception):
    """Fatal ingestion failure, reported to the user."""

    def __init__(self, message: str, error_type: str = "INGESTION_FAILED") -> None:
        super().__init__(message)
        self.error_type = error_type


def process_sheet(
    sheet_name: str,
    rows: Sequence[Sequence[Any]],
    config: AppConfig | None = None,
) -> tuple[list[NormalizedRecord], SheetStat]:
    """Normalize a single raw sheet.

    Returns:
        (records, stat); records is empty when the sheet has no usable data
    """
    cfg = config or AppConfig()
    if not rows:
        return [], SheetStat(sheet_name, 0, 0, None, None, 0, skipped=True)

    header_index = locate_header_row(rows, scan_limit=cfg.header_scan_limit)
    objects = rows_to_objects(rows, header_index)
    width = max((len(r) for r in rows[header_index + 1:]), default=0)
    keys = header_keys(rows[header_index], width)
    mapping = map_columns(keys)
    records = normalize_rows(
        objects,
        sheet_name=sheet_name,
        header=keys,
        station_sentinel=cfg.station_sentinel,
    )
    stat = SheetStat(
        sheet_name=sheet_name,
        raw_rows=len(rows),
        header_row=header_index,
        station_column=mapping.station,
        area_column=mapping.area,
        records=len(records),
        skipped=not records,
    )
    logger.debug(
        f"sheet={sheet_name!r} header_row={header_index} station_col={mapping.station!r} "
        f"area_col={mapping.area!r} records={len(records)}"
    )
    return records, stat


def process_workbook(
    workbook: Mapping[str, Sequence[Sequence[Any]]],
    config: AppConfig | None = None,
    *,
    source: str = "<workbook>",
) -> IngestionResult:
    """Process every sheet in workbook order.

    Raises:
        IngestionError: no sheets, or no records across all sheets
    """
    start_time = datetime.now(UTC)
    if not workbook:
        raise IngestionError("workbook contains no sheets", error_type="EMPTY_WORKBOOK")

    sheets: SheetCollection = {}
    stats: list[SheetStat] = []
    with SheetProgressIndicator(source, len(workbook)) as indicator:
        for name, rows in workbook.items():
            indicator.start_sheet(name)
            records, stat = process_sheet(name, rows, config)
            stats.append(stat)
            indicator.finish_sheet(rows_processed=len(records))
            if stat.skipped:
                logger.debug(f"sheet={name!r} skipped (no records)")
                continue
            sheets[name] = records

    if not sheets:
        raise IngestionError("no valid records found in any sheet", error_type="NO_RECORDS")

    end_time = datetime.now(UTC)
    return IngestionResult(
        source=source,
        sheets=sheets,
        sheet_stats=stats,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=(end_time - start_time).total_seconds(),
    )


def load_workbook(path: Path, config: AppConfig | None = None) -> IngestionResult:
    """Read ``path`` and ingest it.

    Reader failures are reported as a generic processing failure.
    """
    try:
        raw = read_workbook(path)
    except WorkbookReadError as e:
        raise IngestionError(f"failed to process workbook: {e}", error_type="READ_FAILED") from e
    return process_workbook(raw, config, source=path.name)
