from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .record import SheetCollection

"""Ingestion result models.

IngestionResult carries the SheetCollection handed to the filtering/table
consumer plus per-sheet statistics used for the SUMMARY line and for
``--inspect-data`` output.
"""

__all__ = [
    "SheetStat",
    "IngestionResult",
]


@dataclass(frozen=True)
class SheetStat:
    """Per-sheet processing statistics."""
    sheet_name: str
    raw_rows: int  # rows in the raw matrix
    header_row: int  # located header row index (0-based)
    station_column: str | None
    area_column: str | None
    records: int  # normalized records produced
    skipped: bool = False  # True when the sheet produced no records


@dataclass(frozen=True)
class IngestionResult:
    """Outcome of one workbook ingestion.

    ``sheets`` preserves workbook sheet order and never holds an empty list.
    """
    source: str  # file name, or "<seed>" for the synthetic dataset
    sheets: SheetCollection
    sheet_stats: list[SheetStat] = field(default_factory=list)
    start_time: datetime | None = None
    end_time: datetime | None = None
    elapsed_seconds: float = 0.0

    @property
    def total_records(self) -> int:
        return sum(len(records) for records in self.sheets.values())

    @property
    def skipped_sheets(self) -> int:
        return sum(1 for s in self.sheet_stats if s.skipped)

    @property
    def sheet_names(self) -> list[str]:
        return list(self.sheets.keys())
