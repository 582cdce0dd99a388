"""Test helpers shared across test packages (workbook writing, record building)."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import pandas as pd

from oilforms.models.record import NormalizedRecord


def write_workbook(path: Path, sheets: dict[str, list[list[Any]]]) -> Path:
    """Write raw row matrices as an .xlsx workbook (no pandas header/index)."""
    with pd.ExcelWriter(path) as writer:
        for sheet, rows in sheets.items():
            pd.DataFrame(rows).to_excel(writer, sheet_name=sheet, header=False, index=False)
    return path


def make_record(record_id: str, station: str = "S1", area: str = "A1", **values: Any) -> NormalizedRecord:
    return NormalizedRecord(id=record_id, station_name=station, area_name=area, values=dict(values))
