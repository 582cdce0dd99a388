from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

"""Normalized equipment record and header-scan candidate models.

A NormalizedRecord is built once per data row at ingestion time and is never
mutated afterwards. ``station_name`` / ``area_name`` are pulled out as
first-class attributes; every other column stays in ``values`` under its
original header text, in original column order.
"""

__all__ = [
    "HeaderCandidate",
    "NormalizedRecord",
    "SheetCollection",
]


@dataclass(frozen=True)
class HeaderCandidate:
    """A scanned row considered as the header row of a sheet."""
    row_index: int
    score: int  # keyword score
    filled_cells: int  # non-empty cell count (density fallback)


@dataclass(frozen=True)
class NormalizedRecord:
    """One equipment/device entry derived from a spreadsheet row.

    Attributes:
        id: Unique within a session, deterministic for a fixed workbook
        station_name: Never empty; the configured sentinel when undetermined
        area_name: Possibly empty string
        values: Original header -> scalar value (overflow columns removed)
        sheet_name: Sheet the row came from
    """
    id: str
    station_name: str
    area_name: str
    values: Mapping[str, Any] = field(default_factory=dict)
    sheet_name: str = ""

    def __post_init__(self) -> None:
        # read-only view over a private copy
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    def __hash__(self) -> int:
        return hash((self.id, self.sheet_name, self.station_name, self.area_name))

    def get(self, column: str, default: Any = None) -> Any:
        return self.values.get(column, default)

    @property
    def columns(self) -> list[str]:
        return list(self.values.keys())

    def as_dict(self) -> dict[str, Any]:
        """Flat representation used by table/export consumers."""
        flat: dict[str, Any] = {
            "id": self.id,
            "stationName": self.station_name,
            "areaName": self.area_name,
        }
        flat.update(self.values)
        return flat


# Ordered sheet name -> records (insertion order == workbook order)
SheetCollection = dict[str, list[NormalizedRecord]]
