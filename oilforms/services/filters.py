from __future__ import annotations

from collections.abc import Collection, Sequence
from dataclasses import dataclass

from ..excel.normalizer import UNSPECIFIED_STATION
from ..models.record import NormalizedRecord

"""Record filtering used by the table view and by report generation."""

__all__ = [
    "FilterState",
    "unique_areas",
    "unique_stations",
    "filter_records",
    "select_records",
]

_IGNORED_STATIONS = frozenset({"substation", "null"})


@dataclass(frozen=True)
class FilterState:
    station: str = ""
    area: str = ""


def _sort_key(value: str) -> tuple[str, str]:
    return (value.casefold(), value)


def unique_areas(records: Sequence[NormalizedRecord]) -> list[str]:
    areas = {r.area_name.strip() for r in records if r.area_name.strip()}
    return sorted(areas, key=_sort_key)


def unique_stations(
    records: Sequence[NormalizedRecord],
    area: str = "",
    sentinel: str = UNSPECIFIED_STATION,
) -> list[str]:
    """Distinct station names, optionally limited to one area.

    The sentinel is not sorted with the rest; it is appended last when any
    record in scope carries it.
    """
    in_scope = [r for r in records if not area or r.area_name == area]
    stations = {
        r.station_name.strip()
        for r in in_scope
        if r.station_name.strip()
        and r.station_name != sentinel
        and r.station_name.lower() not in _IGNORED_STATIONS
    }
    result = sorted(stations, key=_sort_key)
    if any(r.station_name == sentinel for r in in_scope):
        result.append(sentinel)
    return result


def filter_records(records: Sequence[NormalizedRecord], filters: FilterState) -> list[NormalizedRecord]:
    return [
        r for r in records
        if (not filters.area or r.area_name == filters.area)
        and (not filters.station or r.station_name == filters.station)
    ]


def select_records(
    records: Sequence[NormalizedRecord],
    selected_ids: Collection[str] | None = None,
) -> list[NormalizedRecord]:
    """Explicitly selected records (in record order), or all when nothing is selected."""
    if not selected_ids:
        return list(records)
    return [r for r in records if r.id in selected_ids]
