from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from ..models.record import NormalizedRecord
from .columns import ColumnMapping, map_columns
from .scalars import cell_text, format_date

"""Row -> NormalizedRecord conversion.

Station/area values are derived here once and never recomputed. Cells equal to
a header literal (a repeated header line inside the data, or a caption row) are
treated as missing rather than kept as text.
"""

__all__ = [
    "UNSPECIFIED_STATION",
    "OVERFLOW_COLUMNS",
    "DATE_HEADER_TOKENS",
    "is_date_column",
    "station_value",
    "area_value",
    "normalize_row",
    "normalize_rows",
]

UNSPECIFIED_STATION = "unspecified"

# Names the reader gives to columns without a header label
OVERFLOW_COLUMNS: frozenset[str] = frozenset(
    ["__EMPTY"] + [f"__EMPTY_{i}" for i in range(1, 8)]
)

DATE_HEADER_TOKENS: tuple[str, ...] = ("date", "تاريخ")

_STATION_LITERALS = frozenset({"substation", "location", "division", "area", "null"})
_AREA_LITERALS = frozenset({"null", "division", "area"})


def is_date_column(header: str) -> bool:
    lowered = header.lower()
    return any(token in lowered for token in DATE_HEADER_TOKENS)


def _mapped_text(row: Mapping[str, Any], column: str | None) -> str:
    if column is None or column not in row:
        return ""
    return cell_text(row[column]).strip()


def station_value(row: Mapping[str, Any], column: str | None, sentinel: str = UNSPECIFIED_STATION) -> str:
    val = _mapped_text(row, column)
    if not val or val.lower() in _STATION_LITERALS:
        return sentinel
    return val


def area_value(row: Mapping[str, Any], column: str | None) -> str:
    val = _mapped_text(row, column)
    if not val or val.lower() in _AREA_LITERALS:
        return ""
    return val


def normalize_row(
    row: Mapping[str, Any],
    mapping: ColumnMapping,
    record_id: str,
    *,
    sheet_name: str = "",
    station_sentinel: str = UNSPECIFIED_STATION,
) -> NormalizedRecord:
    values: dict[str, Any] = {}
    for key, value in row.items():
        if key in OVERFLOW_COLUMNS:
            continue
        values[key] = format_date(value) if is_date_column(key) else value
    return NormalizedRecord(
        id=record_id,
        station_name=station_value(row, mapping.station, station_sentinel),
        area_name=area_value(row, mapping.area),
        values=values,
        sheet_name=sheet_name,
    )


def normalize_rows(
    rows: Iterable[Mapping[str, Any]],
    *,
    sheet_name: str = "",
    header: Iterable[str] | None = None,
    station_sentinel: str = UNSPECIFIED_STATION,
) -> list[NormalizedRecord]:
    """Normalize header-keyed rows of one sheet.

    Columns are mapped from ``header`` when given, otherwise from the keys of
    the first row. Record ids are ``"<sheet>:row-<n>"``.
    """
    row_list = list(rows)
    if not row_list:
        return []
    mapping = map_columns(header if header is not None else row_list[0].keys())
    prefix = f"{sheet_name}:" if sheet_name else ""
    return [
        normalize_row(
            row,
            mapping,
            f"{prefix}row-{i}",
            sheet_name=sheet_name,
            station_sentinel=station_sentinel,
        )
        for i, row in enumerate(row_list)
    ]
