from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

import pandas as pd

from .scalars import cell_text, clean_cell, is_blank

"""Workbook reader (spreadsheet collaborator boundary).

Sheets are read raw (no header inference) so that header detection can run on
the full matrix. ``rows_to_objects`` then applies the located header row and
builds header-keyed row objects: blank header cells become ``__EMPTY``,
``__EMPTY_1`` ..., duplicate labels get ``_1``, ``_2`` suffixes, missing data
cells default to ``""`` and fully blank data rows are skipped.
"""

__all__ = [
    "RawSheet",
    "RawWorkbook",
    "WorkbookReadError",
    "read_workbook",
    "dataframe_to_rows",
    "header_keys",
    "rows_to_objects",
]

RawSheet = list[list[Any]]
RawWorkbook = dict[str, RawSheet]

EMPTY_HEADER = "__EMPTY"


class WorkbookReadError(Exception):
    """Raised when a workbook file cannot be opened or parsed."""


def dataframe_to_rows(df: pd.DataFrame) -> RawSheet:
    """Convert a raw (header=None) DataFrame to a row matrix of plain scalars."""
    rows: RawSheet = []
    for raw in df.itertuples(index=False, name=None):
        row = [clean_cell(v) for v in raw]
        # trailing blanks carry no information
        while row and row[-1] is None:
            row.pop()
        rows.append(row)
    return rows


def read_workbook(path: Path, target_sheets: Iterable[str] | None = None) -> RawWorkbook:
    """Read every sheet of ``path`` into a raw row matrix, in workbook order.

    Parameters
    ----------
    path: workbook file (.xlsx / .xls)
    target_sheets: restrict to these sheet names (None -> all sheets)

    Raises
    ------
    WorkbookReadError: unreadable file or parser failure
    """
    if not path.exists():
        raise WorkbookReadError(f"file not found: {path}")
    wanted = set(target_sheets) if target_sheets is not None else None
    workbook: RawWorkbook = {}
    try:
        with pd.ExcelFile(path) as xls:
            for name in xls.sheet_names:
                if wanted is not None and str(name) not in wanted:
                    continue
                df = xls.parse(name, header=None)
                workbook[str(name)] = dataframe_to_rows(df)
    except WorkbookReadError:
        raise
    except Exception as e:
        raise WorkbookReadError(f"cannot read workbook {path.name}: {e}") from e
    return workbook


def header_keys(header_row: Sequence[Any], width: int | None = None) -> list[str]:
    """Build unique column keys from a header row."""
    width = max(width or 0, len(header_row))
    keys: list[str] = []
    seen: dict[str, int] = {}
    empty_count = 0
    for i in range(width):
        cell = header_row[i] if i < len(header_row) else None
        if is_blank(cell):
            key = EMPTY_HEADER if empty_count == 0 else f"{EMPTY_HEADER}_{empty_count}"
            empty_count += 1
        else:
            key = cell_text(cell)
            if key in seen:
                seen[key] += 1
                key = f"{key}_{seen[key]}"
        seen.setdefault(key, 0)
        keys.append(key)
    return keys


def rows_to_objects(rows: Sequence[Sequence[Any]], header_index: int = 0) -> list[dict[str, Any]]:
    """Apply the header row at ``header_index`` to the rows below it."""
    if header_index >= len(rows):
        return []
    data = rows[header_index + 1:]
    width = max((len(r) for r in data), default=0)
    keys = header_keys(rows[header_index], width)
    objects: list[dict[str, Any]] = []
    for raw in data:
        if all(is_blank(c) for c in raw):
            continue
        obj: dict[str, Any] = {}
        for i, key in enumerate(keys):
            value = raw[i] if i < len(raw) else None
            obj[key] = "" if value is None else value
        objects.append(obj)
    return objects
