from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Any

import pandas as pd

"""Scalar helpers shared by the ingestion pipeline.

Cells coming out of the spreadsheet reader are plain Python scalars (str, int,
float, bool, datetime, time) or None. These helpers give them the text / date
treatment the normalizer needs without changing their type elsewhere.
"""

__all__ = [
    "UNIX_EPOCH_SERIAL",
    "MIN_DATE_SERIAL",
    "MIN_DATE_TEXT_LENGTH",
    "is_blank",
    "is_number",
    "cell_text",
    "clean_cell",
    "format_date",
]

# Spreadsheet serial of 1970-01-01
UNIX_EPOCH_SERIAL = 25569
# Numbers below this are ordinary values (years, counts) rather than serials
MIN_DATE_SERIAL = 10000
MIN_DATE_TEXT_LENGTH = 6
MS_PER_DAY = 86_400_000

_EPOCH = datetime(1970, 1, 1)


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_blank(value: Any) -> bool:
    """True for None, NaN and whitespace-only strings."""
    if value is None:
        return True
    if isinstance(value, float) and value != value:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    return False


def clean_cell(value: Any) -> Any:
    """Convert a raw reader cell into a plain scalar (NaN/NaT -> None)."""
    if value is None:
        return None
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        return value
    if isinstance(value, pd.Timestamp):
        return value.to_pydatetime()
    if hasattr(value, "item") and not isinstance(value, (str, bytes)):
        # numpy scalar
        value = value.item()
    if isinstance(value, float) and value.is_integer():
        # int columns come back as float when the column has gaps
        return int(value)
    return value


def cell_text(value: Any) -> str:
    """Render a cell the way a spreadsheet displays it (``12.0`` -> ``"12"``)."""
    if value is None:
        return ""
    if isinstance(value, float):
        if value != value:
            return ""
        if value.is_integer():
            return str(int(value))
    return str(value)


def _serial_to_iso(serial: float) -> str | None:
    try:
        ms = round((serial - UNIX_EPOCH_SERIAL) * MS_PER_DAY)
        return (_EPOCH + timedelta(milliseconds=ms)).date().isoformat()
    except (OverflowError, ValueError):
        return None


def _parse_date(value: Any) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        ts = pd.to_datetime(str(value))
    except (ValueError, TypeError, OverflowError, pd.errors.OutOfBoundsDatetime):
        return None
    if ts is pd.NaT or pd.isna(ts):
        return None
    if ts.tzinfo is not None:
        ts = ts.tz_convert("UTC")
    return ts.date()


def format_date(value: Any) -> Any:
    """Reformat a date-column cell to ``YYYY-MM-DD`` when it plausibly is a date.

    - blank -> ``""``
    - time-of-day values are returned unchanged
    - numbers below ``MIN_DATE_SERIAL`` are returned unchanged
    - larger numbers are spreadsheet day serials
    - anything else is parsed as a calendar date; unparseable values and
      values whose text is shorter than ``MIN_DATE_TEXT_LENGTH`` come back as-is
    """
    if value is None or value == "":
        return ""
    if isinstance(value, time):
        # time-of-day cell, no calendar date to report
        return value
    if is_number(value):
        if value != value or value < MIN_DATE_SERIAL:
            return value
        iso = _serial_to_iso(value)
        return iso if iso is not None else value
    if len(str(value)) < MIN_DATE_TEXT_LENGTH:
        return value
    parsed = _parse_date(value)
    if parsed is None:
        return value
    return parsed.isoformat()
