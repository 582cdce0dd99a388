from __future__ import annotations

from datetime import datetime, time

import numpy as np
import pandas as pd

from oilforms.excel.scalars import cell_text, clean_cell, format_date, is_blank, is_number


def test_format_date_serial_epoch():
    assert format_date(25569) == "1970-01-01"


def test_format_date_serial_modern():
    # 2024-01-01
    assert format_date(45292) == "2024-01-01"
    assert format_date(45292.75) == "2024-01-01"


def test_format_date_small_numbers_unchanged():
    assert format_date(5) == 5
    assert format_date(2013) == 2013
    assert format_date(9999.5) == 9999.5


def test_format_date_short_strings_unchanged():
    assert format_date("ab") == "ab"
    # parses as a date but too short to trust
    assert format_date("2013") == "2013"


def test_format_date_unparseable_string_unchanged():
    assert format_date("not a date at all") == "not a date at all"


def test_format_date_parses_strings():
    assert format_date("2021-03-15") == "2021-03-15"
    assert format_date("05 October 2025") == "2025-10-05"


def test_format_date_datetime_values():
    assert format_date(datetime(2020, 2, 29, 13, 45)) == "2020-02-29"


def test_format_date_keeps_time_of_day():
    assert format_date(time(7, 0)) == time(7, 0)
    assert format_date(time(23, 59, 30)) == time(23, 59, 30)


def test_format_date_blank():
    assert format_date(None) == ""
    assert format_date("") == ""


def test_format_date_bool_is_not_a_serial():
    assert format_date(True) is True


def test_cell_text():
    assert cell_text(None) == ""
    assert cell_text(12.0) == "12"
    assert cell_text(12.5) == "12.5"
    assert cell_text(" x ") == " x "
    assert cell_text(318042) == "318042"


def test_clean_cell_converts_reader_values():
    assert clean_cell(float("nan")) is None
    assert clean_cell(None) is None
    assert clean_cell(np.int64(7)) == 7 and isinstance(clean_cell(np.int64(7)), int)
    assert clean_cell(np.float64(3.0)) == 3 and isinstance(clean_cell(np.float64(3.0)), int)
    assert clean_cell(np.float64(3.5)) == 3.5
    assert clean_cell(pd.Timestamp("2024-01-02")) == datetime(2024, 1, 2)
    assert clean_cell(pd.NaT) is None
    assert clean_cell("text") == "text"
    assert clean_cell(time(7, 30)) == time(7, 30)


def test_is_blank_and_is_number():
    assert is_blank(None) and is_blank("  ") and is_blank(float("nan"))
    assert not is_blank(0) and not is_blank("a")
    assert is_number(1) and is_number(1.5)
    assert not is_number(True) and not is_number("1")
