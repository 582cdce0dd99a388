# Shared pytest fixtures
from __future__ import annotations
import tempfile
from pathlib import Path

import pytest

from oilforms.models.record import NormalizedRecord
from tests.helpers import make_record, write_workbook


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        (p / "logs").mkdir()
        monkeypatch.chdir(p)
        monkeypatch.delenv("OILFORMS_CONFIG", raising=False)
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """header_scan_limit: 500
station_sentinel: unspecified
forms_per_page: 2
output_directory: ./out
log_directory: ./logs
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "forms.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def equipment_workbook(temp_workdir: Path) -> Path:
    """Workbook with a title banner above the header, plus a sheet without data."""
    return write_workbook(
        temp_workdir / "data" / "equipment.xlsx",
        {
            "Power Transformer": [
                ["Power transformer register", None, None, None],
                [None, None, None, None],
                ["Substation", "Area", "Serial Number", "Commissioning Date"],
                ["Abu Alqaeed", "Jizan", 318042, 41640],
                ["Abu Arish 2", "Jizan", "1ZTR160901", "2021-03-15"],
                ["Addayir", "Sabya", 317377, None],
            ],
            "Notes": [
                ["Only a caption"],
            ],
        },
    )


@pytest.fixture()
def records() -> list[NormalizedRecord]:
    return [
        make_record("Sheet1:row-0", "Abu Alqaeed", "Jizan", Substation="Abu Alqaeed", MVA=133),
        make_record("Sheet1:row-1", "Addayir", "Jizan", Substation="Addayir", MVA=67),
        make_record("Sheet1:row-2", "Sabya", "Sabya", Substation="Sabya"),
        make_record("Sheet1:row-3", "unspecified", "Sabya"),
    ]
