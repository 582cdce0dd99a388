from __future__ import annotations

import json
from pathlib import Path

from oilforms.cli import main as cli_main
from oilforms.logging.init import reset_logging
from tests.helpers import write_workbook

"""Failure paths: nothing is exported and the error log carries the cause."""

SELECTION = ["--source", "Main Tank Top", "--test", "Oil Quality Test"]


def test_zero_record_workbook_writes_error_log(temp_workdir: Path, capsys):
    reset_logging()
    book = write_workbook(temp_workdir / "data" / "empty.xlsx", {"Sheet1": [["Substation", "Area"]]})
    code = cli_main([str(book), *SELECTION])
    out = capsys.readouterr().out
    assert code == 1
    assert "ERROR ingestion: no valid records found in any sheet" in out
    assert not (temp_workdir / "out").exists()

    logs = list((temp_workdir / "logs").glob("errors-*.log"))
    assert len(logs) == 1
    entries = [json.loads(x) for x in logs[0].read_text(encoding="utf-8").splitlines()]
    assert entries == [
        {
            "timestamp": entries[0]["timestamp"],
            "file": "empty.xlsx",
            "sheet": "",
            "error_type": "NO_RECORDS",
            "message": "no valid records found in any sheet",
        }
    ]


def test_corrupt_workbook_uses_configured_log_directory(temp_workdir: Path, capsys):
    reset_logging()
    (temp_workdir / "config" / "forms.yml").write_text("log_directory: ./run-logs\n", encoding="utf-8")
    book = temp_workdir / "data" / "corrupt.xlsx"
    book.write_bytes(b"not a zip archive")
    code = cli_main([str(book), *SELECTION])
    out = capsys.readouterr().out
    assert code == 1
    assert "ERROR ingestion: failed to process workbook" in out
    logs = list((temp_workdir / "run-logs").glob("errors-*.log"))
    assert len(logs) == 1
    assert json.loads(logs[0].read_text(encoding="utf-8"))["error_type"] == "READ_FAILED"


def test_blocked_selection_writes_nothing(temp_workdir: Path, equipment_workbook: Path, capsys):
    reset_logging()
    code = cli_main([str(equipment_workbook), "--source", "Other", "--test", "Oil Quality Test"])
    capsys.readouterr()
    assert code == 2
    assert not (temp_workdir / "out").exists()
    assert not list((temp_workdir / "logs").glob("errors-*.log"))
