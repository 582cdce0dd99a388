from __future__ import annotations

from pathlib import Path

from oilforms.cli import main as cli_main
from oilforms.logging.init import reset_logging
from tests.helpers import write_workbook

"""Exit code contract: 0 success, 1 fatal, 2 selection blocked."""

SELECTION = ["--source", "Main Tank Bottom", "--test", "Furanic Compounds"]


def test_exit_code_fatal_config(temp_workdir: Path, capsys):
    reset_logging()
    code = cli_main(["--config", str(temp_workdir / "config" / "absent.yml"), *SELECTION])
    captured = capsys.readouterr()
    assert code == 1
    assert "ERROR config:" in captured.out


def test_exit_code_fatal_no_records(temp_workdir: Path, capsys):
    reset_logging()
    book = write_workbook(temp_workdir / "data" / "captions.xlsx", {"Cover": [["Register"]], "Index": [["Contents"]]})
    code = cli_main([str(book), *SELECTION])
    captured = capsys.readouterr()
    assert code == 1
    assert "ERROR ingestion: no valid records found in any sheet" in captured.out


def test_exit_code_all_success(temp_workdir: Path, equipment_workbook: Path, capsys):
    reset_logging()
    code = cli_main([str(equipment_workbook), *SELECTION])
    capsys.readouterr()
    assert code == 0


def test_exit_code_selection_blocked(temp_workdir: Path, equipment_workbook: Path, capsys):
    reset_logging()
    code = cli_main([str(equipment_workbook), "--test", "Furanic Compounds"])
    captured = capsys.readouterr()
    assert code == 2
    assert "WARN selection: select at least one sample source" in captured.out
