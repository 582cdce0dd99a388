from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime
from pathlib import Path

from ..models.error_record import ErrorRecord

"""Run-level error log.

Fatal ingestion failures are kept in memory while the run is in progress and
written as JSON Lines into ``<log_directory>/errors-YYYYMMDD-HHMMSS.log``
(UTC stamp of the first write). A run without failures leaves no file behind.
"""

__all__ = [
    "ErrorRecord",
    "ErrorLogBuffer",
]

LOGS_DIR = Path("./logs")
TIMESTAMP_FMT = "%Y%m%d-%H%M%S"


class ErrorLogBuffer:
    """Buffered JSON Lines writer for ErrorRecord entries (single threaded)."""

    def __init__(self, log_dir: Path | None = None) -> None:
        self._records: list[ErrorRecord] = []
        self._file_path: Path | None = None
        self.log_dir = log_dir or LOGS_DIR

    def _target(self) -> Path:
        if self._file_path is None:
            stamp = datetime.now(UTC).strftime(TIMESTAMP_FMT)
            self._file_path = self.log_dir / f"errors-{stamp}.log"
        return self._file_path

    def append(self, record: ErrorRecord) -> None:
        self._records.append(record)

    def record_failure(self, file: str, error_type: str, message: str, sheet: str = "") -> ErrorRecord:
        """Stamp and buffer a failure; returns the buffered record."""
        record = ErrorRecord.create(file, sheet, error_type, message)
        self.append(record)
        return record

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ErrorRecord]:
        return iter(self._records)

    def flush(self) -> Path | None:
        """Append buffered records to the run's log file and clear the buffer.

        Returns None (and creates nothing) when the buffer is empty.
        """
        if not self._records:
            return None
        target = self._target()
        target.parent.mkdir(parents=True, exist_ok=True)
        lines = "".join(r.to_json_line() + "\n" for r in self._records)
        with target.open("a", encoding="utf-8") as f:
            f.write(lines)
        self._records.clear()
        return target
