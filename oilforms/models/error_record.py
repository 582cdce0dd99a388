from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime

"""Structured entry of the run error log.

Only workbook-level failures are logged (unreadable file, no sheets, no
records), so ``sheet`` is usually empty.
"""

__all__ = [
    "ErrorRecord",
]


@dataclass(frozen=True)
class ErrorRecord:
    """One failure as written to ``errors-*.log``.

    Attributes:
        timestamp: ISO8601 UTC with 'Z' suffix
        file: Workbook name ("<seed>" for the built-in dataset)
        sheet: Sheet name, or "" for workbook-level failures
        error_type: UPPER_SNAKE classification (READ_FAILED, EMPTY_WORKBOOK, NO_RECORDS)
        message: Text shown to the user
    """
    timestamp: str
    file: str
    sheet: str
    error_type: str
    message: str

    @staticmethod
    def create(file: str, sheet: str, error_type: str, message: str) -> ErrorRecord:
        stamp = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return ErrorRecord(stamp, file, sheet, error_type, message)

    def to_json_line(self) -> str:
        # exactly the dataclass fields, non-ASCII kept readable
        return json.dumps(asdict(self), ensure_ascii=False)
