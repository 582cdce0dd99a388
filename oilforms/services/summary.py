from __future__ import annotations

from collections.abc import Sequence

from ..models.ingestion_result import IngestionResult
from ..models.report import Page

"""SUMMARY line bodies.

The renderers return the key=value part only; ``log_summary`` prints it behind
the SUMMARY label:

    SUMMARY source={name} sheets={loaded}/{total} skipped_sheets={n} records={n} elapsed_sec={s}
    SUMMARY records={n} forms={n} pages={n}
"""

__all__ = [
    "format_seconds",
    "render_ingestion_summary",
    "render_report_summary",
]


def format_seconds(value: float) -> str:
    """Render seconds without scientific notation; integral values drop the fraction.

    >>> format_seconds(2.0)
    '2'
    >>> format_seconds(0.0001234)
    '0.000123'
    """
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return str(round(value, 3))


def render_ingestion_summary(result: IngestionResult) -> str:
    total = len(result.sheet_stats)
    return (
        f"source={result.source} "
        f"sheets={len(result.sheets)}/{total} "
        f"skipped_sheets={result.skipped_sheets} "
        f"records={result.total_records} "
        f"elapsed_sec={format_seconds(result.elapsed_seconds)}"
    )


def render_report_summary(record_count: int, pages: Sequence[Page]) -> str:
    forms = sum(len(p) for p in pages)
    return f"records={record_count} forms={forms} pages={len(pages)}"
