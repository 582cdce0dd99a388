"""Domain models for the oil sample form generator.

Frozen dataclasses shared by the ingestion pipeline and the report
expansion engine.
"""

from .error_record import ErrorRecord
from .ingestion_result import IngestionResult, SheetStat
from .record import HeaderCandidate, NormalizedRecord, SheetCollection
from .report import Page, ReportItem, SourceUnit, make_item_id
from .selection import SelectionConfig, SelectionError

__all__ = [
    # Ingestion
    "HeaderCandidate",
    "NormalizedRecord",
    "SheetCollection",
    "IngestionResult",
    "SheetStat",
    "ErrorRecord",
    # Report expansion
    "SelectionConfig",
    "SelectionError",
    "SourceUnit",
    "ReportItem",
    "Page",
    "make_item_id",
]
