from __future__ import annotations

from dataclasses import dataclass

from .record import NormalizedRecord

"""Report expansion models: source units, report items and print pages."""

__all__ = [
    "SourceUnit",
    "ReportItem",
    "Page",
    "make_item_id",
]


def make_item_id(record_id: str, source: str, detail: str | None, batch_index: int) -> str:
    """Composite identifier, stable for identical inputs."""
    return f"{record_id}-{source}-{detail or ''}-{batch_index}"


@dataclass(frozen=True)
class SourceUnit:
    """One resolved sample draw point (``detail`` only set for "Other")."""
    source: str
    detail: str | None = None


@dataclass(frozen=True)
class ReportItem:
    """Snapshot of one printable oil sample form.

    ``sample_date`` is empty when generated; callers fill it per ``item_id``
    (see ``services.export.apply_date_overrides``).
    """
    item_id: str
    record: NormalizedRecord
    source: str
    other_detail: str | None
    tests: tuple[str, ...]
    reasons: tuple[str, ...]
    equipment_types: tuple[str, ...]
    batch_index: int = 0
    sample_date: str = ""


@dataclass(frozen=True)
class Page:
    """Print page of consecutive items in generation order."""
    number: int  # 1-based
    items: tuple[ReportItem, ...]

    def __len__(self) -> int:
        return len(self.items)
