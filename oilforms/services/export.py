from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from dataclasses import replace
from datetime import date, datetime, time
from pathlib import Path
from typing import Any

from ..models.report import Page, ReportItem
from .form_fields import resolve_form_fields

"""Report manifest export.

The print/PDF consumer renders one fixed-layout form per item from a JSON
manifest (pages -> items -> resolved fields and selections). Per-item sample
dates edited after generation are applied by item id.
"""

logger = logging.getLogger(__name__)

__all__ = [
    "apply_date_overrides",
    "item_to_dict",
    "build_manifest",
    "export_report",
]


def apply_date_overrides(
    items: Sequence[ReportItem],
    overrides: Mapping[str, str] | None = None,
    default: str | None = None,
) -> list[ReportItem]:
    """Return copies of ``items`` with ``sample_date`` set.

    ``overrides`` maps item id -> date; others get ``default`` (today).
    """
    fallback = default or date.today().isoformat()
    overrides = overrides or {}
    return [replace(item, sample_date=overrides.get(item.item_id, fallback)) for item in items]


def _json_value(value: Any) -> Any:
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return value


def item_to_dict(item: ReportItem) -> dict[str, Any]:
    return {
        "item_id": item.item_id,
        "record_id": item.record.id,
        "sheet": item.record.sheet_name,
        "station": item.record.station_name,
        "area": item.record.area_name,
        "fields": resolve_form_fields(item.record).as_dict(),
        "source": item.source,
        "other_detail": item.other_detail,
        "tests": list(item.tests),
        "reasons": list(item.reasons),
        "equipment_types": list(item.equipment_types),
        "batch_index": item.batch_index,
        "sample_date": item.sample_date,
        "values": {k: _json_value(v) for k, v in item.record.values.items()},
    }


def build_manifest(pages: Sequence[Page], title: str = "") -> dict[str, Any]:
    return {
        "title": title,
        "forms": sum(len(p) for p in pages),
        "pages": [
            {"number": p.number, "items": [item_to_dict(i) for i in p.items]}
            for p in pages
        ],
    }


def export_report(pages: Sequence[Page], path: Path, title: str = "") -> Path:
    """Write the manifest as UTF-8 JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    manifest = build_manifest(pages, title)
    path.write_text(json.dumps(manifest, ensure_ascii=False, indent=2), encoding="utf-8")
    logger.info(f"report written: {path} forms={manifest['forms']} pages={len(pages)}")
    return path
