from __future__ import annotations

import logging
from collections.abc import Collection, Iterable, Iterator, Sequence

from ..models.record import NormalizedRecord
from ..models.report import ReportItem, SourceUnit, make_item_id
from ..models.selection import DGA_TEST, OIL_QUALITY_TEST, OTHER_SOURCE, SelectionConfig
from .filters import select_records

"""Report expansion engine for the oil sample form.

Turns a record subset plus a SelectionConfig into the ordered sequence of
ReportItems: records x source units x test batches, record-major. The
computation is pure; it never mutates its inputs and performs no I/O, so two
calls with equal inputs give identical item ids in identical order.

Missing mandatory selections simply yield zero items here. Blocking the
submission is the caller's job (``SelectionConfig.missing_requirements``).
"""

logger = logging.getLogger(__name__)

__all__ = [
    "SEPARATE_DRAW_TESTS",
    "plan_test_batches",
    "expand_sources",
    "iter_report_items",
    "build_report_items",
]

# Each of these needs its own oil draw when both are requested together
SEPARATE_DRAW_TESTS: tuple[str, ...] = (OIL_QUALITY_TEST, DGA_TEST)


def plan_test_batches(tests: Iterable[str]) -> list[list[str]]:
    """Partition selected tests into physically separate sample batches.

    >>> plan_test_batches(["Oil Quality Test", "Dissolved Gas-in-Oil Analysis", "Furanic Compounds"])
    [['Oil Quality Test'], ['Dissolved Gas-in-Oil Analysis'], ['Furanic Compounds']]
    >>> plan_test_batches(["Furanic Compounds"])
    [['Furanic Compounds']]
    >>> plan_test_batches([])
    []
    """
    selected = list(dict.fromkeys(tests))
    if all(t in selected for t in SEPARATE_DRAW_TESTS):
        batches = [[t] for t in SEPARATE_DRAW_TESTS]
        remaining = [t for t in selected if t not in SEPARATE_DRAW_TESTS]
        if remaining:
            batches.append(remaining)
        return batches
    return [selected] if selected else []


def expand_sources(sources: Iterable[str], other_details: Iterable[str] = ()) -> list[SourceUnit]:
    """Resolve selected sample sources into draw-point units.

    "Other" fans out into one unit per selected detail, or a single unit
    without detail when none is selected.
    """
    details = list(dict.fromkeys(other_details))
    units: list[SourceUnit] = []
    for source in dict.fromkeys(sources):
        if source != OTHER_SOURCE:
            units.append(SourceUnit(source))
        elif details:
            units.extend(SourceUnit(OTHER_SOURCE, d) for d in details)
        else:
            units.append(SourceUnit(OTHER_SOURCE))
    return units


def iter_report_items(
    records: Iterable[NormalizedRecord],
    selection: SelectionConfig,
) -> Iterator[ReportItem]:
    """Lazily yield report items in record, source-unit, batch order."""
    units = expand_sources(selection.sources, selection.other_details)
    batches = [tuple(b) for b in plan_test_batches(selection.tests)]
    for record in records:
        for unit in units:
            for index, batch in enumerate(batches):
                yield ReportItem(
                    item_id=make_item_id(record.id, unit.source, unit.detail, index),
                    record=record,
                    source=unit.source,
                    other_detail=unit.detail,
                    tests=batch,
                    reasons=selection.reasons,
                    equipment_types=selection.equipment_types,
                    batch_index=index,
                )


def build_report_items(
    records: Sequence[NormalizedRecord],
    selection: SelectionConfig,
    selected_ids: Collection[str] | None = None,
) -> list[ReportItem]:
    """Materialize the full expansion.

    When ``selected_ids`` is non-empty only those records are expanded,
    otherwise all of ``records``.
    ``len(result) == len(records) * len(source units) * len(batches)``
    """
    records = select_records(records, selected_ids)
    items = list(iter_report_items(records, selection))
    logger.debug(f"expanded records={len(records)} items={len(items)}")
    return items
