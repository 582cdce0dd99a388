from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any

from ..models.record import HeaderCandidate
from .scalars import cell_text, is_blank

"""Header row detection.

Sheets exported from field systems often carry title banners, merged captions
or blank lines above the real column labels, so the header row is located by
keyword scoring instead of being assumed to be the first row.
"""

__all__ = [
    "DEFAULT_SCAN_LIMIT",
    "HEADER_KEYWORDS",
    "score_row",
    "locate_header_row",
]

logger = logging.getLogger(__name__)

DEFAULT_SCAN_LIMIT = 500

# Additive: a row mentioning several keywords accumulates all of them
HEADER_KEYWORDS: tuple[tuple[str, int], ...] = (
    ("substation", 30),
    ("area", 30),
    ("location", 20),
    ("division", 20),
)


def _row_text(row: Sequence[Any]) -> str:
    return json.dumps([cell_text(c) for c in row], ensure_ascii=False).lower()


def score_row(row: Sequence[Any], index: int = 0) -> HeaderCandidate:
    """Score one row as a header candidate."""
    text = _row_text(row)
    score = sum(weight for keyword, weight in HEADER_KEYWORDS if keyword in text)
    filled = sum(1 for c in row if not is_blank(c))
    return HeaderCandidate(row_index=index, score=score, filled_cells=filled)


def locate_header_row(rows: Sequence[Sequence[Any]], scan_limit: int = DEFAULT_SCAN_LIMIT) -> int:
    """Return the index of the most likely header row.

    Only the first ``scan_limit`` rows are inspected. The highest keyword score
    wins, earliest row on ties. While no row has scored above zero, the row
    with the most non-empty cells is tracked instead. Empty sheets return 0.
    """
    best_index = 0
    max_score = 0
    max_filled = 0
    for i, row in enumerate(rows[:scan_limit]):
        if not row:
            continue
        candidate = score_row(row, i)
        if candidate.score > max_score:
            max_score = candidate.score
            best_index = i
        elif max_score == 0 and candidate.filled_cells > max_filled:
            max_filled = candidate.filled_cells
            best_index = i
    logger.debug(f"header row={best_index} score={max_score} scanned={min(len(rows), scan_limit)}")
    return best_index
