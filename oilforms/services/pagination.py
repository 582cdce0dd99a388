from __future__ import annotations

import math
from collections.abc import Sequence

from ..models.report import Page, ReportItem

"""Print pagination: fixed-capacity pages of report items (two A4 forms per sheet)."""

__all__ = [
    "FORMS_PER_PAGE",
    "page_count",
    "paginate",
]

FORMS_PER_PAGE = 2


def page_count(item_count: int, per_page: int = FORMS_PER_PAGE) -> int:
    if not 1 <= per_page <= FORMS_PER_PAGE:
        raise ValueError(f"per_page must be between 1 and {FORMS_PER_PAGE}, got {per_page}")
    return math.ceil(item_count / per_page)


def paginate(items: Sequence[ReportItem], per_page: int = FORMS_PER_PAGE) -> list[Page]:
    """Split items into consecutive pages, preserving generation order."""
    total = page_count(len(items), per_page)
    return [
        Page(number=n + 1, items=tuple(items[n * per_page:(n + 1) * per_page]))
        for n in range(total)
    ]
