from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Literal

"""Column resolution for the station and area fields.

Each target field has an ordered rule list; rules are evaluated strictly in
priority order against all header keys and the first rule that matches any
key wins. Within one rule the first matching key (column order) is taken.
"""

__all__ = [
    "ColumnRule",
    "ColumnMapping",
    "STATION_RULES",
    "AREA_RULES",
    "resolve_column",
    "map_columns",
]

MatchKind = Literal["exact", "contains", "contains_raw"]


@dataclass(frozen=True)
class ColumnRule:
    """Single fuzzy-match rule.

    - ``exact``: trimmed, case-insensitive equality
    - ``contains``: case-insensitive substring
    - ``contains_raw``: substring without case folding (non-Latin tokens)
    """
    kind: MatchKind
    token: str

    def matches(self, key: str) -> bool:
        if self.kind == "exact":
            return key.strip().lower() == self.token.lower()
        if self.kind == "contains":
            return self.token.lower() in key.lower()
        return self.token in key


STATION_RULES: tuple[ColumnRule, ...] = (
    ColumnRule("exact", "substation"),
    ColumnRule("contains", "substation"),
    ColumnRule("exact", "location"),
    ColumnRule("contains", "location"),
    ColumnRule("contains", "station"),
    ColumnRule("contains", "site"),
    ColumnRule("contains", "ss name"),
    ColumnRule("contains_raw", "المحطة"),  # "the station"
)

AREA_RULES: tuple[ColumnRule, ...] = (
    ColumnRule("exact", "area"),
    ColumnRule("contains", "area"),
    ColumnRule("exact", "division"),
    ColumnRule("contains", "division"),
    ColumnRule("contains_raw", "المنطقة"),  # "the area"
)


@dataclass(frozen=True)
class ColumnMapping:
    """Header keys holding station / area data (None when unresolved)."""
    station: str | None
    area: str | None


def resolve_column(keys: Iterable[str], rules: Sequence[ColumnRule]) -> str | None:
    key_list = [str(k) for k in keys]
    for rule in rules:
        for key in key_list:
            if rule.matches(key):
                return key
    return None


def map_columns(keys: Iterable[str]) -> ColumnMapping:
    key_list = list(keys)
    return ColumnMapping(
        station=resolve_column(key_list, STATION_RULES),
        area=resolve_column(key_list, AREA_RULES),
    )
