from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

"""SelectionConfig value object and the fixed option catalogues of the oil sample form.

The multi-select state of the report dialog is frozen into a SelectionConfig
once, at submission time, and handed by value to the expansion engine.
Each option group keeps first-selection order with duplicates removed.
"""

__all__ = [
    "MAIN_TANK_BOTTOM",
    "MAIN_TANK_TOP",
    "OTHER_SOURCE",
    "SAMPLE_SOURCES",
    "OTHER_DETAILS",
    "OIL_QUALITY_TEST",
    "DGA_TEST",
    "REQUIRED_TESTS",
    "REASONS",
    "EQUIPMENT_TYPES",
    "SelectionError",
    "SelectionConfig",
]

MAIN_TANK_BOTTOM = "Main Tank Bottom"
MAIN_TANK_TOP = "Main Tank Top"
OTHER_SOURCE = "Other"
SAMPLE_SOURCES: tuple[str, ...] = (MAIN_TANK_BOTTOM, MAIN_TANK_TOP, OTHER_SOURCE)

OTHER_DETAILS: tuple[str, ...] = (
    "CBL R",
    "CBL Y",
    "CBL B",
    "CBL N",
    "ONE CBL (R-Y-B)",
    "OLTC 1",
    "OLTC 2",
    "OLTC 3",
)

OIL_QUALITY_TEST = "Oil Quality Test"
DGA_TEST = "Dissolved Gas-in-Oil Analysis"
REQUIRED_TESTS: tuple[str, ...] = (
    OIL_QUALITY_TEST,
    DGA_TEST,
    "Furanic Compounds",
    "Corrosive Sulfur",
    "Passivators",
)

REASONS: tuple[str, ...] = (
    "Commissioning",
    "Investigate",
    "Warranty",
    "Failure",
    "Annual",
    "Processing Sample #",
)

EQUIPMENT_TYPES: tuple[str, ...] = (
    "Transformer",
    "Shunt Reactor",
    "New Oil",
    "Load Tapchanger",
    "Circuit Breaker",
    "Others",
)


class SelectionError(ValueError):
    """Raised when a selection contains a value outside its option catalogue."""


def _ordered_unique(values: Iterable[str] | None, allowed: tuple[str, ...], group: str) -> tuple[str, ...]:
    seen: list[str] = []
    for v in values or ():
        v = str(v).strip()
        if v not in allowed:
            raise SelectionError(f"unknown {group}: {v!r} (allowed: {', '.join(allowed)})")
        if v not in seen:
            seen.append(v)
    return tuple(seen)


@dataclass(frozen=True)
class SelectionConfig:
    """User choices for one report generation request."""
    sources: tuple[str, ...] = ()
    other_details: tuple[str, ...] = ()
    tests: tuple[str, ...] = ()
    reasons: tuple[str, ...] = ()
    equipment_types: tuple[str, ...] = ()

    @classmethod
    def create(
        cls,
        *,
        sources: Iterable[str] | None = None,
        other_details: Iterable[str] | None = None,
        tests: Iterable[str] | None = None,
        reasons: Iterable[str] | None = None,
        equipment_types: Iterable[str] | None = None,
    ) -> SelectionConfig:
        """Build a validated selection.

        Raises:
            SelectionError: a value is not part of its option catalogue
        """
        src = _ordered_unique(sources, SAMPLE_SOURCES, "sample source")
        details = _ordered_unique(other_details, OTHER_DETAILS, "other detail")
        if OTHER_SOURCE not in src:
            # details only exist under "Other"
            details = ()
        return cls(
            sources=src,
            other_details=details,
            tests=_ordered_unique(tests, REQUIRED_TESTS, "test"),
            reasons=_ordered_unique(reasons, REASONS, "reason"),
            equipment_types=_ordered_unique(equipment_types, EQUIPMENT_TYPES, "equipment type"),
        )

    def missing_requirements(self) -> list[str]:
        """Reasons the form cannot be submitted yet (empty list -> ready)."""
        problems: list[str] = []
        if not self.sources:
            problems.append("select at least one sample source")
        if OTHER_SOURCE in self.sources and not self.other_details:
            problems.append("select at least one detail for the 'Other' sample source")
        if not self.tests:
            problems.append("select at least one required test")
        return problems

    @property
    def is_complete(self) -> bool:
        return not self.missing_requirements()
