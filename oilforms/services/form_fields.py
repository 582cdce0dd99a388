from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import asdict, dataclass
from typing import Any

from ..excel.scalars import cell_text
from ..models.record import NormalizedRecord

"""Equipment fields printed on the oil sample form.

Sheets name the same thing many ways ("Serial Number", "S/N", "Serial No"), so
each printed field has a keyword list. Exact (trimmed, case-insensitive)
header matches are tried for all keywords first, then substring matches.
Empty cells never count as a match.
"""

__all__ = [
    "FIELD_KEYWORDS",
    "FormFields",
    "find_field",
    "resolve_form_fields",
]

FIELD_KEYWORDS: dict[str, tuple[str, ...]] = {
    "substation": ("Substation", "Station Name", "Station", "Location", "Site"),
    "area": ("Area", "Division", "Zone", "Region"),
    "dispatch": ("Dispatch No", "Dispatch", "Transformer number", "Equipment Ref", "SAP No", "SAP"),
    "serial": ("Serial Number", "Serial No", "S.N", "Serial", "S/N"),
    "manufacturer": ("Manufacturer", "Make", "Brand"),
    "year": ("Year of Manufacture", "Year", "YOM", "Mnf Year", "Date of Manufacture"),
    "mva": ("Rating (MVA)", "MVA", "Rating", "Power", "Capacity"),
    "kv": ("Voltage level", "KV", "Voltage", "Volts"),
}


@dataclass(frozen=True)
class FormFields:
    substation: str
    area: str
    dispatch: str
    serial: str
    manufacturer: str
    year: str
    mva: str
    kv: str

    def as_dict(self) -> dict[str, str]:
        return asdict(self)


def _filled(value: Any) -> bool:
    return value is not None and value != ""


def find_field(values: Mapping[str, Any], keywords: Sequence[str]) -> Any:
    """First non-empty value whose header matches one of ``keywords``; ``""`` if none."""
    for kw in keywords:
        key = next((k for k in values if k.strip().lower() == kw.lower()), None)
        if key is not None and _filled(values[key]):
            return values[key]
    for kw in keywords:
        key = next((k for k in values if kw.lower() in k.lower()), None)
        if key is not None and _filled(values[key]):
            return values[key]
    return ""


def resolve_form_fields(record: NormalizedRecord) -> FormFields:
    found = {name: cell_text(find_field(record.values, kws)) for name, kws in FIELD_KEYWORDS.items()}
    # normalized values back up missing station/area columns
    found["substation"] = found["substation"] or record.station_name
    found["area"] = found["area"] or record.area_name
    return FormFields(**found)
