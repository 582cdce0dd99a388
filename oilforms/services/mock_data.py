from __future__ import annotations

from typing import Any

from ..excel.reader import RawWorkbook

"""Synthetic seed workbook used when no file is supplied.

Rows are written as header-keyed dicts for readability and converted into raw
row matrices so they go through the same ingestion pipeline as an uploaded
file. This is seed data, not a format contract.
"""

__all__ = [
    "SEED_SOURCE",
    "SEED_SHEETS",
    "rows_to_matrix",
    "build_mock_workbook",
]

SEED_SOURCE = "<seed>"

SEED_SHEETS: dict[str, list[dict[str, Any]]] = {
    "Substations Name": [
        {"SS NAME": "JCPS-1", "SS ID": "JZ-640A", "Energised date ": 1986},
        {"SS NAME": "Darb", "SS ID": "SQ-6408", "Energised date ": 1996},
        {"SS NAME": "JCPS-2", "SS ID": "JZ-640B", "Energised date ": 2007},
        {"SS NAME": "Shuqaiq1", "SS ID": "SQ-8425", "Energised date ": 2010},
        {"SS NAME": "J.South", "SS ID": "JZ-6402", "Energised date ": 1991},
        {"SS NAME": "Sabya", "SS ID": "JZ-6403", "Energised date ": 1991},
        {"SS NAME": "KUDMI", "SS ID": "JZ-8426", "Energised date ": 2010},
        {"SS NAME": "Madhaya BESS", "SS ID": "JZ-8454", "Energised date ": 2025},
    ],
    "Assets Data": [
        {"Substation": "Jizan South", "Location": "JZ-6402-TR3-AUXTR_T301", "Description": "Auxiliary Transformer 013.8 kV_T301", "Asset": "NG3000065746", "Equipment Number": "3000829004", "Asset Type (Object Type)": "AUXILIARY_TRAFO", "Status": "ACTIVE"},
        {"Location": "JZ-6402-TR6-POWERTR_T601", "Description": "Power Transformer 132 kV_T601", "Asset": "NG3000065750", "Equipment Number": "3000829012", "Asset Type (Object Type)": "POWER_TRAFO_6", "Status": "ACTIVE"},
        {"Substation": "KUDMI", "Location": "JZ-8426-SR8-RCT_Z801", "Description": "Shunt Reactor 380 kV_Z801", "Asset": "NG3000069651", "Equipment Number": "3000846850", "Asset Type (Object Type)": "SHUNT_REACTOR", "Status": "ACTIVE"},
    ],
    "Power Transformer": [
        {"#": 1, "Region": "SOA", "Area": "Jizan", "Substation": "Abu Alqaeed", "Code": "6431_SOA", "Transformer number": "T601", "Serial Number": 318042, "Manufacturer": "Alstom-TURKEY", "Vector Group": "YNyn0d1", "Manufacture Year": 2013, "System Voltage": 132, "KV Levels": "132/33", "MVA": 133},
        {"#": 2, "Region": "SOA", "Area": "Jizan", "Substation": "Abu Alqaeed", "Code": "6431_SOA", "Transformer number": "T602", "Serial Number": 318043, "Manufacturer": "Alstom-TURKEY", "Vector Group": "YNyn0d1", "Manufacture Year": 2013, "System Voltage": 132, "KV Levels": "132/33", "MVA": 133},
        {"#": 3, "Region": "SOA", "Area": "JIZAN", "Substation": "Abu Arish 2", "Code": "6453_SOA", "Transformer number": "T601", "Serial Number": "1ZTR160901", "Manufacturer": "ABB", "Vector Group": "Dyn1", "Manufacture Year": "2021", "System Voltage": 132, "KV Levels": "132/13.8", "MVA": "67"},
        {"#": 8, "Region": "SOA", "Area": "JIZAN", "Substation": "Abu Sadad", "Code": "6435_SOA", "Transformer number": "T601", "Serial Number": 64003, "Manufacturer": "BEST", "Vector Group": "Dyn1", "Manufacture Year": "2013", "System Voltage": "132", "KV Levels": "132/13.8", "MVA": 67},
        {"#": 14, "Region": "SOA", "Area": "Jizan", "Substation": "Addayir", "Code": "6407_SOA", "Transformer number": "T601", "Serial Number": 317377, "Manufacturer": "Areva-TURKEY", "Vector Group": "YNyn0d1", "Manufacture Year": 2009, "System Voltage": 132, "KV Levels": "132/33/13.8", "MVA": 133},
    ],
    "OLTC Data": [
        {"Area": "Jizan", "Substation Name": "Abu Alqaeed", "Transformer ": "ABU ALQAEED T601", "Voltage Ratio": "132/33", "MVA": 133, "OLTC Make": "MR", "OLTC Type": "OIL ", "Number of Steps": 25},
        {"Area": "Jizan", "Substation Name": "Abu Arish 2", "Transformer ": "T601", "Voltage Ratio": "132/13.8", "MVA": "67", "OLTC Make": "ABB", "OLTC Type": "VACCUM", "Number of Steps": 27},
    ],
    "Shunt Reactor": [
        {" No. ": 1, "assetnum(Maximo coad)": "NG3000069651", "Substation": "Kudmi", "Transformer number": "Shunt Reactor 380 kV_Z801", "AREA": "Jazan", "MAINTENANCE DIVISION": "Jazan division", "KV": 380, "MVAR RATING": 60, "MANUFACTURER": "HYUNDAI", "MANUFACTURING YEAR": 2012, "ENERGIZATION DATE": 2013},
    ],
    "Outage plan 2025-2026": [
        {"PM Transformers 2025/2026": "Jazan", "Column2": "Maintenance ", "Column3": "Ad-Dayar", "Column4": "Power Transformer 132 kV_T601", "Column5": "Preventive Maintenance", "Column6": 132, "Column7": "05 October 2025"},
    ],
}


def rows_to_matrix(rows: list[dict[str, Any]]) -> list[list[Any]]:
    """Header row (union of keys, first-seen order) followed by one row per dict."""
    header: list[str] = []
    for row in rows:
        for key in row:
            if key not in header:
                header.append(key)
    return [list(header)] + [[row.get(k) for k in header] for row in rows]


def build_mock_workbook() -> RawWorkbook:
    return {name: rows_to_matrix(rows) for name, rows in SEED_SHEETS.items()}
