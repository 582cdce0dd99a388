from __future__ import annotations

import pytest

from oilforms.models.selection import (
    EQUIPMENT_TYPES,
    OTHER_DETAILS,
    REASONS,
    REQUIRED_TESTS,
    SAMPLE_SOURCES,
    SelectionConfig,
    SelectionError,
)


def test_catalogue_sizes():
    assert len(SAMPLE_SOURCES) == 3
    assert len(OTHER_DETAILS) == 8
    assert len(REQUIRED_TESTS) == 5
    assert len(REASONS) == 6
    assert len(EQUIPMENT_TYPES) == 6


def test_create_dedupes_in_selection_order():
    sel = SelectionConfig.create(
        sources=["Main Tank Top", "Main Tank Bottom", "Main Tank Top"],
        tests=["Passivators", "Furanic Compounds", "Passivators"],
    )
    assert sel.sources == ("Main Tank Top", "Main Tank Bottom")
    assert sel.tests == ("Passivators", "Furanic Compounds")


def test_create_rejects_unknown_values():
    with pytest.raises(SelectionError):
        SelectionConfig.create(sources=["Conservator"])
    with pytest.raises(SelectionError):
        SelectionConfig.create(tests=["Moisture"])


def test_other_details_dropped_without_other_source():
    sel = SelectionConfig.create(sources=["Main Tank Top"], other_details=["CBL R"])
    assert sel.other_details == ()


def test_missing_requirements():
    assert SelectionConfig().missing_requirements() == [
        "select at least one sample source",
        "select at least one required test",
    ]
    sel = SelectionConfig.create(sources=["Other"], tests=["Passivators"])
    assert sel.missing_requirements() == ["select at least one detail for the 'Other' sample source"]
    assert not sel.is_complete
    ok = SelectionConfig.create(sources=["Other"], other_details=["OLTC 3"], tests=["Passivators"])
    assert ok.missing_requirements() == []
    assert ok.is_complete


def test_selection_is_immutable():
    sel = SelectionConfig.create(sources=["Main Tank Top"])
    with pytest.raises(AttributeError):
        sel.sources = ()  # type: ignore[misc]
