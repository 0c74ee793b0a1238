"""Tests for the pydantic enumeration reports."""

from extensible_enums import describe
from sample_enums import Colors, Shapes, Swatches


def test_describe_colors():
    info = describe(Colors)
    assert info.name == "Colors"
    assert info.module == "sample_enums.colors"
    assert info.payload_type == "Color"
    assert info.count == 4
    assert [case.name for case in info.cases] == ["blue", "green", "red", "yellow"]
    yellow = info.cases[-1]
    assert yellow.declared_in == "sample_enums.colors_extension"
    assert yellow.value == "Color(r=255, g=255, b=0)"
    assert all(case.matches_payload for case in info.cases)


def test_describe_flags_hidden_entries():
    info = describe(Swatches)
    assert info.count == 2
    flags = {case.name: case.matches_payload for case in info.cases}
    assert flags == {"black": True, "legacy": False, "white": True}


def test_describe_forward_reference_payload():
    info = describe(Shapes)
    assert info.payload_type == "Shape"
    assert [case.value for case in info.cases] == ["Shape(4)", "Shape(3)"]


def test_report_dumps_to_plain_data():
    data = describe(Colors).model_dump()
    assert data["count"] == 4
    assert data["cases"][0] == {
        "name": "blue",
        "value": "Color(r=0, g=0, b=255)",
        "declared_in": "sample_enums.colors",
        "matches_payload": True,
    }
