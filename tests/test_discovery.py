"""Tests for the namespace filter and Case Store discovery."""

from functools import cached_property

import pytest

from extensible_enums import ExtensibleEnum, discover_cases
from extensible_enums.discovery import (
    RESERVED_NAMES,
    case_entries,
    check_case_name,
    is_case_attribute,
    scan_namespace,
)
from extensible_enums.exceptions import InvalidCaseNameError
from extensible_enums.narrowing import MISSING
from sample_enums import Colors

# ============================================================================
# Namespace filter
# ============================================================================


@pytest.mark.parametrize("name", ["red", "HTTP_OK", "x1", "mixedCase"])
def test_plain_identifiers_are_case_names(name):
    assert check_case_name(name) == name


@pytest.mark.parametrize("name", ["", "1st", "with space", "class", "_hidden", "__doc__"])
def test_invalid_or_prefixed_names_rejected(name):
    with pytest.raises(InvalidCaseNameError):
        check_case_name(name)


@pytest.mark.parametrize("name", sorted(RESERVED_NAMES))
def test_reserved_names_rejected(name):
    with pytest.raises(InvalidCaseNameError, match="reserved"):
        check_case_name(name)


def test_routines_and_descriptors_are_not_cases():
    def helper():
        return 1

    assert not is_case_attribute("helper", helper)
    assert not is_case_attribute("cm", classmethod(helper))
    assert not is_case_attribute("sm", staticmethod(helper))
    assert not is_case_attribute("prop", property(helper))
    assert not is_case_attribute("cached", cached_property(helper))
    assert not is_case_attribute("builtin", len)
    assert is_case_attribute("plain", 3)
    assert is_case_attribute("nested", type("Nested", (), {}))


def test_scan_namespace_keeps_only_cases():
    namespace = {
        "__module__": "demo",
        "__qualname__": "Demo",
        "_private": 1,
        "value": 2,
        "method": lambda self: None,
        "alpha": 10,
        "beta": 20,
    }
    assert scan_namespace(namespace) == {"alpha": 10, "beta": 20}


def test_class_helpers_are_not_registered():
    class Levels(ExtensibleEnum[int]):
        low = 1
        high = 9
        _cache = {}

        @classmethod
        def loudest(cls):
            return max(cls.all_values())

    assert Levels.all_keys() == ["high", "low"]
    assert Levels.loudest() == 9


# ============================================================================
# Discovery
# ============================================================================


def test_discovery_of_sample_colors():
    cases = discover_cases(Colors)
    assert set(cases) == {"red", "green", "blue", "yellow"}


def test_merged_snapshot_cached_until_table_grows():
    class Steps(ExtensibleEnum[int]):
        one = 1

    first = case_entries(Steps)
    assert case_entries(Steps) is first
    Steps.two = 2
    second = case_entries(Steps)
    assert second is not first
    assert set(second) == {"one", "two"}
    assert set(first) == {"one"}


def test_narrow_drops_rejected_entries():
    class Mixed(ExtensibleEnum):
        number = 1
        text = "one"

    def only_ints(value):
        return value if isinstance(value, int) else MISSING

    assert discover_cases(Mixed) == {"number": 1, "text": "one"}
    assert discover_cases(Mixed, only_ints) == {"number": 1}


def test_subclass_sees_base_cases_and_overrides_win():
    class Base(ExtensibleEnum[int]):
        one = 1
        two = 2

    class Child(Base):
        two = 22
        three = 3

    assert Base.all_keys_and_values() == {"one": 1, "two": 2}
    assert Child.all_keys_and_values() == {"one": 1, "two": 22, "three": 3}


def test_enumeration_without_cases_is_empty():
    class Empty(ExtensibleEnum[str]):
        pass

    assert Empty.all_keys() == []
    assert Empty.count == 0
    assert bool(Empty)
    assert discover_cases(ExtensibleEnum) == {}
