"""Shared pytest fixtures for extensible enumeration tests."""

import pytest

from extensible_enums import ExtensibleEnum
from sample_enums import Color, Colors


@pytest.fixture
def colors():
    """The sample Colors enumeration with its extension linked."""
    return Colors


@pytest.fixture
def make_color():
    return Color


@pytest.fixture
def sizes():
    """A fresh int enumeration, private to the requesting test."""

    class Sizes(ExtensibleEnum[int]):
        small = 1
        medium = 2
        large = 3

    return Sizes
