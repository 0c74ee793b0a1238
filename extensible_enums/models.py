"""Pydantic models documenting an enumeration and its cases.

These are read-only reports for tooling (the CLI ``describe`` command, docs
generators). Values are rendered with ``repr``; the models are not a
serialization format for payloads.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .base import ExtensibleEnumMeta
from .discovery import case_entries
from .narrowing import describe_type


class CaseInfo(BaseModel):
    """One declared case."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str = Field(description="repr() of the declared value")
    declared_in: str | None = Field(
        default=None, description="Module that declared the case, when known"
    )
    matches_payload: bool = Field(
        default=True,
        description="False when the value fails the payload type check and is "
        "hidden from the typed accessors",
    )


class EnumerationInfo(BaseModel):
    """Summary of an enumeration at the moment it was described."""

    model_config = ConfigDict(frozen=True)

    name: str
    module: str
    payload_type: str | None = None
    count: int
    cases: list[CaseInfo]


def describe(enum_cls: ExtensibleEnumMeta) -> EnumerationInfo:
    """Return an :class:`EnumerationInfo` for ``enum_cls``.

    ``count`` matches ``enum_cls.count``; ``cases`` additionally lists entries
    the typed façade hides, flagged with ``matches_payload=False``.
    """
    checker = enum_cls.__payload_checker__
    entries = case_entries(enum_cls)
    cases = [
        CaseInfo(
            name=name,
            value=repr(entries[name].value),
            declared_in=entries[name].declared_in,
            matches_payload=checker is None or checker.accepts(entries[name].value),
        )
        for name in sorted(entries)
    ]
    payload = enum_cls.__payload_type__
    return EnumerationInfo(
        name=enum_cls.__qualname__,
        module=enum_cls.__module__,
        payload_type=describe_type(payload) if payload is not None else None,
        count=enum_cls.count,
        cases=cases,
    )


__all__ = ["CaseInfo", "EnumerationInfo", "describe"]
