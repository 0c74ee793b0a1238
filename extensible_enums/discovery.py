"""Case Store discovery.

Two halves live here:

* the **namespace filter** that decides which attributes of an enumeration
  class are user-declared cases, and
* :func:`discover_cases`, which assembles the name -> value mapping for an
  enumeration from the registry tables of every enumeration class in its MRO.

Filter rules (stable; anything a class body or extension declares that passes
them becomes a case):

1. the name must be a Python identifier and not a keyword;
2. names starting with ``_`` are reserved (dunders, private helpers);
3. names in :data:`RESERVED_NAMES` are reserved (identity, equality,
   description and every accessor an enumeration exposes);
4. routines and descriptors (functions, ``classmethod``, ``staticmethod``,
   ``property``, ``cached_property``) are never cases.
"""

from __future__ import annotations

import inspect
import keyword
import logging
from collections.abc import Callable, Mapping
from functools import cached_property
from types import MappingProxyType
from typing import Any
from weakref import WeakKeyDictionary

from .exceptions import InvalidCaseNameError
from .narrowing import MISSING
from .registry import REGISTRY, CaseEntry

logger = logging.getLogger(__name__)

RESERVED_PREFIX = "_"

RESERVED_NAMES: frozenset[str] = frozenset(
    {
        # identity / equality / description
        "value",
        "typed_value",
        "case_name",
        "description",
        "mro",
        # type-scoped accessors
        "count",
        "all",
        "all_keys",
        "all_values",
        "all_keys_and_values",
        "all_cases",
        "value_for_name",
        "by_name",
        "from_value",
        "sequence",
        "enumerate_keys_and_values",
        "enumerate_values",
    }
)

_DESCRIPTOR_TYPES = (classmethod, staticmethod, property, cached_property)


def check_case_name(name: Any) -> str:
    """Return ``name`` if it may name a case, else raise InvalidCaseNameError."""
    if not isinstance(name, str) or not name.isidentifier() or keyword.iskeyword(name):
        raise InvalidCaseNameError(f"Case name must be an identifier, got {name!r}")
    if name.startswith(RESERVED_PREFIX):
        raise InvalidCaseNameError(
            f"Case name '{name}' uses the reserved prefix '{RESERVED_PREFIX}'"
        )
    if name in RESERVED_NAMES:
        raise InvalidCaseNameError(f"Case name '{name}' is reserved")
    return name


def is_case_attribute(name: Any, value: Any) -> bool:
    """Return True when a class attribute ``name = value`` declares a case."""
    try:
        check_case_name(name)
    except InvalidCaseNameError:
        return False
    if inspect.isroutine(value) or isinstance(value, _DESCRIPTOR_TYPES):
        return False
    return True


def scan_namespace(namespace: Mapping[str, Any]) -> dict[str, Any]:
    """Return the case declarations found in a class namespace."""
    return {
        name: value
        for name, value in namespace.items()
        if is_case_attribute(name, value)
    }


# Merged snapshots per enumeration, keyed on the versions of the tables used.
_MERGED: WeakKeyDictionary[type, tuple[tuple[tuple[int, int], ...], Mapping]] = (
    WeakKeyDictionary()
)


def _case_classes(enum_cls: type) -> list[type]:
    return [
        klass
        for klass in reversed(enum_cls.__mro__)
        if REGISTRY.get_table(klass) is not None
    ]


def case_entries(enum_cls: type) -> Mapping[str, CaseEntry]:
    """Return every registry entry visible from ``enum_cls``.

    Tables are merged base-first so a subclass redeclaring a name wins. The
    result is an immutable snapshot, rebuilt only when one of the underlying
    tables has grown since the previous call.
    """
    published = [
        (klass, REGISTRY.table(klass).published()) for klass in _case_classes(enum_cls)
    ]
    key = tuple((id(klass), version) for klass, (version, _) in published)
    cached = _MERGED.get(enum_cls)
    if cached is not None and cached[0] == key:
        return cached[1]
    merged: dict[str, CaseEntry] = {}
    for _, (_, entries) in published:
        merged.update(entries)
    snapshot = MappingProxyType(merged)
    _MERGED[enum_cls] = (key, snapshot)
    return snapshot


def discover_cases(
    enum_cls: type, narrow: Callable[[Any], Any] | None = None
) -> dict[str, Any]:
    """Return a fresh name -> value mapping of every case linked for ``enum_cls``.

    Args:
        enum_cls: The enumeration class.
        narrow: Optional checked downcast; it returns the value or ``MISSING``.
            Entries it rejects are dropped.

    Returns:
        Mapping in no particular order; callers sort by name.
    """
    result: dict[str, Any] = {}
    for name, entry in case_entries(enum_cls).items():
        value = entry.value
        if narrow is not None:
            value = narrow(value)
            if value is MISSING:
                logger.debug(
                    "Dropping case '%s' of %s: %r does not match the payload type",
                    name,
                    enum_cls.__qualname__,
                    entry.value,
                )
                continue
        result[name] = value
    return result


__all__ = [
    "RESERVED_PREFIX",
    "RESERVED_NAMES",
    "check_case_name",
    "is_case_attribute",
    "scan_namespace",
    "case_entries",
    "discover_cases",
]
