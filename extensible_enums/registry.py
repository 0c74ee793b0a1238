"""Process-wide, append-only registry of enumeration cases.

Every enumeration class owns one :class:`CaseTable`. Tables only ever grow:
a case, once registered, keeps its value for the lifetime of the process.
Readers never lock; they receive an immutable snapshot that is replaced
atomically whenever a new case is appended.

The registry is keyed weakly on the enumeration class so enumerations created
at runtime (for example inside a test) disappear together with their class.
"""

from __future__ import annotations

import logging
import threading
import weakref
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict

from .exceptions import DuplicateCaseError

logger = logging.getLogger(__name__)


class CaseEntry(BaseModel):
    """Type-erased holder for one declared case."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    value: Any
    declared_in: str | None = None


def same_value(existing: Any, proposed: Any) -> bool:
    """Return True when two payloads are the same object or compare equal."""
    if existing is proposed:
        return True
    try:
        return bool(existing == proposed)
    except (TypeError, ValueError):  # ambiguous truth value (array-like payloads)
        return False


class CaseTable:
    """Append-only name -> :class:`CaseEntry` table for one enumeration class."""

    def __init__(self, owner: str):
        self.owner = owner
        self._entries: dict[str, CaseEntry] = {}
        self._lock = threading.Lock()
        # (version, entries) published together so readers never pair a new
        # version with an old mapping.
        self._published: tuple[int, Mapping[str, CaseEntry]] = (
            0,
            MappingProxyType({}),
        )

    @property
    def version(self) -> int:
        """Number of successful appends; bumps on every new case."""
        return self._published[0]

    def add(self, entry: CaseEntry) -> bool:
        """Append ``entry``; return False if an equal case was already present.

        Raises:
            DuplicateCaseError: If the name is taken by a different value.
        """
        with self._lock:
            existing = self._entries.get(entry.name)
            if existing is not None:
                if same_value(existing.value, entry.value):
                    return False
                raise DuplicateCaseError(
                    self.owner, entry.name, existing.value, entry.value
                )
            self._entries[entry.name] = entry
            self._published = (
                self._published[0] + 1,
                MappingProxyType(dict(self._entries)),
            )
        logger.debug(
            "Registered case '%s' on %s (declared in %s)",
            entry.name,
            self.owner,
            entry.declared_in,
        )
        return True

    def published(self) -> tuple[int, Mapping[str, CaseEntry]]:
        """Return ``(version, entries)`` as one consistent pair."""
        return self._published

    def snapshot(self) -> Mapping[str, CaseEntry]:
        """Return an immutable view of the entries at this moment."""
        return self._published[1]

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"CaseTable(owner={self.owner!r}, cases={len(self)}, version={self.version})"


class CaseRegistry:
    """Map enumeration classes to their case tables."""

    def __init__(self):
        self._tables: weakref.WeakKeyDictionary[type, CaseTable] = (
            weakref.WeakKeyDictionary()
        )
        self._lock = threading.Lock()

    def table(self, enum_cls: type) -> CaseTable:
        """Return the table for ``enum_cls``, creating it on first use."""
        table = self._tables.get(enum_cls)
        if table is None:
            with self._lock:
                table = self._tables.get(enum_cls)
                if table is None:
                    table = CaseTable(enum_cls.__qualname__)
                    self._tables[enum_cls] = table
        return table

    def get_table(self, enum_cls: type) -> CaseTable | None:
        return self._tables.get(enum_cls)

    def register(
        self,
        enum_cls: type,
        name: str,
        value: Any,
        declared_in: str | None = None,
    ) -> bool:
        """Append one case to the table of ``enum_cls``.

        Name validation is the caller's concern; the registry only enforces
        the append-only contract.
        """
        entry = CaseEntry(name=name, value=value, declared_in=declared_in)
        return self.table(enum_cls).add(entry)

    def entries(self, enum_cls: type) -> Mapping[str, CaseEntry]:
        """Return the snapshot of cases declared directly on ``enum_cls``."""
        table = self._tables.get(enum_cls)
        return table.snapshot() if table is not None else MappingProxyType({})

    def __iter__(self) -> Iterator[type]:
        return iter(list(self._tables.keys()))

    def __len__(self) -> int:
        return len(self._tables)


REGISTRY = CaseRegistry()

__all__ = ["CaseEntry", "CaseTable", "CaseRegistry", "REGISTRY", "same_value"]
