"""Name-ordered, immutable snapshot of an enumeration's cases."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from typing import Any, overload


class CaseSequence[P]:
    """Finite, restartable, read-only view of ``(name, value)`` pairs.

    The snapshot is taken at construction; cases declared afterwards are not
    seen. Iteration always runs in ascending name order and can be repeated.

    Example:
        >>> seq = Colors.sequence()
        >>> seq.keys
        ['blue', 'green', 'red', 'yellow']
        >>> pure = seq.filter(lambda name, color: color.channels.count(255) == 1)
        >>> len(pure)
        3
    """

    __slots__ = ("_items",)

    def __init__(self, mapping: Mapping[str, P]):
        self._items: tuple[tuple[str, P], ...] = tuple(
            sorted(mapping.items(), key=lambda item: item[0])
        )

    @classmethod
    def _from_items(cls, items: tuple[tuple[str, P], ...]) -> CaseSequence[P]:
        seq = cls.__new__(cls)
        seq._items = items
        return seq

    # Sizes and projections ---------------------------------------------------
    @property
    def count(self) -> int:
        return len(self._items)

    @property
    def keys(self) -> list[str]:
        """Case names, ascending."""
        return [name for name, _ in self._items]

    @property
    def values(self) -> list[P]:
        """Values, ordered to match :attr:`keys`."""
        return [value for _, value in self._items]

    def items(self) -> list[tuple[str, P]]:
        return list(self._items)

    def as_dict(self) -> dict[str, P]:
        return dict(self._items)

    def get(self, name: str, default: Any = None) -> P | Any:
        for key, value in self._items:
            if key == name:
                return value
        return default

    # Transformations ---------------------------------------------------------
    def filter(self, predicate: Callable[[str, P], bool]) -> CaseSequence[P]:
        """Return a new sequence holding the pairs for which ``predicate`` is true."""
        return self._from_items(
            tuple(item for item in self._items if predicate(item[0], item[1]))
        )

    def map[R](self, transform: Callable[[str, P], R]) -> Iterator[R]:
        """Lazily apply ``transform(name, value)`` to every pair."""
        return (transform(name, value) for name, value in self._items)

    # Container protocol ------------------------------------------------------
    def __iter__(self) -> Iterator[tuple[str, P]]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, name: object) -> bool:
        return any(key == name for key, _ in self._items)

    @overload
    def __getitem__(self, index: int) -> tuple[str, P]: ...

    @overload
    def __getitem__(self, index: slice) -> CaseSequence[P]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._from_items(self._items[index])
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CaseSequence):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"CaseSequence({', '.join(self.keys)})"


__all__ = ["CaseSequence"]
