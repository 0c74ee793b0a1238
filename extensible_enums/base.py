"""Enumeration base: the type-erased capability every enumeration inherits.

An enumeration is a class deriving from :class:`ExtensibleEnum`. Its cases are
ordinary class attributes; they are registered with the process-wide registry
when the class body runs, when later code assigns a new attribute
(``Colors.yellow = Color(255, 255, 0)``), or through
:func:`extensible_enums.extend`:

    from dataclasses import dataclass

    @dataclass(frozen=True)
    class Color:
        r: int
        g: int
        b: int

    class Colors(ExtensibleEnum[Color]):
        red = Color(255, 0, 0)
        green = Color(0, 255, 0)
        blue = Color(0, 0, 255)

    Colors.all_keys()              # ['blue', 'green', 'red']
    Colors.by_name("red")          # Color(r=255, g=0, b=0)
    Colors(Color(0, 255, 0)).case_name   # 'green'

Every accessor works purely off the discovered Case Store; nothing here
special-cases a particular enumeration. Payload equality is ``==``, which for
classes without ``__eq__`` is object identity.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Iterator
from operator import itemgetter
from typing import TYPE_CHECKING, Any, ClassVar, Self

from .discovery import case_entries, discover_cases, is_case_attribute
from .exceptions import ImmutableCaseError, PayloadTypeError
from .facade import declared_payload, generate_typed_facade
from .narrowing import MISSING, PayloadChecker, describe_type
from .registry import REGISTRY, same_value

if TYPE_CHECKING:
    from .sequence import CaseSequence

logger = logging.getLogger(__name__)


class StopFlag:
    """Early-exit signal handed to block enumeration callbacks."""

    __slots__ = ("stopped",)

    def __init__(self):
        self.stopped = False

    def stop(self) -> None:
        self.stopped = True

    def __bool__(self) -> bool:
        return self.stopped


def _is_registered(cls: type, name: str) -> bool:
    return name in case_entries(cls)


def _caller_module(depth: int = 2) -> str | None:
    """Return the module name of the frame ``depth`` levels up, if available."""
    try:
        frame = sys._getframe(depth)
    except (AttributeError, ValueError):
        return None
    return frame.f_globals.get("__name__")


class ExtensibleEnumMeta(type):
    """Metaclass that registers class-body cases and later assignments."""

    def __new__(mcs, name, bases, namespace, **kwargs):
        cls = super().__new__(mcs, name, bases, namespace, **kwargs)
        module = namespace.get("__module__")
        for case_name, value in namespace.items():
            if is_case_attribute(case_name, value):
                REGISTRY.register(cls, case_name, value, declared_in=module)
        return cls

    def _declare(cls, name: str, value: Any, declared_in: str | None) -> None:
        REGISTRY.register(cls, name, value, declared_in=declared_in)
        super().__setattr__(name, value)

    def __setattr__(cls, name, value):
        if is_case_attribute(name, value):
            cls._declare(name, value, _caller_module())
            return
        if _is_registered(cls, name):
            raise ImmutableCaseError(
                f"Case '{name}' of {cls.__qualname__} cannot be rebound to {value!r}"
            )
        super().__setattr__(name, value)

    def __delattr__(cls, name):
        if _is_registered(cls, name):
            raise ImmutableCaseError(
                f"Case '{name}' of {cls.__qualname__} cannot be deleted"
            )
        super().__delattr__(name)

    # Type-scoped sugar ---------------------------------------------------------
    @property
    def count(cls) -> int:
        """Number of distinct case names."""
        return len(cls.all_keys())

    @property
    def all(cls) -> CaseSequence:
        """Typed sequence of the cases (requires a typed façade)."""
        sequence = getattr(cls, "sequence", None)
        if sequence is None:
            raise AttributeError(
                f"{cls.__qualname__} declares no payload type; use all_keys_and_values()"
            )
        return sequence()

    def __getitem__(cls, key):
        # Generic classes take string keys as forward references.
        if isinstance(key, str) and not getattr(cls, "__parameters__", ()):
            lookup = getattr(cls, "by_name", None) or cls.value_for_name
            return lookup(key)
        return cls.__class_getitem__(key)

    def __contains__(cls, item) -> bool:
        if isinstance(item, str):
            return item in cls.all_keys_and_values()
        if isinstance(item, cls):
            return item.case_name is not None
        return False

    def __iter__(cls) -> Iterator:
        return iter(cls.all_cases())

    def __len__(cls) -> int:
        return cls.count

    def __bool__(cls) -> bool:
        return True


class ExtensibleEnum[P](metaclass=ExtensibleEnumMeta):
    """Base class for open-ended enumerations with payload type ``P``.

    The class-level accessors here are type-erased: values come back exactly
    as they were declared. Naming the payload (``ExtensibleEnum[Color]``)
    replaces them with narrowing versions; see :mod:`extensible_enums.facade`.
    """

    __slots__ = ("_value",)

    __payload_type__: ClassVar[Any] = None
    __payload_checker__: ClassVar[PayloadChecker | None] = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        payload = declared_payload(cls, ExtensibleEnum)
        if payload is not MISSING:
            generate_typed_facade(cls, payload)

    def __init__(self, value: P):
        checker = type(self).__payload_checker__
        if checker is not None and not checker.accepts(value):
            raise PayloadTypeError(
                f"{type(self).__qualname__} expects a "
                f"{describe_type(checker.payload_type)}, got {value!r}"
            )
        self._value = value

    # Type-scoped accessors -----------------------------------------------------
    @classmethod
    def all_keys_and_values(cls) -> dict[str, P]:
        """Return the Case Store: every linked case keyed by name."""
        return discover_cases(cls)

    @classmethod
    def all_keys(cls) -> list[str]:
        return sorted(cls.all_keys_and_values())

    @classmethod
    def all_values(cls) -> list[P]:
        mapping = cls.all_keys_and_values()
        return [mapping[name] for name in sorted(mapping)]

    @classmethod
    def value_for_name(cls, name: str) -> P | None:
        entry = case_entries(cls).get(name)
        return entry.value if entry is not None else None

    @classmethod
    def all_cases(cls) -> list[Self]:
        """Return one instance per case, in ascending name order."""
        return [cls(value) for value in cls.all_values()]

    @classmethod
    def enumerate_keys_and_values(
        cls, block: Callable[[str, P, StopFlag], object]
    ) -> None:
        """Call ``block(name, value, stop)`` per case in ascending name order.

        Calling ``stop.stop()`` inside the block ends the traversal; no further
        pair is visited.
        """
        stop = StopFlag()
        for name, value in sorted(cls.all_keys_and_values().items(), key=itemgetter(0)):
            block(name, value, stop)
            if stop:
                return

    @classmethod
    def enumerate_values(cls, block: Callable[[P, StopFlag], object]) -> None:
        """Like :meth:`enumerate_keys_and_values` without the name."""
        cls.enumerate_keys_and_values(lambda _name, value, stop: block(value, stop))

    # Instance identity ---------------------------------------------------------
    @property
    def value(self) -> P:
        return self._value

    @property
    def case_name(self) -> str | None:
        """Name of the first case (ascending) whose value equals this payload."""
        mapping = type(self).all_keys_and_values()
        for name in sorted(mapping):
            if same_value(mapping[name], self._value):
                return name
        return None

    @property
    def description(self) -> str:
        name = self.case_name
        if name is not None:
            return f"{type(self).__name__}.{name}"
        return f"{type(self).__name__}({self._value!r})"

    def __repr__(self) -> str:
        return self.description

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExtensibleEnum):
            return NotImplemented
        return type(self) is type(other) and same_value(self._value, other._value)

    def __hash__(self) -> int:
        return hash((type(self), self._value))

    if TYPE_CHECKING:
        # Installed by the typed façade once the payload type is declared.
        @classmethod
        def by_name(cls, name: str) -> P | None: ...

        @classmethod
        def from_value(cls, value: object) -> Self | None: ...

        @classmethod
        def sequence(cls) -> CaseSequence[P]: ...

        @property
        def typed_value(self) -> P: ...


def extensible_enumeration(payload_type: Any = MISSING) -> Callable[[type], type]:
    """Class decorator naming the payload type of an enumeration.

    Equivalent to subclassing ``ExtensibleEnum[payload_type]``; useful when the
    payload is only available as a forward reference (a string resolved in the
    declaring module). A missing or unusable payload leaves the class with
    the untyped accessors only, and logs a warning.
    """

    def decorate(cls: type) -> type:
        if payload_type is MISSING or isinstance(payload_type, ExtensibleEnumMeta):
            logger.warning(
                "extensible_enumeration on %s names no payload type; "
                "only untyped accessors are available",
                cls.__qualname__,
            )
            return cls
        generate_typed_facade(cls, payload_type)
        return cls

    if isinstance(payload_type, ExtensibleEnumMeta):
        # Used bare (``@extensible_enumeration``): the argument is the class.
        return decorate(payload_type)
    return decorate


__all__ = [
    "StopFlag",
    "ExtensibleEnumMeta",
    "ExtensibleEnum",
    "extensible_enumeration",
]
