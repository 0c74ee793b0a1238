"""Checked downcast of type-erased case values to a declared payload type.

Plain classes are checked with ``isinstance``. Anything else a type checker
understands (``tuple[int, int, int]``, ``Literal[...]``, ``TypedDict``,
unions, ``NewType``) is checked with a strict pydantic ``TypeAdapter``; the
adapter only answers "does this value conform", the original object is what
callers get back, so identity and equality of payloads are preserved.
"""

from __future__ import annotations

from typing import Any, ForwardRef, TypeVar, get_origin, is_typeddict

from pydantic import PydanticUserError, TypeAdapter, ValidationError

from .exceptions import MalformedPayloadError


class _Missing:
    """Sentinel for a value that failed narrowing."""

    _instance: _Missing | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def describe_type(payload_type: Any) -> str:
    """Return a short, readable spelling of ``payload_type``."""
    if isinstance(payload_type, type) and get_origin(payload_type) is None:
        return payload_type.__qualname__
    return repr(payload_type).replace("typing.", "")


class PayloadChecker:
    """Answer whether a value belongs to one payload type.

    Build instances with :meth:`for_type`; it raises
    :class:`MalformedPayloadError` when ``payload_type`` is not something a
    value can be checked against (``None``, a bare string, a ``TypeVar``, a
    non-runtime ``Protocol``...).
    """

    __slots__ = ("payload_type", "_isinstance_of", "_adapter")

    def __init__(
        self,
        payload_type: Any,
        isinstance_of: type | None = None,
        adapter: TypeAdapter | None = None,
    ):
        self.payload_type = payload_type
        self._isinstance_of = isinstance_of
        self._adapter = adapter

    @classmethod
    def for_type(cls, payload_type: Any) -> PayloadChecker:
        if payload_type is Any or payload_type is object:
            return cls(payload_type)
        if payload_type is None or isinstance(payload_type, str | ForwardRef | TypeVar):
            raise MalformedPayloadError(
                f"Payload type must be a resolved type, got {payload_type!r}"
            )
        if (
            isinstance(payload_type, type)
            and get_origin(payload_type) is None
            and not is_typeddict(payload_type)
        ):
            if getattr(payload_type, "_is_protocol", False) and not getattr(
                payload_type, "_is_runtime_protocol", False
            ):
                raise MalformedPayloadError(
                    f"Protocol {payload_type.__qualname__} is not runtime checkable"
                )
            return cls(payload_type, isinstance_of=payload_type)
        try:
            adapter = TypeAdapter(payload_type)
        except (PydanticUserError, TypeError) as e:
            raise MalformedPayloadError(
                f"Cannot check values against {describe_type(payload_type)}: {e}"
            ) from e
        return cls(payload_type, adapter=adapter)

    def accepts(self, value: Any) -> bool:
        if self._isinstance_of is not None:
            return isinstance(value, self._isinstance_of)
        if self._adapter is None:
            return True
        try:
            self._adapter.validate_python(value, strict=True)
        except ValidationError:
            return False
        return True

    def narrow(self, value: Any) -> Any:
        """Return ``value`` unchanged if it conforms, otherwise ``MISSING``."""
        return value if self.accepts(value) else MISSING

    def __repr__(self) -> str:
        return f"PayloadChecker({describe_type(self.payload_type)})"


__all__ = ["MISSING", "PayloadChecker", "describe_type"]
