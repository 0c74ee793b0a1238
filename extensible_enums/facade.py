"""Typed façade generation.

Declaring the payload type once, either through the base subscription

    class Colors(ExtensibleEnum[Color]): ...

or through the class decorator

    @extensible_enumeration(Color)
    class Colors(ExtensibleEnum): ...

runs :func:`generate_typed_facade` exactly once for the class. It builds a
:class:`~extensible_enums.narrowing.PayloadChecker` for the payload and
installs accessor functions closed over that checker: the type-erased
accessors are replaced by narrowing ones, and ``by_name``, ``from_value``,
``sequence`` and ``typed_value`` are added. The generated functions carry the
concrete payload in their annotations, so ``typing.get_type_hints`` on
``Colors.all_values`` reports ``list[Color]``.

A declaration whose payload cannot be resolved or checked generates nothing;
the class keeps only the untyped base accessors and a warning is logged.
"""

from __future__ import annotations

import builtins
import logging
import sys
from collections.abc import Callable
from typing import Any, ForwardRef, Optional, TypeVar, get_args, get_origin

from .discovery import case_entries, discover_cases
from .exceptions import DeclarationError, MalformedPayloadError, PayloadTypeError
from .narrowing import MISSING, PayloadChecker, describe_type
from .sequence import CaseSequence

logger = logging.getLogger(__name__)

FACADE_MEMBERS = (
    "all_keys_and_values",
    "all_keys",
    "all_values",
    "value_for_name",
    "by_name",
    "from_value",
    "sequence",
    "typed_value",
)


def declared_payload(cls: type, root: type) -> Any:
    """Return the payload named in ``cls``'s own ``root[...]`` base, or MISSING.

    A type variable (``class Tagged[T](ExtensibleEnum[T])``) is not a
    declaration: the concrete subclass will name the payload later.
    """
    for base in cls.__dict__.get("__orig_bases__", ()):
        origin = get_origin(base)
        if not (isinstance(origin, type) and issubclass(origin, root)):
            continue
        args = get_args(base)
        if len(args) != 1 or isinstance(args[0], TypeVar):
            return MISSING
        return args[0]
    return MISSING


def resolve_payload(cls: type, payload: Any) -> Any:
    """Resolve a forward reference against the declaring module, else return as-is."""
    if isinstance(payload, ForwardRef):
        payload = payload.__forward_arg__
    if not isinstance(payload, str):
        return payload
    module = sys.modules.get(cls.__module__)
    namespace = vars(module) if module is not None else {}
    resolved = namespace.get(payload, getattr(builtins, payload, None))
    return resolved if resolved is not None else payload


def _generated(
    cls: type, name: str, fn: Callable, annotations: dict[str, Any], doc: str
) -> Callable:
    fn.__name__ = name
    fn.__qualname__ = f"{cls.__qualname__}.{name}"
    fn.__module__ = cls.__module__
    fn.__annotations__ = annotations
    fn.__doc__ = doc
    return fn


def _build_members(cls: type, checker: PayloadChecker) -> dict[str, Any]:
    payload = checker.payload_type
    label = describe_type(payload)
    narrow = checker.narrow

    def all_keys_and_values(cls):
        return discover_cases(cls, narrow)

    def all_keys(cls):
        return sorted(discover_cases(cls, narrow))

    def all_values(cls):
        mapping = discover_cases(cls, narrow)
        return [mapping[name] for name in sorted(mapping)]

    def value_for_name(cls, name):
        entry = case_entries(cls).get(name)
        if entry is None:
            return None
        value = narrow(entry.value)
        return None if value is MISSING else value

    def by_name(cls, name):
        return cls.value_for_name(name)

    def from_value(cls, value):
        if not checker.accepts(value):
            return None
        return cls(value)

    def sequence(cls):
        return CaseSequence(discover_cases(cls, narrow))

    def typed_value(self):
        value = self.value
        if not checker.accepts(value):
            raise PayloadTypeError(
                f"{type(self).__qualname__} holds {value!r}, which is not a {label}"
            )
        return value

    optional = Optional[payload]  # noqa: UP007
    return {
        "all_keys_and_values": classmethod(
            _generated(
                cls,
                "all_keys_and_values",
                all_keys_and_values,
                {"return": dict[str, payload]},
                f"Return every {label} case keyed by name.",
            )
        ),
        "all_keys": classmethod(
            _generated(
                cls,
                "all_keys",
                all_keys,
                {"return": list[str]},
                "Return the case names in ascending order.",
            )
        ),
        "all_values": classmethod(
            _generated(
                cls,
                "all_values",
                all_values,
                {"return": list[payload]},
                f"Return the {label} values ordered to match all_keys().",
            )
        ),
        "value_for_name": classmethod(
            _generated(
                cls,
                "value_for_name",
                value_for_name,
                {"name": str, "return": optional},
                f"Return the {label} declared under ``name``, or None.",
            )
        ),
        "by_name": classmethod(
            _generated(
                cls,
                "by_name",
                by_name,
                {"name": str, "return": optional},
                f"Return the {label} declared under ``name``, or None.",
            )
        ),
        "from_value": classmethod(
            _generated(
                cls,
                "from_value",
                from_value,
                {"value": Any, "return": Optional[cls]},  # noqa: UP007
                f"Wrap ``value`` in {cls.__qualname__}, or None if it is not a {label}.",
            )
        ),
        "sequence": classmethod(
            _generated(
                cls,
                "sequence",
                sequence,
                {"return": CaseSequence[payload]},
                "Return a name-ordered snapshot of the cases.",
            )
        ),
        "typed_value": property(
            _generated(
                cls,
                "typed_value",
                typed_value,
                {"return": payload},
                f"The payload as a {label}; raises PayloadTypeError on mismatch.",
            )
        ),
    }


def generate_typed_facade(cls: type, payload: Any) -> bool:
    """Install the typed accessors for ``payload`` on ``cls``.

    Returns:
        True when ``cls`` has a typed façade for ``payload`` afterwards, False
        when the declaration was malformed and nothing was generated.

    Raises:
        DeclarationError: If ``cls`` already carries a different payload type.
    """
    payload = resolve_payload(cls, payload)
    current = getattr(cls, "__payload_type__", None)
    if current is not None:
        if current == payload:
            return True
        raise DeclarationError(
            f"{cls.__qualname__} already declares payload {describe_type(current)}; "
            f"cannot redeclare it as {describe_type(payload)}"
        )
    try:
        checker = PayloadChecker.for_type(payload)
    except MalformedPayloadError as e:
        logger.warning(
            "No typed accessors generated for %s: %s", cls.__qualname__, e
        )
        return False

    for name, member in _build_members(cls, checker).items():
        setattr(cls, name, member)
    cls.__payload_type__ = payload
    cls.__payload_checker__ = checker
    origin = get_origin(payload) or payload
    if isinstance(origin, type) and origin.__hash__ is None:
        # Instances wrapping unhashable payloads are unhashable too.
        cls.__hash__ = None
    logger.debug(
        "Generated typed façade for %s with payload %s",
        cls.__qualname__,
        describe_type(payload),
    )
    return True


__all__ = [
    "FACADE_MEMBERS",
    "declared_payload",
    "resolve_payload",
    "generate_typed_facade",
]
