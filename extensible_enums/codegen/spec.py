"""Frozen snapshots of enumerations, normalized for stub generation.

Kept apart from the renderer so the snapshot (what cases exist and how their
payload type is spelled) can be inspected and tested without producing text.
"""

from __future__ import annotations

import types
from dataclasses import dataclass, field
from typing import Annotated, Any, Literal, Union, get_args, get_origin

from ..base import ExtensibleEnumMeta
from ..discovery import case_entries


@dataclass
class ImportSet:
    """``from <module> import <name>`` lines collected while rendering types."""

    names: dict[str, set[str]] = field(default_factory=dict)

    def add(self, module: str, name: str) -> None:
        self.names.setdefault(module, set()).add(name)

    def lines(self) -> list[str]:
        return [
            f"from {module} import {', '.join(sorted(names))}"
            for module, names in sorted(self.names.items())
        ]


def render_type(tp: Any, imports: ImportSet) -> str:
    """Spell ``tp`` as stub source, recording the imports it needs."""
    if tp is None or tp is type(None):
        return "None"
    if tp is Any:
        imports.add("typing", "Any")
        return "Any"
    if tp is Ellipsis:
        return "..."
    origin = get_origin(tp)
    if origin is None and isinstance(tp, type):
        if tp.__module__ != "builtins":
            imports.add(tp.__module__, tp.__qualname__.split(".")[0])
        return tp.__qualname__
    args = get_args(tp)
    if origin is Literal:
        imports.add("typing", "Literal")
        return f"Literal[{', '.join(repr(arg) for arg in args)}]"
    if origin is Union or origin is types.UnionType:
        return " | ".join(render_type(arg, imports) for arg in args)
    if origin is Annotated:
        return render_type(args[0], imports)
    if isinstance(origin, type):
        base = render_type(origin, imports)
        if not args:
            return base
        return f"{base}[{', '.join(render_type(arg, imports) for arg in args)}]"
    imports.add("typing", "Any")
    return "Any"


@dataclass(frozen=True)
class EnumerationSpec:
    name: str
    module: str
    payload_type: Any
    case_names: tuple[str, ...]

    @classmethod
    def from_class(cls, enum_cls: ExtensibleEnumMeta) -> EnumerationSpec:
        """Snapshot ``enum_cls``: its payload and every case visible to the typed accessors."""
        payload = enum_cls.__payload_type__
        if payload is not None:
            names = tuple(enum_cls.all_keys())
        else:
            names = tuple(sorted(case_entries(enum_cls)))
        return cls(
            name=enum_cls.__qualname__,
            module=enum_cls.__module__,
            payload_type=payload if payload is not None else Any,
            case_names=names,
        )


__all__ = ["ImportSet", "render_type", "EnumerationSpec"]
