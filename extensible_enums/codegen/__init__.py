"""Stub generation for extensible enumerations.

Import-light: rendering needs only the runtime registry, never a generated
file, so it can run from a build hook.
"""

from __future__ import annotations

from .generate import HEADER, main, render_stub, stub_for_module, stub_for_targets, write_stub
from .spec import EnumerationSpec, ImportSet, render_type

__all__ = [
    "HEADER",
    "EnumerationSpec",
    "ImportSet",
    "main",
    "render_stub",
    "render_type",
    "stub_for_module",
    "stub_for_targets",
    "write_stub",
]
