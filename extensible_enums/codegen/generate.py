"""Render ``.pyi`` declarations for enumerations.

Cases added by extension modules are plain attribute assignments at runtime,
so static type checkers never see them. The rendered stub lists every case
linked at generation time as ``ClassVar[<payload>]`` on its enumeration:

    class Colors(ExtensibleEnum[Color]):
        blue: ClassVar[Color]
        green: ClassVar[Color]
        red: ClassVar[Color]
        yellow: ClassVar[Color]

Run it after importing every module that declares cases, e.g. from a build
hook or via ``extensible-enums stub``.
"""

from __future__ import annotations

import importlib
import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from ..loading import find_enumerations, load_enumeration
from .spec import EnumerationSpec, ImportSet, render_type

logger = logging.getLogger(__name__)

HEADER = "# Generated by extensible_enums.codegen. Do not edit by hand."


def render_stub(
    specs: Iterable[EnumerationSpec], module: str | None = None
) -> str:
    """Return stub source declaring ``specs``.

    Args:
        specs: Enumeration snapshots to declare.
        module: Module the stub is written for; imports of names from this
            module are omitted because the stub itself defines them.
    """
    imports = ImportSet()
    imports.add("typing", "ClassVar")
    imports.add("extensible_enums", "ExtensibleEnum")
    blocks: list[str] = []
    for spec in specs:
        if "." in spec.name:
            logger.warning("Skipping nested enumeration %s in stub output", spec.name)
            continue
        payload = render_type(spec.payload_type, imports)
        lines = [f"class {spec.name}(ExtensibleEnum[{payload}]):"]
        lines.extend(f"    {name}: ClassVar[{payload}]" for name in spec.case_names)
        if not spec.case_names:
            lines.append("    ...")
        blocks.append("\n".join(lines))

    if module is not None:
        imports.names.pop(module, None)
    sections = [HEADER, "\n".join(imports.lines()), *blocks]
    return "\n\n".join(sections) + "\n"


def stub_for_module(module: str) -> str:
    """Render the stub for every enumeration defined in ``module``."""
    specs = [EnumerationSpec.from_class(cls) for cls in find_enumerations(module)]
    return render_stub(specs, module=module)


def stub_for_targets(targets: Sequence[str], extra_modules: Sequence[str] = ()) -> str:
    """Render the stub for explicit ``module:Class`` targets."""
    classes = [load_enumeration(t, tuple(extra_modules)) for t in targets]
    modules = {cls.__module__ for cls in classes}
    module = modules.pop() if len(modules) == 1 else None
    return render_stub((EnumerationSpec.from_class(cls) for cls in classes), module)


def write_stub(text: str, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    logger.info("Wrote enumeration stub to %s", path)
    return path


def main(module: str, output: Path, extra_modules: Sequence[str] = ()) -> Path:
    """Entry point for build hooks: render ``module`` and write it to ``output``."""
    for extra in extra_modules:
        importlib.import_module(extra)
    return write_stub(stub_for_module(module), Path(output))


__all__ = [
    "HEADER",
    "render_stub",
    "stub_for_module",
    "stub_for_targets",
    "write_stub",
    "main",
]
