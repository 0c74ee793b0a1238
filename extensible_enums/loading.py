"""Import enumerations by dotted reference.

Targets are written ``package.module:Qual.Name`` (preferred) or
``package.module.Name``. Importing a module runs its class bodies and
extension declarations, so only cases linked by the imported modules are
visible afterwards.
"""

from __future__ import annotations

import importlib
from types import ModuleType

from .base import ExtensibleEnum, ExtensibleEnumMeta


def _resolve_attribute(module: ModuleType, qualname: str) -> object:
    obj: object = module
    for part in qualname.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise ValueError(
                f"Module '{module.__name__}' has no attribute '{qualname}'"
            ) from e
    return obj


def load_enumeration(target: str, extra_modules: tuple[str, ...] = ()) -> ExtensibleEnumMeta:
    """Import and return the enumeration named by ``target``.

    Args:
        target: ``module:QualName`` or ``module.Name``.
        extra_modules: Modules to import first, typically ones holding
            extension declarations for the target.

    Raises:
        ValueError: If the reference is malformed or does not exist.
        TypeError: If it names something other than an enumeration.
    """
    for module_name in extra_modules:
        importlib.import_module(module_name)

    if ":" in target:
        module_name, _, qualname = target.partition(":")
    else:
        module_name, _, qualname = target.rpartition(".")
    if not module_name or not qualname:
        raise ValueError(
            f"Invalid enumeration reference '{target}'; expected 'module:ClassName'"
        )
    module = importlib.import_module(module_name)
    obj = _resolve_attribute(module, qualname)
    if not isinstance(obj, ExtensibleEnumMeta) or obj is ExtensibleEnum:
        raise TypeError(f"'{target}' is not an ExtensibleEnum subclass")
    return obj


def find_enumerations(module: ModuleType | str) -> list[ExtensibleEnumMeta]:
    """Return the enumerations defined (not merely imported) in ``module``."""
    if isinstance(module, str):
        module = importlib.import_module(module)
    found = [
        obj
        for obj in vars(module).values()
        if isinstance(obj, ExtensibleEnumMeta)
        and obj is not ExtensibleEnum
        and obj.__module__ == module.__name__
    ]
    return sorted(found, key=lambda cls: cls.__qualname__)


__all__ = ["load_enumeration", "find_enumerations"]
