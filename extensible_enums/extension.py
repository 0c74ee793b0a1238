"""Extension declarations: adding cases to an enumeration from another module.

Three equivalent spellings; all append to the same registry table:

    # 1. plain assignment (recorded against the assigning module)
    Colors.yellow = Color(255, 255, 0)

    # 2. an extension class body
    @extend(Colors)
    class MoreColors:
        yellow = Color(255, 255, 0)
        cyan = Color(0, 255, 255)

    # 3. programmatic registration
    register_case(Colors, "magenta", Color(255, 0, 255))
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from .base import ExtensibleEnumMeta
from .discovery import check_case_name, scan_namespace

logger = logging.getLogger(__name__)


def _require_enumeration(target: Any) -> ExtensibleEnumMeta:
    if not isinstance(target, ExtensibleEnumMeta):
        raise TypeError(
            f"Expected an ExtensibleEnum subclass, got {type(target).__name__}"
        )
    return target


def register_case(
    target: type, name: str, value: Any, *, declared_in: str | None = None
) -> None:
    """Declare one case on ``target``.

    Raises:
        InvalidCaseNameError: If ``name`` is not a usable case name.
        DuplicateCaseError: If ``name`` is already bound to a different value.
    """
    enum_cls = _require_enumeration(target)
    check_case_name(name)
    enum_cls._declare(name, value, declared_in)


def extend[T: type](target: type) -> Callable[[T], T]:
    """Class decorator copying the cases of an extension class body onto ``target``.

    The extension class itself is returned unchanged so it can still be
    referenced (for documentation or grouping); its cases are recorded as
    declared in the extension's module.
    """
    enum_cls = _require_enumeration(target)

    def decorate(extension: T) -> T:
        cases = scan_namespace(vars(extension))
        for name, value in cases.items():
            enum_cls._declare(name, value, extension.__module__)
        logger.debug(
            "Extension %s.%s added %d case(s) to %s",
            extension.__module__,
            extension.__qualname__,
            len(cases),
            enum_cls.__qualname__,
        )
        return extension

    return decorate


__all__ = ["register_case", "extend"]
