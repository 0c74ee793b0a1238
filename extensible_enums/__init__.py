"""Extensible enumerations: open-ended sets of named constants.

Declare an enumeration once with its payload type, add cases from any module,
and query them through typed accessors:

    class Colors(ExtensibleEnum[Color]):
        red = Color(255, 0, 0)

    @extend(Colors)
    class MoreColors:
        yellow = Color(255, 255, 0)

    Colors.all_keys()   # ['red', 'yellow']
"""

import importlib.metadata

from .base import ExtensibleEnum, ExtensibleEnumMeta, StopFlag, extensible_enumeration
from .discovery import RESERVED_NAMES, RESERVED_PREFIX, discover_cases
from .exceptions import (
    DeclarationError,
    DuplicateCaseError,
    ExtensibleEnumError,
    ImmutableCaseError,
    InvalidCaseNameError,
    PayloadTypeError,
)
from .extension import extend, register_case
from .models import CaseInfo, EnumerationInfo, describe
from .sequence import CaseSequence

# ---------------------------------------------------------------------------
# Version metadata
# ---------------------------------------------------------------------------
# In-tree execution (tests run before the distribution is built) has no
# metadata; fall back to a neutral placeholder.
try:  # pragma: no cover - trivial guard
    __version__ = importlib.metadata.version("extensible-enums")
except importlib.metadata.PackageNotFoundError:  # distribution not installed
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "ExtensibleEnum",
    "ExtensibleEnumMeta",
    "StopFlag",
    "extensible_enumeration",
    "extend",
    "register_case",
    "discover_cases",
    "RESERVED_NAMES",
    "RESERVED_PREFIX",
    "CaseSequence",
    "CaseInfo",
    "EnumerationInfo",
    "describe",
    "ExtensibleEnumError",
    "DeclarationError",
    "DuplicateCaseError",
    "ImmutableCaseError",
    "InvalidCaseNameError",
    "PayloadTypeError",
]
