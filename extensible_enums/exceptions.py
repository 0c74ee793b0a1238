"""Exception hierarchy for extensible enumerations.

Only declaration-time mistakes raise. Lookups that find nothing (unknown
names, payloads of the wrong type, values matching no case) return ``None``
or drop the entry instead; see the accessors in :mod:`extensible_enums.base`.
"""

from __future__ import annotations


class ExtensibleEnumError(Exception):
    """Base class for all errors raised by this package."""


class DeclarationError(ExtensibleEnumError):
    """Raised when an enumeration declaration contradicts an earlier one."""


class InvalidCaseNameError(ExtensibleEnumError, ValueError):
    """Raised when a case name is not an identifier or is reserved."""


class DuplicateCaseError(ExtensibleEnumError, ValueError):
    """Raised when a case name is registered twice with different values."""

    def __init__(self, enumeration: str, name: str, existing, proposed):
        self.enumeration = enumeration
        self.name = name
        self.existing = existing
        self.proposed = proposed
        super().__init__(
            f"Case '{name}' of {enumeration} is already declared as {existing!r}; "
            f"cannot redeclare it as {proposed!r}"
        )


class ImmutableCaseError(ExtensibleEnumError, AttributeError):
    """Raised when code tries to delete a declared case."""


class MalformedPayloadError(DeclarationError):
    """Raised internally when no checker can be built for a payload type."""


class PayloadTypeError(ExtensibleEnumError, TypeError):
    """Raised by the strict constructor and ``typed_value`` on a payload mismatch."""


__all__ = [
    "ExtensibleEnumError",
    "DeclarationError",
    "MalformedPayloadError",
    "InvalidCaseNameError",
    "DuplicateCaseError",
    "ImmutableCaseError",
    "PayloadTypeError",
]
