"""Shared option handling for commands that take an enumeration reference."""

from __future__ import annotations

import click

from ..base import ExtensibleEnumMeta
from ..loading import load_enumeration

import_option = click.option(
    "--import",
    "extra_modules",
    multiple=True,
    metavar="MODULE",
    help="Import MODULE first (repeatable); use for modules holding extensions",
)


def resolve_target(target: str, extra_modules: tuple[str, ...]) -> ExtensibleEnumMeta:
    """Load ``target`` or fail with a Click usage error."""
    try:
        return load_enumeration(target, extra_modules)
    except (ImportError, ValueError, TypeError) as e:
        raise click.BadParameter(str(e), param_hint="TARGET") from e


__all__ = ["import_option", "resolve_target"]
