"""CLI command group for extensible enumerations.

This module exposes the root Click command group `extensible_enums` which
aggregates subcommands implemented in sibling modules.

Example usage:

        extensible-enums cases mypkg.colors:Colors
        extensible-enums describe mypkg.colors:Colors --format yaml
        extensible-enums stub mypkg.colors -o mypkg/colors.pyi
"""

from __future__ import annotations

import logging
import os

import click

from .cases import cases_cmd
from .describe import describe_cmd
from .stub import stub_cmd

LOG_LEVEL_ENV = "EXTENSIBLE_ENUMS_LOG_LEVEL"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _configure_logging(level_name: str | None = None) -> None:
    """Configure root logging once; later calls only adjust the level."""
    level_name = (level_name or os.getenv(LOG_LEVEL_ENV, "WARNING")).upper()
    level = getattr(logging, level_name, logging.WARNING)
    if not getattr(_configure_logging, "_done", False):  # type: ignore[attr-defined]
        logging.basicConfig(level=level, format="[%(levelname)s] %(name)s: %(message)s")
        _configure_logging._done = True  # type: ignore[attr-defined]
    logging.getLogger().setLevel(level)


@click.group()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help=f"Set the logging level (env: {LOG_LEVEL_ENV}, default WARNING)",
)
def extensible_enums(log_level: str | None) -> None:
    """Inspect extensible enumerations and generate their stubs."""
    _configure_logging(log_level)


# Register subcommands
extensible_enums.add_command(cases_cmd)
extensible_enums.add_command(describe_cmd)
extensible_enums.add_command(stub_cmd)

__all__ = ["extensible_enums"]
