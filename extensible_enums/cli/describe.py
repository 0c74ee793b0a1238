"""Describe command: print the EnumerationInfo report for one enumeration."""

from __future__ import annotations

import json

import click
import yaml

from ..models import describe
from ._target import import_option, resolve_target


@click.command("describe")
@click.argument("target", type=str)
@import_option
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    default="json",
    show_default=True,
    help="Output format for the report",
)
@click.option(
    "--pretty/--no-pretty",
    default=True,
    show_default=True,
    help="Pretty-print JSON output",
)
def describe_cmd(
    target: str, extra_modules: tuple[str, ...], fmt: str, pretty: bool
) -> None:
    """Print payload type, count and cases of TARGET."""
    info = describe(resolve_target(target, extra_modules))
    data = info.model_dump()

    if fmt.lower() == "yaml":
        click.echo(
            yaml.safe_dump(
                data, sort_keys=False, allow_unicode=True, default_flow_style=False
            )
        )
        return

    indent = 2 if pretty else None
    click.echo(json.dumps(data, indent=indent))


__all__ = ["describe_cmd"]
