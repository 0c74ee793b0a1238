"""Cases command: list the cases of one enumeration.

Output is one ``name = value`` line per case in ascending name order, or a
JSON/YAML mapping of name to ``repr(value)``.
"""

from __future__ import annotations

import json

import click
import yaml

from ._target import import_option, resolve_target


@click.command("cases")
@click.argument("target", type=str)
@import_option
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["text", "json", "yaml"], case_sensitive=False),
    default="text",
    show_default=True,
    help="Output format",
)
@click.option("--names-only", is_flag=True, help="Print case names only")
def cases_cmd(
    target: str, extra_modules: tuple[str, ...], fmt: str, names_only: bool
) -> None:
    """List the cases of TARGET (``module:ClassName``)."""
    enum_cls = resolve_target(target, extra_modules)
    mapping = enum_cls.all_keys_and_values()
    names = sorted(mapping)

    if names_only:
        for name in names:
            click.echo(name)
        return

    rendered = {name: repr(mapping[name]) for name in names}
    match fmt.lower():
        case "json":
            click.echo(json.dumps(rendered, indent=2))
        case "yaml":
            click.echo(yaml.safe_dump(rendered, sort_keys=False, allow_unicode=True))
        case _:
            for name, value in rendered.items():
                click.echo(f"{name} = {value}")


__all__ = ["cases_cmd"]
