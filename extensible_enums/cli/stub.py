"""Stub command: render ``.pyi`` declarations for enumerations.

TARGET is either a module (every enumeration defined in it) or a
``module:ClassName`` reference.
"""

from __future__ import annotations

import importlib
from pathlib import Path

import click

from ..codegen.generate import stub_for_module, stub_for_targets, write_stub
from ._target import import_option


@click.command("stub")
@click.argument("targets", nargs=-1, required=True, type=str)
@import_option
@click.option(
    "-o",
    "--output",
    type=click.Path(file_okay=True, dir_okay=False, path_type=Path),
    default=None,
    help="Write the stub to this file instead of stdout",
)
def stub_cmd(
    targets: tuple[str, ...], extra_modules: tuple[str, ...], output: Path | None
) -> None:
    """Render stub declarations listing every linked case of TARGETS."""
    try:
        if len(targets) == 1 and ":" not in targets[0]:
            for module_name in extra_modules:
                importlib.import_module(module_name)
            text = stub_for_module(targets[0])
        else:
            text = stub_for_targets(targets, extra_modules)
    except (ImportError, ValueError, TypeError) as e:
        raise click.BadParameter(str(e), param_hint="TARGETS") from e

    if output is None:
        click.echo(text, nl=False)
        return
    write_stub(text, output)
    click.echo(f"Wrote stub -> {output}")


__all__ = ["stub_cmd"]
