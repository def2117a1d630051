"""CLI command: markupsel inspect -- display the levels of a compiled selector."""

from __future__ import annotations

import sys

import click

from markupsel.cli.options import case_sensitivity_options
from markupsel.config import resolve_config
from markupsel.errors import SelectorSyntaxError


@click.command()
@click.argument("selector")
@case_sensitivity_options
def inspect(selector: str, mode: str, case_sensitive: bool | None) -> None:
    """Compile SELECTOR and display each of its levels.

    Shows the search axis, element/text target, reference, index and
    attribute conditions of every level, root-most first.
    """
    config = resolve_config(mode, case_sensitive)
    try:
        levels = config.compile(selector)
    except SelectorSyntaxError as exc:
        click.echo(f"Syntax error: {exc}", err=True)
        if exc.column is not None:
            click.echo(f"  {selector}", err=True)
            click.echo("  " + " " * (exc.column - 1) + "^", err=True)
        sys.exit(1)

    click.echo(f"Selector: {selector}")
    click.echo(f"Case sensitive: {'yes' if config.case_sensitive else 'no'}")
    click.echo(f"Levels: {len(levels)}")
    click.echo()

    for pos, level in enumerate(levels):
        click.echo(f"  [{pos}] {level}")
        axis = "any level" if level.any_level else "direct child"
        if level.is_text_selector:
            target = "text()"
        elif level.element_name is None:
            target = "*"
        else:
            target = level.element_name
        parts = [f"      axis={axis}", f"target={target}"]
        if level.reference_name is not None:
            parts.append(f"reference={level.reference_name}")
        if level.index is not None:
            parts.append(f"index={level.index}")
        if level.requires_attributes_in_element:
            parts.append("requires_attributes")
        click.echo("  ".join(parts))
        for cond in level.attribute_conditions:
            line = f"      - {cond.name} {cond.operator.name}"
            if cond.value is not None:
                line += f" {cond.value!r}"
            click.echo(line)
