"""CLI command: markupsel compile -- print the canonical form of selectors."""

from __future__ import annotations

import sys

import click

from markupsel.cli.options import case_sensitivity_options
from markupsel.compiler import format_selector
from markupsel.config import SelectorConfig, resolve_config
from markupsel.errors import SelectorSyntaxError


@click.command(name="compile")
@click.argument("selectors", nargs=-1, required=True)
@case_sensitivity_options
def compile_cmd(selectors: tuple[str, ...], mode: str, case_sensitive: bool | None) -> None:
    """Compile SELECTORS and print the canonical form of each.

    Exits with code 1 if any selector has a syntax error.
    """
    config: SelectorConfig = resolve_config(mode, case_sensitive)
    failed = False
    for selector in selectors:
        try:
            levels = config.compile(selector)
        except SelectorSyntaxError as exc:
            click.echo(f"Syntax error: {exc}", err=True)
            failed = True
            continue
        click.echo(format_selector(levels))
    if failed:
        sys.exit(1)
