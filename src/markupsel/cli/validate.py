"""CLI command: markupsel validate -- compile and lint a file of selectors."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from markupsel.cli.options import case_sensitivity_options
from markupsel.config import resolve_config
from markupsel.errors import SelectorSyntaxError
from markupsel.model.diagnostic import Severity
from markupsel.validation import validate as run_validate


@click.command()
@click.argument("selector_file", type=click.Path(exists=True, dir_okay=False))
@case_sensitivity_options
def validate(selector_file: str, mode: str, case_sensitive: bool | None) -> None:
    """Compile and lint every selector in SELECTOR_FILE.

    The file holds one selector per line; blank lines and lines starting
    with '#' are skipped. Exits with code 1 if any selector has a syntax
    error or an ERROR diagnostic, 0 otherwise.
    """
    config = resolve_config(mode, case_sensitive)
    path = Path(selector_file)

    errors = warnings = infos = checked = 0
    for lineno, line in enumerate(path.read_text(encoding="utf-8").splitlines(), start=1):
        selector = line.strip()
        if not selector or selector.startswith("#"):
            continue
        checked += 1

        try:
            levels = config.compile(selector)
        except SelectorSyntaxError as exc:
            click.echo(f"{path.name}:{lineno}: ERROR: {exc}")
            errors += 1
            continue

        for diag in run_validate(levels):
            click.echo(f"{path.name}:{lineno}: {diag}")
            if diag.severity is Severity.ERROR:
                errors += 1
            elif diag.severity is Severity.WARNING:
                warnings += 1
            else:
                infos += 1

    if not (errors or warnings or infos):
        click.echo(f"OK: {path.name} is valid ({checked} selector(s), 0 diagnostics)")
        sys.exit(0)

    click.echo()
    click.echo(
        f"Summary: {checked} selector(s), {errors} error(s), "
        f"{warnings} warning(s), {infos} info"
    )
    sys.exit(1 if errors else 0)
