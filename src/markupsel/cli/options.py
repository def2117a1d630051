"""Options shared by every command that compiles selectors."""

from __future__ import annotations

from typing import Any, Callable

import click

F = Callable[..., Any]


def case_sensitivity_options(func: F) -> F:
    """Add ``--mode`` and ``--case-sensitive/--case-insensitive`` to a command."""
    func = click.option(
        "--case-sensitive/--case-insensitive",
        "case_sensitive",
        default=None,
        envvar="MARKUPSEL_CASE_SENSITIVE",
        help="Compare element and attribute names literally (default: from --mode).",
    )(func)
    func = click.option(
        "--mode",
        type=click.Choice(["html", "xml"], case_sensitive=False),
        default="html",
        show_default=True,
        help="Markup mode; xml compares names case-sensitively.",
    )(func)
    return func
