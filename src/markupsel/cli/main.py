"""markupsel CLI entry point: Click group with subcommands."""

import logging

import click

from markupsel import __version__


@click.group()
@click.version_option(version=__version__, prog_name="markupsel")
@click.option("-v", "--verbose", is_flag=True, help="Log compiler activity to stderr.")
def cli(verbose: bool) -> None:
    """markupsel - compile and check markup path selectors."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from markupsel.cli.compile import compile_cmd  # noqa: E402
from markupsel.cli.inspect import inspect  # noqa: E402
from markupsel.cli.validate import validate  # noqa: E402

cli.add_command(compile_cmd)
cli.add_command(inspect)
cli.add_command(validate)
