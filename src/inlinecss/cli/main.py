"""Inlinecss CLI entry point: Click group with subcommands."""

import logging

import click

from inlinecss import __version__


@click.group()
@click.version_option(version=__version__, prog_name="inlinecss")
@click.option("-v", "--verbose", is_flag=True, help="Log cascade details to stderr.")
def cli(verbose: bool) -> None:
    """Inlinecss - move stylesheet rules into HTML style attributes."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from inlinecss.cli.inline import inline  # noqa: E402
from inlinecss.cli.inspect import inspect  # noqa: E402

cli.add_command(inline)
cli.add_command(inspect)
