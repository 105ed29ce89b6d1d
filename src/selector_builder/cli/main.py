"""selector-builder CLI entry point: Click group with subcommands."""

import logging

import click

from selector_builder import __version__


@click.group()
@click.version_option(version=__version__, prog_name="selector-builder")
@click.option("-v", "--verbose", is_flag=True, help="Log builder activity to stderr.")
def cli(verbose: bool) -> None:
    """selector-builder - assemble CSS selectors from ordered parts."""
    if verbose:
        logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
        logging.getLogger("selector_builder").setLevel(logging.DEBUG)


# Import and register subcommands
from selector_builder.cli.build import build  # noqa: E402
from selector_builder.cli.render import render  # noqa: E402

cli.add_command(build)
cli.add_command(render)
