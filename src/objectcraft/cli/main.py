"""objectcraft CLI entry point: Click group with subcommands."""

import click

from objectcraft import __version__
from objectcraft.config import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="objectcraft")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """objectcraft - shape records, JSON object codec and CSS selector builder."""
    configure_logging(verbose=verbose)


# Import and register subcommands
from objectcraft.cli.area import area  # noqa: E402
from objectcraft.cli.decode import decode  # noqa: E402
from objectcraft.cli.selector import selector  # noqa: E402

cli.add_command(area)
cli.add_command(decode)
cli.add_command(selector)
