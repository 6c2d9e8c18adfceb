"""textmetrics CLI entry point: Click group with subcommands."""

import click

from textmetrics import __version__


@click.group()
@click.version_option(version=__version__, prog_name="textmetrics")
def cli() -> None:
    """textmetrics - font metrics driven vertical corrections for CSS."""


# Import and register subcommands
from textmetrics.cli.build import build  # noqa: E402
from textmetrics.cli.scan import scan  # noqa: E402

cli.add_command(build)
cli.add_command(scan)
