"""
Defines the main Click command group for chainwind.

This module provides:
- The root `cli` command group for the application.
- Integration with Rich-enhanced Click classes (`RichGroup`).
- Registration of subcommands from other modules.

Usage:
    $ chainwind-cli expand text "hover:bg-red-500|text-white"
"""

import click
from chainwind.commands.base import RichGroup
from chainwind.commands.expand import expand
from chainwind.chainwind import __version__


@click.group(
    cls=RichGroup,
    help="""
    chainwind Command Palette

    Expand chained utility classes in text and files.
    """,
)
@click.version_option(version=__version__, prog_name="chainwind")
def cli() -> None:
    """
    The root Click command group for chainwind.
    """
    pass


# Explicitly annotate `cli` as `click.Group` for static type checking
cli: click.Group = cli

# Register subcommands
cli.add_command(expand)
