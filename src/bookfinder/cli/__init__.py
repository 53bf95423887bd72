# ABOUTME: CLI package for Bookfinder, built on Click.
# ABOUTME: Defines the root command group and registers subcommands.

import logging

import click

from bookfinder.cli.commands import isbn_cmd, title_cmd


@click.group()
@click.version_option(package_name="bookfinder")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Bookfinder - look up book metadata on Google Books."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


cli.add_command(title_cmd.title)
cli.add_command(isbn_cmd.isbn)
