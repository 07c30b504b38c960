import logging

import click

from pcinv.infrastructure.cli.board_commands import board_check
from pcinv.infrastructure.cli.catalog_commands import catalog_ram_types, catalog_sockets


@click.group()
@click.option("--verbose", is_flag=True, help="Log every domain operation.")
def cli(verbose: bool) -> None:
    """pcinv — machine part inventory"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def board() -> None:
    """Work with motherboards."""


@cli.group()
def catalog() -> None:
    """Show known hardware taxonomies."""


# Register subcommands
board.add_command(board_check)
catalog.add_command(catalog_ram_types)
catalog.add_command(catalog_sockets)
