"""CLI commands for the hardware taxonomies."""

from __future__ import annotations

import click

from pcinv.domain.model.hardware import CPUSocket, RAMType


@click.command("sockets")
def catalog_sockets() -> None:
    """List known CPU sockets."""
    for socket in CPUSocket:
        click.echo(socket.value)


@click.command("ram-types")
def catalog_ram_types() -> None:
    """List known memory types."""
    for ram_type in RAMType:
        click.echo(ram_type.value)
