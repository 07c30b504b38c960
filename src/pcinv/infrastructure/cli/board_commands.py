"""CLI commands for motherboards."""

from __future__ import annotations

import click

from pcinv.application.create_machine import CreateMachineHandler
from pcinv.application.dto import BoardSpec
from pcinv.application.install_part import InstallPartHandler, board_from_spec
from pcinv.application.set_slot_usage import SetSlotUsageHandler
from pcinv.application.show_machine import ShowMachineHandler
from pcinv.domain.exceptions import DomainException
from pcinv.infrastructure.bootstrap import machine_repository


@click.command("check")
@click.option("--machine", "machine_name", default="Workstation", show_default=True,
              help="Machine name.")
@click.option("--id", "part_id", default=None, help="Part ID (random if omitted).")
@click.option("--model", default="", help="Board model.")
@click.option("--manufacturer", default="", help="Board manufacturer.")
@click.option("--socket", default="Other", show_default=True, help="CPU socket.")
@click.option("--chipset", default="", help="Chipset label.")
@click.option("--ram-type", default="Other", show_default=True, help="Memory type.")
@click.option("--ram-slots", required=True, type=int, help="Number of RAM slots.")
@click.option("--pci-slots", required=True, type=int, help="Number of PCI slots.")
@click.option("--ram-used", default=0, show_default=True, type=int,
              help="RAM slots in use.")
@click.option("--pci-used", default=0, show_default=True, type=int,
              help="PCI slots in use.")
def board_check(
    machine_name: str,
    part_id: str | None,
    model: str,
    manufacturer: str,
    socket: str,
    chipset: str,
    ram_type: str,
    ram_slots: int,
    pci_slots: int,
    ram_used: int,
    pci_used: int,
) -> None:
    """Check that a board's slot usage fits its capacity."""
    repo = machine_repository()
    spec = BoardSpec(
        ram_slots=ram_slots,
        pci_slots=pci_slots,
        socket=socket,
        ram_type=ram_type,
        chipset=chipset,
        model=model,
        manufacturer=manufacturer,
        part_id=part_id,
    )

    try:
        board = board_from_spec(spec)
        machine = CreateMachineHandler(repo).handle(machine_name)
        InstallPartHandler(repo).handle(machine.name, board)
        SetSlotUsageHandler(repo).handle(
            machine.name, str(board.id), ram=ram_used, pci=pci_used
        )
        dto = ShowMachineHandler(repo).handle(machine.name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Machine: {dto.name}")
    click.echo(f"  Socket:   {board.socket.value}")
    click.echo(f"  RAM type: {board.ram_type.value}")
    click.echo("")
    click.echo(f"{'ID':<34} {'Kind':<12} {'Model':<20} {'RAM':>6} {'PCI':>6}")
    click.echo("-" * 82)
    for line in dto.parts:
        click.echo(
            f"{line.part_id:<34} {line.kind:<12} {line.model:<20} "
            f"{line.ram:>6} {line.pci:>6}"
        )
