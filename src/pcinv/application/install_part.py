"""Application service: Install Part use case."""

from __future__ import annotations

import logging

from pcinv.application.dto import BoardSpec
from pcinv.domain.exceptions import (
    DuplicateIdentityError,
    EntityNotFoundError,
    PartAlreadyInstalledError,
)
from pcinv.domain.model.hardware import CPUSocket, RAMType
from pcinv.domain.model.metadata import PartMetadata
from pcinv.domain.model.motherboard import Motherboard
from pcinv.domain.model.part import Part, kind_of
from pcinv.domain.repository.machine_repository import MachineRepository

logger = logging.getLogger(__name__)


def board_from_spec(spec: BoardSpec) -> Motherboard:
    """Build a Motherboard from loosely-typed catalog input."""
    metadata = PartMetadata(
        model=spec.model,
        manufacturer=spec.manufacturer,
        price=spec.price,
        part_id=spec.part_id,
    )
    return Motherboard(
        metadata=metadata,
        socket=CPUSocket.parse(spec.socket),
        chipset=spec.chipset,
        ram_type=RAMType.parse(spec.ram_type),
        ram_slots=spec.ram_slots,
        pci_slots=spec.pci_slots,
    )


class InstallPartHandler:

    def __init__(self, machine_repo: MachineRepository) -> None:
        self._machine_repo = machine_repo

    def handle(self, machine_name: str, part: Part) -> None:
        """Install *part* into the named machine.

        The machine refuses a part whose id is already installed, or a
        part that already sits in another machine.
        """
        kind = kind_of(part)

        machine = self._machine_repo.get_by_name(machine_name)
        if machine is None:
            raise EntityNotFoundError(f"Machine not found: '{machine_name}'")

        try:
            machine.add_part(part)
        except (DuplicateIdentityError, PartAlreadyInstalledError) as exc:
            logger.debug("Rejected part %s for %r: %s", part.id, machine.name, exc)
            raise

        self._machine_repo.save(machine)
        logger.info(
            "Installed %s %s into %r", kind.value, part.id, machine.name
        )
