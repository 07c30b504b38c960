"""Application service: Set Slot Usage use case."""

from __future__ import annotations

import logging

from pcinv.domain.exceptions import EntityNotFoundError, ValidationError
from pcinv.domain.model.motherboard import Motherboard
from pcinv.domain.model.value_objects import PartId
from pcinv.domain.repository.machine_repository import MachineRepository

logger = logging.getLogger(__name__)


class SetSlotUsageHandler:

    def __init__(self, machine_repo: MachineRepository) -> None:
        self._machine_repo = machine_repo

    def handle(
        self,
        machine_name: str,
        part_id: str,
        ram: int | None = None,
        pci: int | None = None,
    ) -> Motherboard:
        """Update the RAM and/or PCI slot usage of an installed board.

        Uses a two-phase approach so a rejected value never leaves the
        board half-updated:
          Phase 1 — apply both values to a scratch board with the same
                    capacities.  Fails fast before any mutation.
          Phase 2 — apply them to the real board and save.
        """
        if ram is None and pci is None:
            raise ValidationError("Specify RAM and/or PCI slot usage")

        machine = self._machine_repo.get_by_name(machine_name)
        if machine is None:
            raise EntityNotFoundError(f"Machine not found: '{machine_name}'")

        part = machine.get_part(PartId(part_id))
        if not isinstance(part, Motherboard):
            raise ValidationError(f"Part '{part_id}' has no slots")

        # Phase 1: validate
        scratch = Motherboard(
            metadata=part.metadata,
            socket=part.socket,
            chipset=part.chipset,
            ram_type=part.ram_type,
            ram_slots=part.ram_slots,
            pci_slots=part.pci_slots,
        )
        try:
            if ram is not None:
                scratch.set_used_ram_slots(ram)
            if pci is not None:
                scratch.set_used_pci_slots(pci)
        except ValidationError as exc:
            logger.debug("Rejected slot usage for %s: %s", part_id, exc)
            raise

        # Phase 2: mutate and persist
        if ram is not None:
            part.set_used_ram_slots(ram)
        if pci is not None:
            part.set_used_pci_slots(pci)
        self._machine_repo.save(machine)

        logger.info(
            "Slot usage of %s in %r is now RAM %d/%d, PCI %d/%d",
            part_id,
            machine.name,
            part.used_ram_slots,
            part.ram_slots,
            part.used_pci_slots,
            part.pci_slots,
        )
        return part
