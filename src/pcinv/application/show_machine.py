"""Application service: Show Machine use case (query)."""

from __future__ import annotations

from pcinv.application.dto import MachineDTO, PartLineDTO
from pcinv.domain.exceptions import EntityNotFoundError
from pcinv.domain.model.motherboard import Motherboard
from pcinv.domain.model.part import Part, kind_of
from pcinv.domain.repository.machine_repository import MachineRepository


class ShowMachineHandler:

    def __init__(self, machine_repo: MachineRepository) -> None:
        self._machine_repo = machine_repo

    def handle(self, machine_name: str) -> MachineDTO:
        machine = self._machine_repo.get_by_name(machine_name)
        if machine is None:
            raise EntityNotFoundError(f"Machine not found: '{machine_name}'")

        return MachineDTO(
            name=machine.name,
            parts=[self._to_line(part) for part in machine.parts.values()],
        )

    @staticmethod
    def _to_line(part: Part) -> PartLineDTO:
        ram = pci = "-"
        if isinstance(part, Motherboard):
            ram = f"{part.used_ram_slots}/{part.ram_slots}"
            pci = f"{part.used_pci_slots}/{part.pci_slots}"
        return PartLineDTO(
            part_id=str(part.id),
            kind=kind_of(part).value,
            model=part.metadata.model,
            manufacturer=part.metadata.manufacturer,
            ram=ram,
            pci=pci,
        )
