"""Process-local implementation of MachineRepository.

Machines live in a dict for the lifetime of the process; nothing is
written anywhere.
"""

from __future__ import annotations

from pcinv.domain.model.machine import Machine
from pcinv.domain.repository.machine_repository import MachineRepository


class InMemoryMachineRepository(MachineRepository):

    def __init__(self, machines: list[Machine] | None = None) -> None:
        self._store: dict[str, Machine] = {}
        for machine in machines or []:
            self.save(machine)

    # --- MachineRepository interface ------------------------------------------

    def get_by_name(self, name: str) -> Machine | None:
        return self._store.get(self._key(name))

    def list_all(self) -> list[Machine]:
        return list(self._store.values())

    def save(self, machine: Machine) -> None:
        self._store[self._key(machine.name)] = machine

    # --- Helpers --------------------------------------------------------------

    @staticmethod
    def _key(name: str) -> str:
        return name.strip().lower()
