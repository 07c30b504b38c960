"""Application service: Create Machine use case."""

from __future__ import annotations

import logging

from pcinv.domain.exceptions import ValidationError
from pcinv.domain.model.machine import Machine
from pcinv.domain.repository.machine_repository import MachineRepository

logger = logging.getLogger(__name__)


class CreateMachineHandler:

    def __init__(self, machine_repo: MachineRepository) -> None:
        self._machine_repo = machine_repo

    def handle(self, name: str) -> Machine:
        """Register a new, empty machine."""
        machine = Machine.create(name)

        if self._machine_repo.get_by_name(machine.name) is not None:
            logger.debug("Rejected duplicate machine name %r", machine.name)
            raise ValidationError(f"Machine '{machine.name}' already exists")

        self._machine_repo.save(machine)
        logger.info("Created machine %r", machine.name)
        return machine
