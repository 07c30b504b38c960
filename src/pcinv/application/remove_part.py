"""Application service: Remove Part use case."""

from __future__ import annotations

import logging

from pcinv.domain.exceptions import EntityNotFoundError, PartNotFoundError
from pcinv.domain.model.part import Part
from pcinv.domain.model.value_objects import PartId
from pcinv.domain.repository.machine_repository import MachineRepository

logger = logging.getLogger(__name__)


class RemovePartHandler:

    def __init__(self, machine_repo: MachineRepository) -> None:
        self._machine_repo = machine_repo

    def handle(self, machine_name: str, part_id: str) -> Part:
        """Uninstall a part and return it.

        Other parts are left as they are — removing a board does not
        reset anything that was counted against it.
        """
        machine = self._machine_repo.get_by_name(machine_name)
        if machine is None:
            raise EntityNotFoundError(f"Machine not found: '{machine_name}'")

        try:
            part = machine.remove_part(PartId(part_id))
        except PartNotFoundError:
            logger.debug("No part %s to remove from %r", part_id, machine.name)
            raise

        self._machine_repo.save(machine)
        logger.info("Removed %s from %r", part_id, machine.name)
        return part
