"""Abstract repository for the Machine aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pcinv.domain.model.machine import Machine


class MachineRepository(ABC):

    @abstractmethod
    def get_by_name(self, name: str) -> Machine | None:
        """Return the machine with this name (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[Machine]:
        """Return every machine."""

    @abstractmethod
    def save(self, machine: Machine) -> None:
        """Store a new or updated machine."""
