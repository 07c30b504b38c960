"""Motherboard part — the slotted board of a machine.

A board has a fixed number of RAM and expansion (PCI) slots and keeps
count of how many of each are in use.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from pcinv.domain.exceptions import CapacityExceededError, ValidationError
from pcinv.domain.model.hardware import CPUSocket, RAMType
from pcinv.domain.model.metadata import PartKind, PartMetadata
from pcinv.domain.model.value_objects import PartId

if TYPE_CHECKING:
    from pcinv.domain.model.machine import Machine


class Motherboard:
    """A mainboard with bounded RAM and PCI slot counters.

    Invariants:
    - ``0 <= used_ram_slots <= ram_slots``
    - ``0 <= used_pci_slots <= pci_slots``

    Capacities are set at construction and cannot change; a bigger board
    is a different part.  Usage only moves through the ``set_used_*``
    methods.
    """

    kind: ClassVar[PartKind] = PartKind.MOTHERBOARD

    def __init__(
        self,
        metadata: PartMetadata,
        socket: CPUSocket | str,
        chipset: str,
        ram_type: RAMType | str,
        ram_slots: int,
        pci_slots: int,
    ) -> None:
        _check_count("RAM slot capacity", ram_slots)
        _check_count("PCI slot capacity", pci_slots)

        self.metadata = metadata
        self.socket = _coerce(CPUSocket, socket)
        self.chipset = chipset
        self.ram_type = _coerce(RAMType, ram_type)
        self._ram_slots = ram_slots
        self._pci_slots = pci_slots
        self._used_ram_slots = 0
        self._used_pci_slots = 0

        # Set and cleared by Machine.add_part / remove_part only.
        self.installed_in: Machine | None = None

    @property
    def id(self) -> PartId:
        return self.metadata.id

    # --- Capacity -------------------------------------------------------------

    @property
    def ram_slots(self) -> int:
        return self._ram_slots

    @property
    def pci_slots(self) -> int:
        return self._pci_slots

    # --- Usage ----------------------------------------------------------------

    @property
    def used_ram_slots(self) -> int:
        return self._used_ram_slots

    @property
    def used_pci_slots(self) -> int:
        return self._used_pci_slots

    @property
    def free_ram_slots(self) -> int:
        return self._ram_slots - self._used_ram_slots

    @property
    def free_pci_slots(self) -> int:
        return self._pci_slots - self._used_pci_slots

    def set_used_ram_slots(self, count: int) -> None:
        """Record how many RAM slots are occupied.

        Filling every slot is allowed.  Raises CapacityExceededError if
        *count* is larger than the board's RAM slot count; the current
        usage is kept in that case.
        """
        _check_usage("RAM", count, self._ram_slots)
        self._used_ram_slots = count

    def set_used_pci_slots(self, count: int) -> None:
        """Record how many expansion slots are occupied.

        Same contract as ``set_used_ram_slots``, against ``pci_slots``.
        """
        _check_usage("PCI", count, self._pci_slots)
        self._used_pci_slots = count

    def __repr__(self) -> str:
        return (
            f"Motherboard(id={self.id.value!r}, socket={self.socket.value}, "
            f"chipset={self.chipset!r}, ram_type={self.ram_type.value}, "
            f"ram={self._used_ram_slots}/{self._ram_slots}, "
            f"pci={self._used_pci_slots}/{self._pci_slots})"
        )


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------


def _check_count(label: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"{label} must be an integer, got {type(value).__name__}"
        )
    if value < 0:
        raise ValidationError(f"{label} cannot be negative, got {value}")


def _coerce(taxonomy, value):
    if isinstance(value, taxonomy):
        return value
    if isinstance(value, str):
        return taxonomy.parse(value)
    raise ValidationError(
        f"Expected a {taxonomy.__name__} or its name, got {type(value).__name__}"
    )


def _check_usage(resource: str, count: int, capacity: int) -> None:
    _check_count(f"Used {resource} slots", count)
    if count > capacity:
        raise CapacityExceededError(resource, count, capacity)
