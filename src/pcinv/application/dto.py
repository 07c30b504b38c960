"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BoardSpec:
    """Input: a motherboard as described by a catalog or the user."""

    ram_slots: int
    pci_slots: int
    socket: str = "Other"
    ram_type: str = "Other"
    chipset: str = ""
    model: str = ""
    manufacturer: str = ""
    price: int = 0
    part_id: str | None = None


@dataclass(frozen=True)
class PartLineDTO:
    """Output: a single installed part as displayed to the user."""

    part_id: str
    kind: str
    model: str
    manufacturer: str
    ram: str  # formatted, e.g. "2/4"
    pci: str


@dataclass(frozen=True)
class MachineDTO:
    """Output: a machine and its installed parts."""

    name: str
    parts: list[PartLineDTO]
