"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pcinv.infrastructure.persistence.in_memory_machine_repository import (
    InMemoryMachineRepository,
)


def machine_repository() -> InMemoryMachineRepository:
    # Nothing is persisted: each command works on its own fresh store.
    return InMemoryMachineRepository()
