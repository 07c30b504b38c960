"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pcinv.domain.model.value_objects import PartId


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class CapacityExceededError(ValidationError):
    """A slot usage update would exceed the part's physical capacity."""

    def __init__(self, resource: str, requested: int, capacity: int) -> None:
        self.resource = resource
        self.requested = requested
        self.capacity = capacity
        super().__init__(
            f"Cannot use {requested} {resource} slots "
            f"— the board only has {capacity}"
        )


class DuplicateIdentityError(ValidationError):
    """A part with the same id is already installed."""

    def __init__(self, part_id: PartId) -> None:
        self.part_id = part_id
        super().__init__(f"Part '{part_id}' is already installed")


class PartAlreadyInstalledError(ValidationError):
    """The part object already belongs to another machine."""

    def __init__(self, part_id: PartId, machine_name: str) -> None:
        self.part_id = part_id
        self.machine_name = machine_name
        super().__init__(
            f"Part '{part_id}' is already installed in '{machine_name}'"
        )


class PartNotFoundError(EntityNotFoundError):
    """No part with the given id is installed."""

    def __init__(self, part_id: PartId) -> None:
        self.part_id = part_id
        super().__init__(f"Part '{part_id}' not found")
