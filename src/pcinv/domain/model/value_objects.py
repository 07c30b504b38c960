"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from pcinv.domain.exceptions import ValidationError


@dataclass(frozen=True)
class PartId:
    """Opaque identifier of a physical part.

    Assigned once when the part is described and never changed; it is the
    only key a machine uses to find, compare and remove parts.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError(
                f"Part id must be a string, got {type(self.value).__name__}"
            )
        if not self.value.strip():
            raise ValidationError("Part id cannot be blank")

    def __str__(self) -> str:
        return self.value

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def generate() -> PartId:
        """Create a fresh random id."""
        return PartId(uuid.uuid4().hex)

    @staticmethod
    def of(value: PartId | str) -> PartId:
        """Accept either an existing PartId or its plain string form."""
        if isinstance(value, PartId):
            return value
        return PartId(value)
