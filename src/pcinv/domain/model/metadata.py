"""Descriptive data shared by every kind of part."""

from __future__ import annotations

from enum import Enum

from pcinv.domain.exceptions import ValidationError
from pcinv.domain.model.value_objects import PartId


class PartKind(Enum):
    MOTHERBOARD = "MOTHERBOARD"


class PartMetadata:
    """Identity plus catalog description of a single physical part.

    ``model``, ``manufacturer`` and ``price`` are plain attributes the
    caller may edit.  ``id`` is fixed at construction: pass one in, or
    let a random one be generated.
    """

    def __init__(
        self,
        model: str,
        manufacturer: str,
        price: int = 0,
        part_id: PartId | str | None = None,
    ) -> None:
        if isinstance(price, bool) or not isinstance(price, int):
            raise ValidationError(
                f"Price must be an integer, got {type(price).__name__}"
            )
        if price < 0:
            raise ValidationError(f"Price cannot be negative, got {price}")

        self._id = PartId.generate() if part_id is None else PartId.of(part_id)
        self.model = model
        self.manufacturer = manufacturer
        self.price = price

    @property
    def id(self) -> PartId:
        return self._id

    def __repr__(self) -> str:
        return (
            f"PartMetadata(id={self._id.value!r}, model={self.model!r}, "
            f"manufacturer={self.manufacturer!r}, price={self.price})"
        )
