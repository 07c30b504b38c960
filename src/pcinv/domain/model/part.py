"""The part catalog — the closed set of part kinds a machine can hold.

``Part`` is a union of concrete part classes.  To add a kind (CPU, GPU,
storage, PSU ...): write its class with a ``metadata`` attribute, an ``id``
property and a ``kind`` class attribute, add a ``PartKind`` member, extend
the ``Part`` union and add a ``case`` to ``kind_of``.  Type checkers flag
any ``match`` over ``Part`` that misses the new kind via ``assert_never``.
"""

from __future__ import annotations

from typing import TypeAlias, assert_never

from pcinv.domain.model.metadata import PartKind, PartMetadata
from pcinv.domain.model.motherboard import Motherboard

Part: TypeAlias = Motherboard

PART_TYPES: tuple[type, ...] = (Motherboard,)


def is_part(obj: object) -> bool:
    return isinstance(obj, PART_TYPES)


def kind_of(part: Part) -> PartKind:
    """Return which catalog variant *part* is."""
    if not is_part(part):
        raise TypeError(f"Not a catalog part: {type(part).__name__}")
    match part:
        case Motherboard():
            return PartKind.MOTHERBOARD
        case _:
            assert_never(part)


__all__ = ["PART_TYPES", "Part", "PartKind", "PartMetadata", "is_part", "kind_of"]
