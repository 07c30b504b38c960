"""Machine aggregate — a computer and the parts installed in it.

The Machine is an aggregate root that exclusively owns its parts.
All identity invariants are enforced here.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pcinv.domain.exceptions import (
    DuplicateIdentityError,
    PartAlreadyInstalledError,
    PartNotFoundError,
    ValidationError,
)
from pcinv.domain.model.part import Part, is_part
from pcinv.domain.model.value_objects import PartId


class Machine:
    """Aggregate root for a machine build.

    Invariants:
    - every installed part has a distinct ``PartId``
    - a part object is installed in at most one machine at a time
    - a part is either installed or not; there is no intermediate state

    Use ``Machine.create()`` for new machines — it validates the name.
    Removing a part never touches the counters of any other part.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._parts: dict[PartId, Part] = {}

    # --- Factory (used for NEW machines only) ---------------------------------

    @staticmethod
    def create(name: str) -> Machine:
        if not name or not name.strip():
            raise ValidationError("Machine name is required")
        return Machine(name.strip())

    # --- Queries --------------------------------------------------------------

    @property
    def parts(self) -> Mapping[PartId, Part]:
        """Read-only view of every installed part, keyed by id."""
        return MappingProxyType(self._parts)

    def get_part(self, part_id: PartId | str) -> Part:
        part_id = PartId.of(part_id)
        try:
            return self._parts[part_id]
        except KeyError:
            raise PartNotFoundError(part_id) from None

    def __contains__(self, part_id: object) -> bool:
        if isinstance(part_id, str):
            if not part_id.strip():
                return False
            part_id = PartId(part_id)
        return part_id in self._parts

    def __len__(self) -> int:
        return len(self._parts)

    # --- Mutations ------------------------------------------------------------

    def add_part(self, part: Part) -> None:
        """Install *part*, taking ownership of it.

        Raises TypeError for anything that is not a catalog part,
        DuplicateIdentityError if a part with the same id is already
        installed here, and PartAlreadyInstalledError if the part belongs
        to another machine.  The machine is unchanged on every error.
        """
        if not is_part(part):
            raise TypeError(f"Not a catalog part: {type(part).__name__}")
        if part.id in self._parts:
            raise DuplicateIdentityError(part.id)
        if part.installed_in is not None:
            raise PartAlreadyInstalledError(part.id, part.installed_in.name)
        self._parts[part.id] = part
        part.installed_in = self

    def remove_part(self, part_id: PartId | str) -> Part:
        """Uninstall the part with *part_id* and hand it back to the caller.

        Raises PartNotFoundError if nothing with that id is installed,
        including when it was already removed.
        """
        part_id = PartId.of(part_id)
        if part_id not in self._parts:
            raise PartNotFoundError(part_id)
        part = self._parts.pop(part_id)
        part.installed_in = None
        return part

    def __repr__(self) -> str:
        return f"Machine(name={self.name!r}, parts={len(self._parts)})"
