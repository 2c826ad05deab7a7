"""ID-indexed entity collections backing the ``data/*.json`` arrays.

RPG Maker stores each database table as a JSON array whose position doubles as
the record identifier. Index ``0`` is always ``null`` and any other ``null``
marks an unused identifier. :class:`EntityCollection` keeps those slots as an
explicit ``Present(record) | ABSENT`` variant so the append and resize rules
are checked in one place instead of by every tool.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, MutableMapping, Sequence, Union

from .errors import ReadFailure, ValidationRejection

Record = MutableMapping[str, Any]


class _AbsentType:
    """Marker for an identifier without a record."""

    __slots__ = ()

    def __repr__(self) -> str:  # pragma: no cover - trivial representation
        return "ABSENT"


ABSENT = _AbsentType()


@dataclass(frozen=True)
class Present:
    """Slot holding a populated record."""

    record: Record


Slot = Union[Present, _AbsentType]


class EntityCollection:
    """Ordered slots of a single database file."""

    def __init__(self, slots: Sequence[Slot] | None = None) -> None:
        resolved = list(slots) if slots else [ABSENT]
        if resolved[0] is not ABSENT:
            raise ValueError("slot 0 of a collection must be absent")
        self._slots: list[Slot] = resolved

    @classmethod
    def from_payload(cls, payload: Any, *, name: str = "collection") -> "EntityCollection":
        """Build a collection from the parsed JSON array of a database file."""

        if not isinstance(payload, list):
            raise ReadFailure(f"{name} must be a JSON array.")

        slots: list[Slot] = []
        for index, entry in enumerate(payload):
            if entry is None:
                slots.append(ABSENT)
            elif isinstance(entry, MutableMapping):
                if index == 0:
                    raise ReadFailure(f"{name} must keep index 0 empty.")
                slots.append(Present(entry))
            else:
                raise ReadFailure(f"{name} entry {index} must be an object or null.")
        return cls(slots)

    def to_payload(self) -> list[Any]:
        return [slot.record if isinstance(slot, Present) else None for slot in self._slots]

    def __len__(self) -> int:
        return len(self._slots)

    @property
    def limit(self) -> int:
        """Highest identifier the collection can currently hold."""

        return len(self._slots) - 1

    def get(self, entity_id: int) -> Record | None:
        if entity_id < 1 or entity_id >= len(self._slots):
            return None
        slot = self._slots[entity_id]
        return slot.record if isinstance(slot, Present) else None

    def require(self, entity_id: int, *, kind: str) -> Record:
        """Return the record at ``entity_id`` or reject the request."""

        record = self.get(entity_id)
        if record is None:
            raise ValidationRejection(f"{kind} ID {entity_id} not found")
        return record

    def populated(self) -> Iterator[Record]:
        """Yield populated records in identifier order."""

        for slot in self._slots:
            if isinstance(slot, Present):
                yield slot.record

    def last_populated_id(self) -> int:
        """Return the identifier of the last populated slot, or ``0``."""

        for index in range(len(self._slots) - 1, 0, -1):
            if isinstance(self._slots[index], Present):
                return index
        return 0

    def append(self, record: Record) -> int:
        """Append ``record`` and return its identifier (the previous length)."""

        new_id = len(self._slots)
        record["id"] = new_id
        self._slots.append(Present(record))
        return new_id

    def place(self, entity_id: int, record: Record) -> None:
        """Store ``record`` at ``entity_id``, growing with absent slots as needed."""

        if entity_id < 1:
            raise ValidationRejection(f"ID {entity_id} is reserved")
        if self.get(entity_id) is not None:
            raise ValidationRejection(f"ID {entity_id} is already in use")
        while len(self._slots) <= entity_id:
            self._slots.append(ABSENT)
        record["id"] = entity_id
        self._slots[entity_id] = Present(record)

    def resize(self, limit: int) -> None:
        """Grow or shrink the collection so that ``limit`` is the highest ID.

        Shrinking may only drop trailing absent slots; the collection is left
        untouched when a populated record lies beyond ``limit``.
        """

        if limit < 1:
            raise ValidationRejection("limit must be at least 1")

        target_length = limit + 1
        if target_length >= len(self._slots):
            self._slots.extend([ABSENT] * (target_length - len(self._slots)))
            return

        last = self.last_populated_id()
        if last > limit:
            raise ValidationRejection(f"Entry at ID {last} has data.")
        del self._slots[target_length:]


__all__ = ["ABSENT", "EntityCollection", "Present", "Record", "Slot"]
