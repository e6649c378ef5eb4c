"""Inventory ledger — available count per animal type.

The caller owns the transaction: pass a ``Connection`` from within
``Ledger.transaction()`` so count changes commit or roll back together with
the rest of the transition.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select, update

from petledger.domain.errors import InvalidAnimalError, OutOfStockError
from petledger.domain.types import AnimalType
from petledger.infrastructure.database.schema import inventory

if TYPE_CHECKING:
    from sqlalchemy import Connection


class InventoryRepository:
    """Reads and mutates the ``inventory`` table."""

    def __init__(self, conn: Connection) -> None:
        self._conn = conn

    def available(self, animal: AnimalType) -> int:
        """Current count for *animal*. ``NONE`` is always 0."""
        if animal.is_sentinel:
            return 0
        count = self._conn.execute(
            select(inventory.c.available).where(inventory.c.animal == str(animal))
        ).scalar_one_or_none()
        return int(count or 0)

    def snapshot(self) -> dict[AnimalType, int]:
        """All stockable types and their counts."""
        rows = self._conn.execute(select(inventory.c.animal, inventory.c.available)).all()
        counts = {AnimalType(row.animal): int(row.available) for row in rows}
        return {a: counts.get(a, 0) for a in AnimalType if not a.is_sentinel}

    def add(self, animal: AnimalType, count: int) -> int:
        """Increase the count for *animal* by *count*. Returns the new count.

        Raises:
            InvalidAnimalError: If *animal* is the ``NONE`` sentinel.
        """
        if animal.is_sentinel:
            raise InvalidAnimalError("cannot stock the 'none' animal type", animal=str(animal))
        new_count = self.available(animal) + count
        self._set(animal, new_count)
        return new_count

    def require_available(self, animal: AnimalType) -> int:
        """Return the count for *animal*.

        Raises:
            OutOfStockError: If no *animal* is available.
        """
        current = self.available(animal)
        if current == 0:
            raise OutOfStockError(f"no {animal} available", animal=str(animal))
        return current

    def decrement(self, animal: AnimalType) -> int:
        """Take one *animal* out of stock. Returns the new count.

        Raises:
            OutOfStockError: If no *animal* is available.
        """
        current = self.require_available(animal)
        self._set(animal, current - 1)
        return current - 1

    def increment(self, animal: AnimalType) -> int:
        """Put one *animal* back into stock. Returns the new count."""
        new_count = self.available(animal) + 1
        self._set(animal, new_count)
        return new_count

    def _set(self, animal: AnimalType, count: int) -> None:
        self._conn.execute(
            update(inventory).where(inventory.c.animal == str(animal)).values(available=count)
        )
