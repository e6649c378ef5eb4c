"""Loan tracker — at most one outstanding animal per identity.

An identity with no row is not borrowing; ``current_loan`` reports that as
``AnimalType.NONE``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import delete, func, insert, select

from petledger.domain.errors import AlreadyBorrowingError, NothingBorrowedError
from petledger.domain.types import AnimalType
from petledger.infrastructure.database.schema import loans

if TYPE_CHECKING:
    from sqlalchemy import Connection


class LoanRepository:
    """Reads and mutates the ``loans`` table."""

    def __init__(self, conn: Connection) -> None:
        self._conn = conn

    def current_loan(self, identity: str) -> AnimalType:
        animal = self._conn.execute(
            select(loans.c.animal).where(loans.c.identity == identity)
        ).scalar_one_or_none()
        return AnimalType(animal) if animal is not None else AnimalType.NONE

    def require_idle(self, identity: str) -> None:
        """Raise :class:`AlreadyBorrowingError` if *identity* holds an animal."""
        current = self.current_loan(identity)
        if not current.is_sentinel:
            raise AlreadyBorrowingError(
                f"{identity} is already borrowing a {current}",
                identity=identity,
                animal=str(current),
            )

    def set_loan(self, identity: str, animal: AnimalType, *, today: str) -> None:
        """Record *animal* as borrowed by *identity*.

        Raises:
            AlreadyBorrowingError: If *identity* already holds an animal.
        """
        self.require_idle(identity)
        self._conn.execute(
            insert(loans).values(identity=identity, animal=str(animal), borrowed=today)
        )

    def clear_loan(self, identity: str) -> AnimalType:
        """Clear *identity*'s loan and return the animal it held.

        Raises:
            NothingBorrowedError: If *identity* holds nothing.
        """
        current = self.current_loan(identity)
        if current.is_sentinel:
            raise NothingBorrowedError(f"{identity} has nothing to return", identity=identity)
        self._conn.execute(delete(loans).where(loans.c.identity == identity))
        return current

    def count_out(self, animal: AnimalType) -> int:
        """Number of *animal* currently on loan."""
        return int(
            self._conn.execute(
                select(func.count()).select_from(loans).where(loans.c.animal == str(animal))
            ).scalar_one()
        )

    def outstanding(self) -> list[dict[str, str]]:
        """Every open loan, oldest first."""
        rows = self._conn.execute(
            select(loans.c.identity, loans.c.animal, loans.c.borrowed).order_by(
                loans.c.borrowed, loans.c.identity
            )
        ).all()
        return [
            {"identity": row.identity, "animal": row.animal, "borrowed": row.borrowed}
            for row in rows
        ]
