"""Identity registry — the (age, gender) profile bound on first borrow.

Profiles are write-once: created by :meth:`ProfileRepository.bind_or_check`
and never updated or deleted afterwards.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import insert, select

from petledger.domain.errors import ProfileMismatchError
from petledger.domain.types import Gender, UserProfile
from petledger.infrastructure.database.schema import profiles

if TYPE_CHECKING:
    from sqlalchemy import Connection


class ProfileRepository:
    """Reads and creates rows in the ``profiles`` table."""

    def __init__(self, conn: Connection) -> None:
        self._conn = conn

    def get(self, identity: str) -> UserProfile | None:
        row = self._conn.execute(
            select(profiles.c.age, profiles.c.gender).where(profiles.c.identity == identity)
        ).first()
        if row is None:
            return None
        return UserProfile(age=int(row.age), gender=Gender(row.gender))

    def bind_or_check(self, identity: str, age: int, gender: Gender, *, today: str) -> bool:
        """Bind (age, gender) to *identity*, or check it matches the bound profile.

        Returns True if a new profile was created, False if an existing one
        matched.

        Raises:
            ProfileMismatchError: If a profile exists and either field differs.
        """
        existing = self.get(identity)
        if existing is None:
            self._conn.execute(
                insert(profiles).values(
                    identity=identity,
                    age=age,
                    gender=str(gender),
                    created=today,
                )
            )
            return True

        mismatched = [
            name
            for name, bound, given in (
                ("age", existing.age, age),
                ("gender", existing.gender, gender),
            )
            if bound != given
        ]
        if mismatched:
            raise ProfileMismatchError(
                f"profile mismatch for {identity}: {', '.join(mismatched)} differs "
                f"from the bound profile",
                identity=identity,
                fields=mismatched,
            )
        return False
