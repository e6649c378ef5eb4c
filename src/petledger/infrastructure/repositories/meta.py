"""Ledger-wide facts recorded at creation time (name, administrator)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import insert, select

from petledger.domain.errors import UnauthorizedError
from petledger.infrastructure.database.schema import ledger_meta

if TYPE_CHECKING:
    from sqlalchemy import Connection

ADMIN_KEY = "admin"
NAME_KEY = "name"
CREATED_KEY = "created"


class MetaRepository:
    """Key/value access to the ``ledger_meta`` table."""

    def __init__(self, conn: Connection) -> None:
        self._conn = conn

    def get(self, key: str) -> str | None:
        return self._conn.execute(
            select(ledger_meta.c.value).where(ledger_meta.c.key == key)
        ).scalar_one_or_none()

    def record(self, key: str, value: str) -> None:
        """Store *key* once. Existing keys are never overwritten."""
        if self.get(key) is None:
            self._conn.execute(insert(ledger_meta).values(key=key, value=value))

    @property
    def admin(self) -> str | None:
        return self.get(ADMIN_KEY)

    def require_admin(self, caller: str) -> None:
        """Raise :class:`UnauthorizedError` unless *caller* is the administrator."""
        admin = self.admin
        if admin is None or caller != admin:
            raise UnauthorizedError(
                f"{caller} is not the ledger administrator",
                caller=caller,
            )
