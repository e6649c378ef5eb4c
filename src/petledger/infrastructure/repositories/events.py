"""Append-only notification log (Added / Borrowed / Returned).

Each row is also the delivery record for the plugin hook it maps to. The
notification itself is immutable; only ``delivery``, ``attempts``,
``error`` and ``delivered`` move, and only forward:

    pending → delivered
    pending → failed → ... → delivered | dead_letter
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Any

from sqlalchemy import insert, select, update

from petledger.infrastructure.database.schema import ledger_events

if TYPE_CHECKING:
    from sqlalchemy import Connection, Row

    from petledger.domain.types import AnimalType


class EventKind(StrEnum):
    ADDED = "added"
    BORROWED = "borrowed"
    RETURNED = "returned"


class Delivery(StrEnum):
    PENDING = "pending"
    DELIVERED = "delivered"
    FAILED = "failed"
    DEAD_LETTER = "dead_letter"


RETRYABLE = (Delivery.PENDING, Delivery.FAILED)

# LIMIT is bound as a signed 64-bit integer.
_MAX_LIMIT = 2**63 - 1


def _as_dict(row: Row[Any]) -> dict[str, Any]:
    event: dict[str, Any] = {
        "seq": row.id,
        "kind": row.kind,
        "animal": row.animal,
        "created": row.created,
    }
    if row.count is not None:
        event["count"] = row.count
    if row.identity is not None:
        event["identity"] = row.identity
    return event


class EventLogRepository:
    """Appends to and reads the ``ledger_events`` table."""

    def __init__(self, conn: Connection) -> None:
        self._conn = conn

    def append(
        self,
        kind: EventKind,
        animal: AnimalType,
        *,
        created: str,
        count: int | None = None,
        identity: str | None = None,
    ) -> int:
        """Record one notification. Returns its sequence number."""
        result = self._conn.execute(
            insert(ledger_events).values(
                kind=str(kind),
                animal=str(animal),
                count=count,
                identity=identity,
                created=created,
            )
        )
        assert result.inserted_primary_key is not None
        return int(result.inserted_primary_key[0])

    def get(self, seq: int) -> dict[str, Any] | None:
        row = self._conn.execute(select(ledger_events).where(ledger_events.c.id == seq)).first()
        return _as_dict(row) if row is not None else None

    def recent(self, *, limit: int = 50, kind: EventKind | None = None) -> list[dict[str, Any]]:
        """Latest *limit* notifications, returned in emission order."""
        stmt = (
            select(ledger_events)
            .order_by(ledger_events.c.id.desc())
            .limit(min(limit, _MAX_LIMIT))
        )
        if kind is not None:
            stmt = stmt.where(ledger_events.c.kind == str(kind))
        rows = self._conn.execute(stmt).all()
        return [_as_dict(row) for row in reversed(rows)]

    # ------------------------------------------------------------------
    # Delivery tracking
    # ------------------------------------------------------------------

    def undelivered(self) -> list[int]:
        """Sequence numbers still owed to plugins, oldest first."""
        return list(
            self._conn.execute(
                select(ledger_events.c.id)
                .where(ledger_events.c.delivery.in_([str(d) for d in RETRYABLE]))
                .order_by(ledger_events.c.id)
            ).scalars()
        )

    def delivery(self, seq: int) -> Delivery:
        status = self._conn.execute(
            select(ledger_events.c.delivery).where(ledger_events.c.id == seq)
        ).scalar_one()
        return Delivery(status)

    def mark_delivered(self, seq: int, *, at: str) -> None:
        self._conn.execute(
            update(ledger_events)
            .where(ledger_events.c.id == seq)
            .values(delivery=str(Delivery.DELIVERED), delivered=at, error=None)
        )

    def mark_failed(self, seq: int, error: str, *, max_attempts: int, at: str) -> Delivery:
        """Count a failed attempt. Returns ``FAILED``, or ``DEAD_LETTER`` once exhausted."""
        attempts = (
            self._conn.execute(
                select(ledger_events.c.attempts).where(ledger_events.c.id == seq)
            ).scalar_one()
            + 1
        )
        status = Delivery.DEAD_LETTER if attempts >= max_attempts else Delivery.FAILED
        self._conn.execute(
            update(ledger_events)
            .where(ledger_events.c.id == seq)
            .values(
                delivery=str(status),
                attempts=attempts,
                error=error,
                delivered=at if status is Delivery.DEAD_LETTER else None,
            )
        )
        return status
