"""Delivery of committed ledger notifications to plugin hooks.

The ``ledger_events`` row written inside a transition is the delivery
record: :meth:`EventBus.publish` takes only its sequence number, rebuilds
the hook arguments from the row, and marks the row ``delivered``,
``failed`` or ``dead_letter``. Nothing is lost if the process exits before
a hook runs; :meth:`EventBus.drain` picks up whatever is still owed.

INVARIANT: Plugin failures are warnings, never errors.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import TYPE_CHECKING, Any

from petledger.infrastructure.database.engine import read_connection
from petledger.infrastructure.repositories.events import Delivery, EventKind, EventLogRepository
from petledger.services._helpers import now_iso

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from petledger.plugins.manager import PluginManager

logger = logging.getLogger(__name__)

# Hook name and the notification fields passed to it, per event kind.
HOOKS: dict[EventKind, tuple[str, tuple[str, ...]]] = {
    EventKind.ADDED: ("post_add", ("seq", "animal", "count")),
    EventKind.BORROWED: ("post_borrow", ("seq", "identity", "animal")),
    EventKind.RETURNED: ("post_return", ("seq", "identity", "animal")),
}


class EventBus:
    """Hands notifications to pluggy hooks, inline or on a worker pool.

    Parameters:
        engine: Ledger database engine.
        plugins: Loaded plugin manager.
        sync: Deliver inline instead of on the pool (``--sync``).
        max_retries: Failed attempts before a notification is ``dead_letter``.
        max_workers: Pool size for background delivery.
    """

    def __init__(
        self,
        engine: Engine,
        plugins: PluginManager,
        *,
        sync: bool = False,
        max_retries: int = 3,
        max_workers: int = 2,
    ) -> None:
        self._engine = engine
        self._plugins = plugins
        self._max_retries = max_retries
        self._pool: ThreadPoolExecutor | None = (
            None if sync else ThreadPoolExecutor(max_workers=max_workers)
        )
        self._inflight: list[Future[tuple[EventKind, Delivery]]] = []

    def publish(self, seq: int) -> None:
        """Deliver notification *seq*. Call only after its transaction committed."""
        if self._pool is None:
            self._deliver(seq)
        else:
            self._inflight.append(self._pool.submit(self._deliver, seq))

    def announce(self, hook_name: str, **kwargs: Any) -> None:
        """Call a hook with no ledger notification behind it (``post_init``).

        Not recorded and not retried; a plugin exception propagates.
        """
        getattr(self._plugins.hook, hook_name)(**kwargs)

    def drain(self) -> list[dict[str, Any]]:
        """Retry every pending or failed notification inline, oldest first.

        Returns ``{seq, kind, delivery}`` for each one attempted.
        """
        self._settle()
        with read_connection(self._engine) as conn:
            owed = EventLogRepository(conn).undelivered()

        attempted: list[dict[str, Any]] = []
        for seq in owed:
            kind, status = self._deliver(seq)
            attempted.append({"seq": seq, "kind": str(kind), "delivery": str(status)})
        return attempted

    def shutdown(self) -> None:
        """Wait for background deliveries and stop the pool."""
        self._settle()
        if self._pool is not None:
            self._pool.shutdown(wait=True)
            self._pool = None

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _deliver(self, seq: int) -> tuple[EventKind, Delivery]:
        with read_connection(self._engine) as conn:
            event = EventLogRepository(conn).get(seq)
        if event is None:
            raise LookupError(f"no ledger event with seq {seq}")

        kind = EventKind(event["kind"])
        hook_name, fields = HOOKS[kind]
        kwargs = {name: event.get(name) for name in fields}

        error: str | None = None
        try:
            getattr(self._plugins.hook, hook_name)(**kwargs)
        except Exception as exc:
            error = str(exc) or exc.__class__.__name__

        # Hooks run outside the write transaction; only the outcome is recorded.
        with self._engine.begin() as conn:
            log = EventLogRepository(conn)
            if error is None:
                log.mark_delivered(seq, at=now_iso())
                return kind, Delivery.DELIVERED
            status = log.mark_failed(seq, error, max_attempts=self._max_retries, at=now_iso())

        logger.warning("%s for event %d failed (%s): %s", hook_name, seq, status, error)
        return kind, status

    def _settle(self) -> None:
        for future in self._inflight:
            try:
                future.result(timeout=30)
            except Exception:
                logger.debug("Background delivery did not finish cleanly", exc_info=True)
        self._inflight.clear()
