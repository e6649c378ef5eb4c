"""Ledger — the owned aggregate of all lending state.

The Ledger is the single dependency injected into every service. It owns
the database engine and the plugin event bus. The :meth:`transaction`
context manager is the only way to read-then-mutate ledger state, and it
makes every transition all-or-nothing:

- **Serialization**: a process-wide lock is held for the whole block, and
  the SQLite transaction opens with ``BEGIN IMMEDIATE`` (see
  :mod:`petledger.infrastructure.database.engine`).
- **Atomicity**: native SQLAlchemy ``engine.begin()``; any exception raised
  inside the block rolls back every write made through the transaction.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from petledger.infrastructure.database.engine import DATA_DIR, init_database, read_connection
from petledger.infrastructure.repositories.events import EventLogRepository
from petledger.infrastructure.repositories.inventory import InventoryRepository
from petledger.infrastructure.repositories.loans import LoanRepository
from petledger.infrastructure.repositories.meta import MetaRepository
from petledger.infrastructure.repositories.profiles import ProfileRepository

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy import Connection
    from sqlalchemy.engine import Engine

    from petledger.config.settings import LedgerSettings

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# LedgerTransaction — yielded to callers within transaction()
# ---------------------------------------------------------------------------


@dataclass
class LedgerTransaction:
    """Active transaction with one repository per ledger sub-table.

    All repositories share ``conn``, so their writes commit or roll back
    together.
    """

    conn: Connection
    inventory: InventoryRepository = field(init=False)
    profiles: ProfileRepository = field(init=False)
    loans: LoanRepository = field(init=False)
    events: EventLogRepository = field(init=False)
    meta: MetaRepository = field(init=False)

    def __post_init__(self) -> None:
        self.inventory = InventoryRepository(self.conn)
        self.profiles = ProfileRepository(self.conn)
        self.loans = LoanRepository(self.conn)
        self.events = EventLogRepository(self.conn)
        self.meta = MetaRepository(self.conn)


# ---------------------------------------------------------------------------
# Ledger — the aggregate
# ---------------------------------------------------------------------------


class Ledger:
    """Owns the database and event bus for one ledger directory.

    Constructed lazily by the CLI's AppContext from :class:`LedgerSettings`.
    Services receive the Ledger via their :class:`BaseService` constructor.
    """

    def __init__(self, settings: LedgerSettings) -> None:
        self._settings = settings
        self._engine: Engine = init_database(self.root)
        self._lock = threading.Lock()
        self._event_bus: Any | None = None

    @property
    def root(self) -> Path:
        """The ledger root directory."""
        return self._settings.ledger_root

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def settings(self) -> LedgerSettings:
        return self._settings

    @property
    def event_bus(self) -> Any | None:
        """Set by :meth:`init_event_bus`; None means services skip plugins."""
        return self._event_bus

    def init_event_bus(self, *, sync: bool = False) -> None:
        """Load plugins and start delivering notifications to them.

        Plugins come from the ``petledger.plugins`` entry-point group and
        from ``.petledger/plugins/*.py`` under the ledger root.
        """
        from petledger.plugins.event_bus import EventBus
        from petledger.plugins.manager import PluginManager

        pm = PluginManager()
        pm.discover_and_load(local_dir=self.root / DATA_DIR / "plugins")

        events_cfg = self._settings.events
        self._event_bus = EventBus(
            self._engine,
            pm,
            sync=sync,
            max_retries=events_cfg.max_retries,
            max_workers=events_cfg.max_workers,
        )

    @contextmanager
    def transaction(self) -> Iterator[LedgerTransaction]:
        """Serialized, all-or-nothing transaction over the whole ledger.

        Commits when the block exits normally. Any exception, including a
        :class:`~petledger.domain.errors.LedgerError` raised by a
        repository check, rolls back every write and propagates.

        Usage::

            with ledger.transaction() as txn:
                txn.inventory.decrement(animal)
                txn.loans.set_loan(identity, animal, today=today)
        """
        with self._lock, self._engine.begin() as conn:
            yield LedgerTransaction(conn=conn)

    @contextmanager
    def reader(self) -> Iterator[LedgerTransaction]:
        """Snapshot view. Takes neither the process lock nor the SQLite write lock."""
        with read_connection(self._engine) as conn:
            yield LedgerTransaction(conn=conn)

    def close(self) -> None:
        """Flush the event bus and release database connections."""
        if self._event_bus is not None:
            self._event_bus.shutdown()
            self._event_bus = None
        self._engine.dispose()
