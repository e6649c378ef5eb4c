"""Database engine setup for SQLite with WAL mode.

SQLite is the storage host: WAL mode for concurrent reads, ACID
transactions for all-or-nothing ledger transitions. The DB is stored at
{ledger_root}/.petledger/petledger.db.

Write transactions open with ``BEGIN IMMEDIATE`` so the write lock is taken
before the first read. A borrow's checks and its mutations therefore run
as one serialized step, even across processes sharing the file. Connections
from :func:`read_connection` open a plain deferred ``BEGIN`` instead: a WAL
snapshot that never blocks, or is blocked by, a writer.

SQLAlchemy Core (not ORM) is used because petledger is a short-lived
CLI process — no benefit from session management or identity maps.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event, insert, select
from sqlalchemy.engine import Connection, Engine

from petledger.domain.types import STOCKABLE_ANIMALS
from petledger.infrastructure.database.schema import inventory, metadata

DATA_DIR = ".petledger"
DB_FILENAME = "petledger.db"

# Connection execution option marking a snapshot reader.
READ_ONLY = "petledger_read_only"


def create_db_engine(db_path: Path) -> Engine:
    """Create a SQLite engine with WAL mode and immediate transactions."""
    engine = create_engine(f"sqlite:///{db_path}", echo=False)

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
        # Disable pysqlite's implicit BEGIN; _begin emits our own.
        dbapi_conn.isolation_level = None
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _begin(conn: Connection) -> None:
        if conn.get_execution_options().get(READ_ONLY):
            conn.exec_driver_sql("BEGIN")
        else:
            conn.exec_driver_sql("BEGIN IMMEDIATE")

    return engine


@contextmanager
def read_connection(engine: Engine) -> Iterator[Connection]:
    """Connection for reads only. Anything written through it is rolled back."""
    with engine.connect() as conn:
        conn.execution_options(**{READ_ONLY: True})
        yield conn


def init_database(ledger_root: Path) -> Engine:
    """Initialize the petledger database at ``{ledger_root}/.petledger/petledger.db``.

    Creates the ``.petledger/`` directory structure, all tables from
    :data:`schema.metadata`, and seeds one zero-count inventory row per
    stockable animal type.

    Idempotent — safe to call on an existing ledger.

    Returns the engine ready for use.
    """
    data_dir = ledger_root / DATA_DIR
    data_dir.mkdir(parents=True, exist_ok=True)
    (data_dir / "plugins").mkdir(exist_ok=True)

    engine = create_db_engine(data_dir / DB_FILENAME)
    metadata.create_all(engine)
    _seed_inventory(engine)
    return engine


def _seed_inventory(engine: Engine) -> None:
    """Insert a zero-count row for each stockable animal that lacks one."""
    with engine.begin() as conn:
        existing = set(conn.execute(select(inventory.c.animal)).scalars())
        for animal in STOCKABLE_ANIMALS:
            if str(animal) not in existing:
                conn.execute(insert(inventory).values(animal=str(animal), available=0))
