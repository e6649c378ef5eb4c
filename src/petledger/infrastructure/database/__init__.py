"""SQLite database engine and schema via SQLAlchemy Core."""

from petledger.infrastructure.database.engine import (
    create_db_engine,
    init_database,
    read_connection,
)
from petledger.infrastructure.database.schema import (
    inventory,
    ledger_events,
    ledger_meta,
    loans,
    metadata,
    profiles,
)

__all__ = [
    "create_db_engine",
    "init_database",
    "inventory",
    "ledger_events",
    "ledger_meta",
    "loans",
    "metadata",
    "profiles",
    "read_connection",
]
