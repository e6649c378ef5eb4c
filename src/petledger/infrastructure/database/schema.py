"""SQLAlchemy Core table definitions for the petledger database.

One table per ledger sub-table (inventory, profiles, loans), a key/value
table for ledger-wide facts such as the administrator identity, and the
append-only notification log, which also tracks delivery to plugins.
"""

from __future__ import annotations

from sqlalchemy import (
    CheckConstraint,
    Column,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
)

metadata = MetaData()

ledger_meta = Table(
    "ledger_meta",
    metadata,
    Column("key", Text, primary_key=True),
    Column("value", Text, nullable=False),
)

inventory = Table(
    "inventory",
    metadata,
    Column("animal", Text, primary_key=True),
    Column("available", Integer, nullable=False, default=0, server_default="0"),
    CheckConstraint("available >= 0", name="ck_inventory_available_non_negative"),
)

profiles = Table(
    "profiles",
    metadata,
    Column("identity", Text, primary_key=True),
    Column("age", Integer, nullable=False),
    Column("gender", Text, nullable=False),
    Column("created", Text, nullable=False),
)

loans = Table(
    "loans",
    metadata,
    Column("identity", Text, primary_key=True),
    Column("animal", Text, nullable=False),
    Column("borrowed", Text, nullable=False),
)

# Notifications (Added / Borrowed / Returned), written inside the same
# transaction as the state change they describe. Row id order is commit order.
# The notification columns never change after insert; the delivery columns
# record hand-off to plugin hooks (pending, delivered, failed, dead_letter).
ledger_events = Table(
    "ledger_events",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("kind", Text, nullable=False),
    Column("animal", Text, nullable=False),
    Column("count", Integer),  # Added only
    Column("identity", Text),
    Column("created", Text, nullable=False),
    Column("delivery", Text, nullable=False, default="pending", server_default="pending"),
    Column("attempts", Integer, nullable=False, default=0, server_default="0"),
    Column("error", Text),
    Column("delivered", Text),
)

Index("ix_ledger_events_kind", ledger_events.c.kind)
Index("ix_ledger_events_delivery", ledger_events.c.delivery)
