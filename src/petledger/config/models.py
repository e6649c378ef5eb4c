"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, petledger.toml only contains
overrides. A fresh ledger needs only [ledger] name and admin.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class LedgerConfig(BaseModel):
    """[ledger] section.

    ``admin`` mirrors the identity recorded in the database at init; the
    database copy is the one ``add`` is checked against.
    """

    model_config = {"frozen": True}

    name: str = "petledger"
    admin: str | None = None


class EventsConfig(BaseModel):
    """[events] section."""

    model_config = {"frozen": True}

    max_retries: int = Field(default=3, ge=1)
    max_workers: int = Field(default=2, ge=1)


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = Field(default=100, ge=40)
