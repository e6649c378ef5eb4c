"""Shared pytest fixtures and test helpers for petledger tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from petledger.config.logging import LOGGER_NAME
from petledger.config.settings import LedgerSettings
from petledger.infrastructure.database.engine import init_database
from petledger.infrastructure.ledger import Ledger
from petledger.infrastructure.repositories.meta import ADMIN_KEY

ADMIN = "keeper"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep PETLEDGER_* variables from the developer's shell out of tests."""
    for var in ("PETLEDGER_CALLER", "PETLEDGER_CONFIG", "PETLEDGER_LEDGER_ROOT"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Drop the handler a CLI run bound to its captured stderr."""
    yield
    ledger_logger = logging.getLogger(LOGGER_NAME)
    ledger_logger.handlers.clear()
    ledger_logger.propagate = True
    ledger_logger.setLevel(logging.NOTSET)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine(tmp_path: Path) -> Iterator[Engine]:
    """Initialized SQLite engine with all tables created."""
    engine = init_database(tmp_path)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def ledger_root(tmp_path: Path) -> Path:
    """Temporary ledger directory."""
    return tmp_path


@pytest.fixture
def ledger(ledger_root: Path) -> Iterator[Ledger]:
    """Ledger on a temp directory with ``ADMIN`` recorded as administrator.

    No event bus: services skip plugin dispatch.
    """
    settings = LedgerSettings.from_cli(ledger_root=ledger_root)
    led = Ledger(settings)
    with led.transaction() as txn:
        txn.meta.record(ADMIN_KEY, ADMIN)
    try:
        yield led
    finally:
        led.close()


@pytest.fixture
def _isolated_ledger(ledger_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp ledger root so the CLI uses an isolated ledger.

    Use via ``@pytest.mark.usefixtures("_isolated_ledger")`` on command test
    classes.
    """
    monkeypatch.chdir(ledger_root)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def stock(ledger: Ledger, animal: str, count: int) -> dict[str, Any]:
    """Add animals as the administrator, asserting success."""
    from petledger.services.inventory import InventoryService

    result = InventoryService(ledger).add(ADMIN, animal, count)
    assert result.ok, result.error
    return result.data


def available(ledger: Ledger, animal: str) -> int:
    from petledger.services.inventory import InventoryService

    result = InventoryService(ledger).available(animal)
    assert result.ok, result.error
    return int(result.data["available"])
