"""InitService — create a ledger and record its administrator.

The administrator is fixed at creation: ``ledger_meta.admin`` is written
once and every later ``add`` is checked against it.
"""

from __future__ import annotations

import logging
from pathlib import Path

from petledger.config.discovery import CONFIG_FILENAME, render_config
from petledger.config.settings import LedgerSettings
from petledger.domain.identity import normalize_identity
from petledger.infrastructure.ledger import Ledger
from petledger.infrastructure.repositories.meta import ADMIN_KEY, CREATED_KEY, NAME_KEY
from petledger.services._helpers import now_iso
from petledger.services.base import BaseService
from petledger.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class InitService(BaseService):
    """Ledger creation. Used without an existing Ledger, via :meth:`init_ledger`."""

    @staticmethod
    def init_ledger(
        path: Path,
        *,
        name: str,
        admin: str,
        sync: bool = True,
    ) -> ServiceResult:
        """Create the ledger at *path* with *admin* as its administrator.

        Writes ``petledger.toml`` (unless one exists), creates the database,
        and records name, admin and creation time. Fails with
        ``ALREADY_INITIALIZED`` if *path* already has an administrator.
        """
        op = "init"
        admin_key = normalize_identity(admin)
        if admin_key is None:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code="NO_CALLER", message="Administrator identity is empty"),
            )

        path.mkdir(parents=True, exist_ok=True)
        settings = LedgerSettings.from_cli(ledger_root=path)
        ledger = Ledger(settings)
        try:
            with ledger.transaction() as txn:
                existing = txn.meta.admin
                if existing is not None:
                    return ServiceResult(
                        ok=False,
                        op=op,
                        error=ServiceError(
                            code="ALREADY_INITIALIZED",
                            message=f"Ledger at {path} already has administrator {existing}",
                            detail={"admin": existing},
                        ),
                    )
                txn.meta.record(ADMIN_KEY, admin_key)
                txn.meta.record(NAME_KEY, name)
                txn.meta.record(CREATED_KEY, now_iso())

            config_file = path / CONFIG_FILENAME
            if not config_file.exists():
                config_file.write_text(render_config(name, admin_key), encoding="utf-8")

            warnings: list[str] = []
            ledger.init_event_bus(sync=sync)
            InitService(ledger)._announce(
                "post_init", warnings, ledger_name=name, admin=admin_key
            )
        finally:
            ledger.close()

        logger.info("initialized ledger %s at %s (admin %s)", name, path, admin_key)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "name": name,
                "admin": admin_key,
                "path": str(path),
                "config": str(config_file),
            },
            warnings=warnings,
        )
