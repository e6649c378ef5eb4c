"""BaseService — shared plumbing for all petledger services.

Every service receives a :class:`Ledger` at construction time and owns its
transaction boundaries via ``self._ledger.transaction()``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from petledger.domain.identity import normalize_identity
from petledger.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from petledger.domain.errors import LedgerError
    from petledger.infrastructure.ledger import Ledger

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class LendingService(BaseService):
            def borrow(self, caller: str, ...) -> ServiceResult:
                with self._ledger.transaction() as txn:
                    ...
    """

    def __init__(self, ledger: Ledger) -> None:
        self._ledger = ledger

    @staticmethod
    def _rejected(op: str, exc: LedgerError) -> ServiceResult:
        """Convert a rolled-back ledger rejection into a failed result."""
        logger.debug("%s rejected: %s (%s)", op, exc.code, exc.message)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=exc.code, message=exc.message, detail=exc.detail),
        )

    @staticmethod
    def _failed(op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )

    def _resolve_caller(self, op: str, caller: str | None) -> str | ServiceResult:
        """Return the identity key for *caller*, or a NO_CALLER failure."""
        identity = normalize_identity(caller)
        if identity is None:
            return self._failed(
                op,
                "NO_CALLER",
                "No caller identity given (use --caller or PETLEDGER_CALLER)",
            )
        return identity

    def _publish(self, seq: int, warnings: list[str]) -> None:
        """Hand committed notification *seq* to plugins. No-op without an event bus.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        bus = self._ledger.event_bus
        if bus is None:
            return
        try:
            bus.publish(seq)
        except Exception:
            logger.debug("Delivery of event %d failed", seq, exc_info=True)
            warnings.append(f"Plugin delivery failed for event {seq}")

    def _announce(self, hook_name: str, warnings: list[str], **kwargs: Any) -> None:
        bus = self._ledger.event_bus
        if bus is None:
            return
        try:
            bus.announce(hook_name, **kwargs)
        except Exception:
            logger.debug("%s hook failed", hook_name, exc_info=True)
            warnings.append(f"Plugin hook {hook_name} failed")
