"""NotificationService — catch up on plugin deliveries still owed."""

from __future__ import annotations

import logging

from petledger.infrastructure.repositories.events import Delivery
from petledger.services.base import BaseService
from petledger.services.result import ServiceResult

logger = logging.getLogger(__name__)


class NotificationService(BaseService):
    """Retries ``pending`` and ``failed`` notifications through the event bus."""

    def redeliver(self) -> ServiceResult:
        """Deliver every owed notification once more, oldest first.

        A notification that fails its last allowed attempt becomes
        ``dead_letter`` and is reported as a warning.
        """
        op = "redeliver"
        bus = self._ledger.event_bus
        if bus is None:
            return self._failed(op, "NO_EVENT_BUS", "Plugin delivery is not enabled")

        items = bus.drain()
        delivered = sum(1 for item in items if item["delivery"] == Delivery.DELIVERED)
        warnings = [
            f"Event {item['seq']} gave up after repeated plugin failures"
            for item in items
            if item["delivery"] == Delivery.DEAD_LETTER
        ]
        logger.info("redelivered %d of %d owed notifications", delivered, len(items))
        return ServiceResult(
            ok=True,
            op=op,
            data={"items": items, "count": len(items), "delivered": delivered},
            warnings=warnings,
        )
