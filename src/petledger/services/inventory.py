"""InventoryService — administrator stocking and availability reads."""

from __future__ import annotations

import logging

from petledger.domain.errors import InvalidAnimalError, InvalidCountError, LedgerError
from petledger.domain.types import MAX_STOCK, AnimalType
from petledger.infrastructure.repositories.events import EventKind
from petledger.services._coerce import coerce_animal
from petledger.services._helpers import now_iso
from petledger.services.base import BaseService
from petledger.services.result import ServiceResult

logger = logging.getLogger(__name__)


class InventoryService(BaseService):
    """Stock management. Only the recorded administrator may add."""

    def add(self, caller: str | None, animal: AnimalType | str, count: int) -> ServiceResult:
        """Add *count* animals of type *animal* to the inventory.

        Checks run in order: caller is the administrator, *animal* is not
        ``none``, *count* is not negative. Stock on hand plus stock on loan
        may not exceed :data:`MAX_STOCK`.
        """
        op = "add"
        resolved = self._resolve_caller(op, caller)
        if isinstance(resolved, ServiceResult):
            return resolved
        identity = resolved
        warnings: list[str] = []

        try:
            with self._ledger.transaction() as txn:
                txn.meta.require_admin(identity)
                stocked = coerce_animal(animal)
                if stocked.is_sentinel:
                    raise InvalidAnimalError(
                        "cannot stock the 'none' animal type", animal=str(stocked)
                    )
                if count < 0:
                    raise InvalidCountError(f"count must not be negative: {count}", count=count)
                # Keeps available + on loan <= MAX_STOCK, so every return fits.
                on_loan = txn.loans.count_out(stocked)
                if txn.inventory.available(stocked) + on_loan + count > MAX_STOCK:
                    raise InvalidCountError(
                        f"{stocked} stock would exceed {MAX_STOCK}",
                        count=count,
                        on_loan=on_loan,
                    )
                available = txn.inventory.add(stocked, count)
                seq = txn.events.append(
                    EventKind.ADDED, stocked, created=now_iso(), count=count, identity=identity
                )
        except LedgerError as exc:
            return self._rejected(op, exc)

        logger.info("added %d %s (%d available)", count, stocked, available)
        self._publish(seq, warnings)
        return ServiceResult(
            ok=True,
            op=op,
            data={"animal": str(stocked), "count": count, "available": available, "seq": seq},
            warnings=warnings,
        )

    def available(self, animal: AnimalType | str) -> ServiceResult:
        """Count of *animal* currently on hand (``none`` is always 0)."""
        op = "available"
        try:
            wanted = coerce_animal(animal)
        except LedgerError as exc:
            return self._rejected(op, exc)

        with self._ledger.reader() as view:
            count = view.inventory.available(wanted)
        return ServiceResult(ok=True, op=op, data={"animal": str(wanted), "available": count})

    def inventory(self) -> ServiceResult:
        """Counts for every stockable animal type."""
        with self._ledger.reader() as view:
            counts = view.inventory.snapshot()
        items = [{"animal": str(a), "available": n} for a, n in counts.items()]
        return ServiceResult(
            ok=True,
            op="inventory",
            data={"items": items, "total": sum(counts.values())},
        )
