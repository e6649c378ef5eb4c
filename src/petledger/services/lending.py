"""LendingService — the borrow/return state machine.

Borrow pipeline, checks in this order (first failure wins):

    INVALID_ANIMAL → INVALID_AGE → OUT_OF_STOCK → ALREADY_BORROWING
    → PROFILE_MISMATCH → INELIGIBLE_ANIMAL → COMMIT → NOTIFY

Return pipeline:

    NOTHING_BORROWED → COMMIT → NOTIFY

Every check and mutation runs inside one ledger transaction. A rejection
raises out of the block, so nothing written before it (e.g. a profile bound
just before the eligibility check fails) survives.
"""

from __future__ import annotations

import logging

from petledger.domain import capabilities
from petledger.domain.errors import InvalidAnimalError, LedgerError
from petledger.domain.types import AnimalType, Gender
from petledger.infrastructure.repositories.events import EventKind
from petledger.services._coerce import check_age, coerce_animal, coerce_gender
from petledger.services._helpers import now_iso
from petledger.services.base import BaseService
from petledger.services.result import ServiceResult

logger = logging.getLogger(__name__)


class LendingService(BaseService):
    """Borrowing and returning animals on behalf of a caller identity."""

    def borrow(
        self,
        caller: str | None,
        age: int,
        gender: Gender | str,
        animal: AnimalType | str,
    ) -> ServiceResult:
        """Lend one *animal* to *caller*, binding (age, gender) on first use."""
        op = "borrow"
        resolved = self._resolve_caller(op, caller)
        if isinstance(resolved, ServiceResult):
            return resolved
        identity = resolved
        warnings: list[str] = []

        try:
            wanted = coerce_animal(animal)
            if wanted.is_sentinel:
                raise InvalidAnimalError(
                    "cannot borrow the 'none' animal type", animal=str(wanted)
                )
            check_age(age)
            gender_t = coerce_gender(gender)
            if gender_t is None:
                return self._failed(op, "INVALID_GENDER", f"unknown gender: {gender!r}")

            with self._ledger.transaction() as txn:
                txn.inventory.require_available(wanted)
                txn.loans.require_idle(identity)

                now = now_iso()
                profile_created = txn.profiles.bind_or_check(identity, age, gender_t, today=now)
                capabilities.validate(age, gender_t, wanted)

                remaining = txn.inventory.decrement(wanted)
                txn.loans.set_loan(identity, wanted, today=now)
                seq = txn.events.append(EventKind.BORROWED, wanted, created=now, identity=identity)
        except LedgerError as exc:
            return self._rejected(op, exc)

        logger.info("%s borrowed a %s (%d left)", identity, wanted, remaining)
        self._publish(seq, warnings)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "identity": identity,
                "animal": str(wanted),
                "age": age,
                "gender": str(gender_t),
                "available": remaining,
                "profile_created": profile_created,
                "seq": seq,
            },
            warnings=warnings,
        )

    def return_animal(self, caller: str | None) -> ServiceResult:
        """Give back whatever *caller* is currently borrowing."""
        op = "return"
        resolved = self._resolve_caller(op, caller)
        if isinstance(resolved, ServiceResult):
            return resolved
        identity = resolved
        warnings: list[str] = []

        try:
            with self._ledger.transaction() as txn:
                returned = txn.loans.clear_loan(identity)
                available = txn.inventory.increment(returned)
                seq = txn.events.append(
                    EventKind.RETURNED, returned, created=now_iso(), identity=identity
                )
        except LedgerError as exc:
            return self._rejected(op, exc)

        logger.info("%s returned a %s (%d available)", identity, returned, available)
        self._publish(seq, warnings)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "identity": identity,
                "animal": str(returned),
                "available": available,
                "seq": seq,
            },
            warnings=warnings,
        )
