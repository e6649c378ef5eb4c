"""QueryService — read-only views of profiles, loans, events, and eligibility."""

from __future__ import annotations

from petledger.domain import capabilities
from petledger.domain.errors import LedgerError
from petledger.domain.identity import normalize_identity
from petledger.domain.types import Gender
from petledger.infrastructure.repositories.events import EventKind
from petledger.services._coerce import check_age, coerce_gender
from petledger.services.base import BaseService
from petledger.services.result import ServiceResult


class QueryService(BaseService):
    """Read-only views. Each call reads one snapshot through ``Ledger.reader()``."""

    def status(self, identity: str | None) -> ServiceResult:
        """Bound profile and current loan for *identity*."""
        op = "status"
        resolved = self._resolve_caller(op, identity)
        if isinstance(resolved, ServiceResult):
            return resolved

        with self._ledger.reader() as view:
            profile = view.profiles.get(resolved)
            loan = view.loans.current_loan(resolved)

        data: dict[str, object] = {
            "identity": resolved,
            "registered": profile is not None,
            "borrowing": str(loan),
        }
        if profile is not None:
            data["age"] = profile.age
            data["gender"] = str(profile.gender)
        return ServiceResult(ok=True, op=op, data=data)

    def loans(self) -> ServiceResult:
        with self._ledger.reader() as view:
            items = view.loans.outstanding()
        return ServiceResult(ok=True, op="loans", data={"items": items, "count": len(items)})

    def events(self, *, limit: int = 50, kind: EventKind | str | None = None) -> ServiceResult:
        """The latest *limit* notifications, oldest first, optionally of one *kind*."""
        op = "events"
        kind_filter: EventKind | None = None
        if kind is not None:
            try:
                kind_filter = EventKind(str(kind).lower())
            except ValueError:
                return self._failed(op, "INVALID_KIND", f"unknown event kind: {kind!r}")
        if limit < 1:
            return self._failed(op, "INVALID_LIMIT", f"limit must be positive: {limit}")

        with self._ledger.reader() as view:
            items = view.events.recent(limit=limit, kind=kind_filter)
        return ServiceResult(ok=True, op=op, data={"items": items, "count": len(items)})

    def eligible(self, age: int, gender: Gender | str) -> ServiceResult:
        """Which animal types a borrower of (*age*, *gender*) may take."""
        op = "eligible"
        try:
            check_age(age)
        except LedgerError as exc:
            return self._rejected(op, exc)
        gender_t = coerce_gender(gender)
        if gender_t is None:
            return self._failed(op, "INVALID_GENDER", f"unknown gender: {gender!r}")

        animals = capabilities.permitted_animals(gender_t, age)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "age": age,
                "gender": str(gender_t),
                "mask": capabilities.permitted_mask(gender_t, age),
                "animals": [str(a) for a in animals],
            },
        )

    def whoami(self) -> ServiceResult:
        """The configured caller and whether it is the ledger administrator."""
        caller = normalize_identity(self._ledger.settings.caller)
        with self._ledger.reader() as view:
            admin = view.meta.admin
        return ServiceResult(
            ok=True,
            op="whoami",
            data={
                "caller": caller,
                "admin": admin,
                "is_admin": caller is not None and caller == admin,
            },
        )
