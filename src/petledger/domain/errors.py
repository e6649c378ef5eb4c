"""Ledger rejection errors.

Every rejection of an add/borrow/return call is one of these. Each carries
a stable ``code`` that the service layer copies into ``ServiceError.code``
and an optional ``detail`` mapping for structured output.
"""

from __future__ import annotations

from typing import Any, ClassVar


class LedgerError(Exception):
    """Base class for all ledger rejections."""

    code: ClassVar[str] = "LEDGER_ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


class UnauthorizedError(LedgerError):
    code = "UNAUTHORIZED"


class InvalidAnimalError(LedgerError):
    code = "INVALID_ANIMAL"


class InvalidAgeError(LedgerError):
    code = "INVALID_AGE"


class InvalidCountError(LedgerError):
    code = "INVALID_COUNT"


class OutOfStockError(LedgerError):
    code = "OUT_OF_STOCK"


class AlreadyBorrowingError(LedgerError):
    code = "ALREADY_BORROWING"


class ProfileMismatchError(LedgerError):
    code = "PROFILE_MISMATCH"


class IneligibleAnimalError(LedgerError):
    code = "INELIGIBLE_ANIMAL"


class NothingBorrowedError(LedgerError):
    code = "NOTHING_BORROWED"
