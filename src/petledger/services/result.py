"""ServiceResult and ServiceError — the contract every service returns.

INVARIANT: All service-layer methods return ServiceResult, never raise a
LedgerError. The CLI and any other front end consume this type only.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation was rejected.

    ``code`` is stable (e.g. ``"OUT_OF_STOCK"``); ``message`` is for humans.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one ledger operation.

    Attributes:
        ok: Whether the operation committed (or, for reads, succeeded).
        op: Operation name (``"add"``, ``"borrow"``, ``"return"``, ...).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues, such as a plugin hook failing.
        error: Rejection details if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
