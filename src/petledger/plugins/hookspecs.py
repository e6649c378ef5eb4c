"""Pluggy hook specifications for petledger notifications.

One hook per committed ledger notification, plus one for ledger creation.
Hooks run after the transition has committed; they observe, they cannot
veto.
"""

from __future__ import annotations

import pluggy

hookspec = pluggy.HookspecMarker("petledger")


class PetLedgerHookSpec:
    """Hook specifications for the petledger plugin system."""

    @hookspec
    def post_init(self, ledger_name: str, admin: str) -> None:
        """Called after a ledger is initialized."""

    @hookspec
    def post_add(self, seq: int, animal: str, count: int) -> None:
        """Called after the administrator stocks animals (``Added``)."""

    @hookspec
    def post_borrow(self, seq: int, identity: str, animal: str) -> None:
        """Called after an identity borrows an animal (``Borrowed``)."""

    @hookspec
    def post_return(self, seq: int, identity: str, animal: str) -> None:
        """Called after an identity returns its animal (``Returned``)."""
