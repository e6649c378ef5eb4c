"""Command: return the borrowed animal (named return_cmd; ``return`` is a keyword)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from petledger.commands._base import LedgerCommand

if TYPE_CHECKING:
    from petledger.commands._context import AppContext


@click.command(
    "return",
    cls=LedgerCommand,
    examples="""\
  petledger -u alice return
  petledger --json -u alice return""",
)
@click.pass_obj
def return_cmd(app: AppContext) -> None:
    """Return the animal the caller is currently borrowing."""
    from petledger.services.lending import LendingService

    app.emit(LendingService(app.ledger).return_animal(app.caller))
