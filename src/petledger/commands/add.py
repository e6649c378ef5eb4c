"""Command: stock animals (administrator only)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from petledger.commands._base import ANIMAL_CHOICE, LedgerCommand

if TYPE_CHECKING:
    from petledger.commands._context import AppContext


@click.command(
    cls=LedgerCommand,
    examples="""\
  petledger --caller shopkeeper add dog 3
  PETLEDGER_CALLER=shopkeeper petledger add parrot 1
  petledger --json -u shopkeeper add fish 10""",
)
@click.argument("animal", type=ANIMAL_CHOICE)
@click.argument("count", type=click.IntRange(min=0))
@click.pass_obj
def add(app: AppContext, animal: str, count: int) -> None:
    """Add COUNT animals of type ANIMAL to the inventory."""
    from petledger.services.inventory import InventoryService

    app.emit(InventoryService(app.ledger).add(app.caller, animal, count))
