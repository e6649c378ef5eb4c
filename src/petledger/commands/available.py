"""Command: how many of one animal type are in stock."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from petledger.commands._base import ANIMAL_CHOICE, LedgerCommand

if TYPE_CHECKING:
    from petledger.commands._context import AppContext


@click.command(
    cls=LedgerCommand,
    examples="""\
  petledger available dog
  petledger -q available parrot""",
)
@click.argument("animal", type=ANIMAL_CHOICE)
@click.pass_obj
def available(app: AppContext, animal: str) -> None:
    """Show how many ANIMAL are available to borrow."""
    from petledger.services.inventory import InventoryService

    app.emit(InventoryService(app.ledger).available(animal))
