"""Command: borrow one animal."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from petledger.commands._base import ANIMAL_CHOICE, GENDER_CHOICE, LedgerCommand

if TYPE_CHECKING:
    from petledger.commands._context import AppContext


@click.command(
    cls=LedgerCommand,
    examples="""\
  petledger -u alice borrow --age 25 --gender male dog
  petledger -u beth borrow --age 45 --gender female cat
  petledger --json -u carol borrow --age 30 --gender female rabbit""",
)
@click.argument("animal", type=ANIMAL_CHOICE)
@click.option("--age", type=click.IntRange(min=0), required=True, help="Borrower age.")
@click.option("--gender", type=GENDER_CHOICE, required=True, help="Borrower gender.")
@click.pass_obj
def borrow(app: AppContext, animal: str, age: int, gender: str) -> None:
    """Borrow one ANIMAL.

    The first successful borrow binds --age and --gender to the caller;
    later borrows must repeat them exactly.
    """
    from petledger.services.lending import LendingService

    app.emit(LendingService(app.ledger).borrow(app.caller, age, gender, animal))
