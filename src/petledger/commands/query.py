"""Command group: read-only views of the ledger."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from petledger.commands._base import GENDER_CHOICE, LedgerGroup

if TYPE_CHECKING:
    from petledger.commands._context import AppContext

_QUERY_EXAMPLES = """\
  petledger query inventory
  petledger query status alice
  petledger query loans
  petledger query events --kind borrowed --limit 20
  petledger query eligible --age 39 --gender female
  petledger -u alice query whoami"""


@click.group(cls=LedgerGroup, examples=_QUERY_EXAMPLES)
def query() -> None:
    """Inspect inventory, borrowers, and the notification log."""


@query.command(examples="  petledger query inventory\n  petledger --json query inventory")
@click.pass_obj
def inventory(app: AppContext) -> None:
    """Available count for every animal type."""
    from petledger.services.inventory import InventoryService

    app.emit(InventoryService(app.ledger).inventory())


@query.command(examples="  petledger query status alice\n  petledger -u alice query status")
@click.argument("identity", required=False, default=None)
@click.pass_obj
def status(app: AppContext, identity: str | None) -> None:
    """Bound profile and current loan of IDENTITY (default: the caller)."""
    from petledger.services.query import QueryService

    app.emit(QueryService(app.ledger).status(identity or app.caller))


@query.command(examples="  petledger query loans")
@click.pass_obj
def loans(app: AppContext) -> None:
    """Every outstanding loan."""
    from petledger.services.query import QueryService

    app.emit(QueryService(app.ledger).loans())


@query.command(
    examples="""\
  petledger query events
  petledger query events --kind added
  petledger --json query events --limit 5"""
)
@click.option(
    "--kind",
    type=click.Choice(["added", "borrowed", "returned"], case_sensitive=False),
    default=None,
    help="Only this notification kind.",
)
@click.option("--limit", type=click.IntRange(min=1), default=50, help="Max notifications.")
@click.pass_obj
def events(app: AppContext, kind: str | None, limit: int) -> None:
    """Latest Added / Borrowed / Returned notifications, oldest first."""
    from petledger.services.query import QueryService

    app.emit(QueryService(app.ledger).events(limit=limit, kind=kind))


@query.command(examples="  petledger query eligible --age 45 --gender female")
@click.option("--age", type=click.IntRange(min=0), required=True, help="Borrower age.")
@click.option("--gender", type=GENDER_CHOICE, required=True, help="Borrower gender.")
@click.pass_obj
def eligible(app: AppContext, age: int, gender: str) -> None:
    """Animal types a borrower of the given age and gender may take."""
    from petledger.services.query import QueryService

    app.emit(QueryService(app.ledger).eligible(age, gender))


@query.command(examples="  petledger -u alice query whoami")
@click.pass_obj
def whoami(app: AppContext) -> None:
    """The current caller and the ledger administrator."""
    from petledger.services.query import QueryService

    app.emit(QueryService(app.ledger).whoami())
