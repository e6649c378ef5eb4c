"""Command: ledger initialization (named init_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from petledger.commands._base import LedgerCommand

if TYPE_CHECKING:
    from petledger.commands._context import AppContext

_INIT_EXAMPLES = """\
  petledger init --admin shopkeeper
  petledger init /srv/petshop --name petshop --admin shopkeeper
  petledger --no-interact init . --admin ops"""


@click.command("init", cls=LedgerCommand, examples=_INIT_EXAMPLES)
@click.argument("path", required=False, default=".")
@click.option("--name", default=None, help="Ledger name.")
@click.option(
    "--admin",
    default=None,
    help="Administrator identity (defaults to --caller). Fixed once set.",
)
@click.pass_obj
def init_cmd(app: AppContext, path: str, name: str | None, admin: str | None) -> None:
    """Initialize a new ledger and record its administrator."""
    ledger_path = Path(path).resolve()
    interactive = not app.settings.no_interact

    if name is None:
        name = (
            click.prompt("Ledger name", default=ledger_path.name)
            if interactive
            else ledger_path.name
        )

    if admin is None:
        admin = app.caller
    if admin is None:
        if not interactive:
            raise click.UsageError("--admin (or --caller) is required with --no-interact")
        admin = click.prompt("Administrator identity")

    from petledger.services.init import InitService

    app.emit(InitService.init_ledger(ledger_path, name=name, admin=admin, sync=app.settings.sync))
