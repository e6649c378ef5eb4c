"""Command: retry plugin notifications that were not delivered."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from petledger.commands._base import LedgerCommand

if TYPE_CHECKING:
    from petledger.commands._context import AppContext


@click.command(
    cls=LedgerCommand,
    examples="""\
  petledger redeliver
  petledger --json redeliver""",
)
@click.pass_obj
def redeliver(app: AppContext) -> None:
    """Retry pending and failed plugin notifications, oldest first."""
    from petledger.services.notifications import NotificationService

    app.emit(NotificationService(app.ledger).redeliver())
