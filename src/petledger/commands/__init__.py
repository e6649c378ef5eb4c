"""Subcommand modules for petledger.

Provides register_commands(), which uses deferred imports to keep
``petledger --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the query group and the standalone ledger commands."""
    from petledger.commands.query import query

    cli.add_command(query)

    from petledger.commands.add import add
    from petledger.commands.available import available
    from petledger.commands.borrow import borrow
    from petledger.commands.init_cmd import init_cmd
    from petledger.commands.redeliver import redeliver
    from petledger.commands.return_cmd import return_cmd

    cli.add_command(init_cmd)
    cli.add_command(add)
    cli.add_command(borrow)
    cli.add_command(return_cmd)
    cli.add_command(available)
    cli.add_command(redeliver)
