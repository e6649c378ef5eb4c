"""The ``petledger`` command: global flags, settings, and subcommands."""

from __future__ import annotations

from typing import Any

import click

from petledger import __version__
from petledger.commands import register_commands
from petledger.commands._context import AppContext
from petledger.config.settings import LedgerSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="petledger")
@click.option("-u", "--caller", help="Who is running the command (env: PETLEDGER_CALLER).")
@click.option("-c", "--config", "config_path", help="Use this petledger.toml.")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the essential value.")
@click.option("-v", "--verbose", is_flag=True, help="Show extra fields and debug logs.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option("--no-interact", is_flag=True, help="Never prompt.")
@click.option("--sync", is_flag=True, help="Run plugin hooks before the command returns.")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: Any) -> None:
    """petledger: animal inventory and lending ledger."""
    app = AppContext(LedgerSettings.from_cli(config_path=config_path, **flags))
    ctx.obj = app
    ctx.call_on_close(app.close)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
