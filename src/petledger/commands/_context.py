"""AppContext: the object every petledger command receives as ``ctx.obj``.

It owns the settings for the invocation, opens the ledger on demand and
turns a :class:`ServiceResult` into output plus an exit status.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
import structlog

from petledger.config.logging import configure_logging
from petledger.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from petledger.config.settings import LedgerSettings
    from petledger.infrastructure.ledger import Ledger
    from petledger.services.result import ServiceResult


class AppContext:
    """Per-invocation state shared by the root group and its commands.

    Nothing touches the database until :attr:`ledger` is first read, so
    ``--help``, ``--examples`` and ``init`` never open an existing ledger.
    """

    def __init__(self, settings: LedgerSettings) -> None:
        self.settings = settings
        self._ledger: Ledger | None = None

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        structlog.contextvars.clear_contextvars()
        if settings.caller:
            structlog.contextvars.bind_contextvars(caller=settings.caller)

    @property
    def ledger(self) -> Ledger:
        if self._ledger is None:
            from petledger.infrastructure.ledger import Ledger

            self._ledger = Ledger(self.settings)
            self._ledger.init_event_bus(sync=self.settings.sync)
        return self._ledger

    @property
    def caller(self) -> str | None:
        return self.settings.caller

    def close(self) -> None:
        """Wait for plugin deliveries, then release the database."""
        if self._ledger is not None:
            self._ledger.close()
            self._ledger = None

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; a failed result ends the process with status 1.

        Successful output goes to stdout and its warnings to stderr, so piped
        output stays clean. Failures go to stderr.
        """
        output_settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            width=self.settings.output.width,
        )
        text = format_result(result, settings=output_settings)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)

        click.echo(text)
        if not output_settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
