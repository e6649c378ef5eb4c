"""Log output for the CLI: structlog rendering over stdlib ``logging``.

Modules log through ``logging.getLogger(__name__)``; records under the
``petledger`` logger are rendered by structlog to stderr, as console text
or (``--log-json``) one JSON object per line.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "petledger"

# Libraries that only speak up for problems, even with --verbose.
QUIET_LOGGERS = ("sqlalchemy", "pluggy")

_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route ``petledger`` records to stderr. Safe to call more than once.

    Args:
        verbose: Show DEBUG records instead of WARNING and above.
        log_json: Render JSON lines instead of console text.
    """
    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_PRE_CHAIN,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    ledger_logger = logging.getLogger(LOGGER_NAME)
    ledger_logger.handlers = [handler]
    ledger_logger.propagate = False
    ledger_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
