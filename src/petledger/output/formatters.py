"""Output mode dispatch for ServiceResult.

Three modes: JSON (``--json``) for machines, one-line quiet (``-q``), and
Rich-rendered human output (default).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

if TYPE_CHECKING:
    from petledger.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output flags resolved from LedgerSettings."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    width: int | None = None


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display according to *settings*."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)

    from petledger.output.renderers import render_quiet, render_result

    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose, width=settings.width)
