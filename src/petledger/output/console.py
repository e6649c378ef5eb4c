"""Rich Console factory and theme for petledger output.

Consoles render into a StringIO buffer so renderers keep a
``render_result() -> str`` contract. In non-TTY environments (tests,
pipes) Rich disables color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

LEDGER_THEME = Theme(
    {
        "ledger.ok": "bold green",
        "ledger.error": "bold red",
        "ledger.op": "bold cyan",
        "ledger.key": "dim",
        "ledger.identity": "bold blue",
        "ledger.count": "magenta",
        "ledger.empty": "dim red",
        "ledger.event.added": "green",
        "ledger.event.borrowed": "yellow",
        "ledger.event.returned": "cyan",
    }
)

_EVENT_STYLES: dict[str, str] = {
    "added": "ledger.event.added",
    "borrowed": "ledger.event.borrowed",
    "returned": "ledger.event.returned",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=LEDGER_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_event(kind: str) -> str:
    return _EVENT_STYLES.get(kind, "")
