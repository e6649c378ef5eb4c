"""Human-readable output for ServiceResult, drawn with Rich.

Each op has its own renderer in ``_OP_RENDERERS``; ops without one print
their data as indented key/value lines.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from petledger.output.console import create_console, get_output, style_for_event

if TYPE_CHECKING:
    from rich.console import Console

    from petledger.services.result import ServiceResult


# ── Entry points ──────────────────────────────────────────────────────


def render_result(
    result: ServiceResult, *, verbose: bool = False, width: int | None = None
) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console(width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """One-line output for ``--quiet``: the bare value where there is one."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "available":
        return str(result.data.get("available", 0))
    if result.op == "eligible":
        return " ".join(result.data.get("animals", []))
    return f"OK: {result.op}"


# ── Building blocks ───────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="ledger.ok")
    op = Text(f"  {result.op}", style="ledger.op")
    console.print(label, op, sep="")


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="ledger.key")
    if key in ("identity", "admin", "caller"):
        v = Text(str(value), style="ledger.identity")
    elif key in ("available", "count", "total"):
        v = Text(str(value), style="ledger.count")
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


# ── Failures ──────────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="ledger.error")
    op = Text(f"  {result.op}", style="ledger.op")
    code = Text(f" [{err.code}]" if err else "", style="ledger.key")
    console.print(label, op, code, Text(" — "), msg, sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Ledger transitions ────────────────────────────────────────────────


def _render_mutation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render add / borrow / return / init results."""
    _status_line(console, result)
    keys = ("identity", "animal", "count", "available", "name", "admin", "path")
    for key in keys:
        if key in result.data:
            _field(console, key, result.data[key])
    if result.data.get("profile_created"):
        profile = f"bound age={result.data['age']} gender={result.data['gender']}"
        _field(console, "profile", profile)
    if verbose and "seq" in result.data:
        _field(console, "seq", result.data["seq"])


# ── Views ─────────────────────────────────────────────────────────────


def _render_available(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, str(result.data.get("animal", "?")), result.data.get("available", 0))


def _render_inventory(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("Animal")
    table.add_column("Available", justify="right")
    for item in result.data.get("items", []):
        count = int(item.get("available", 0))
        styled = Text(str(count), style="ledger.count" if count else "ledger.empty")
        table.add_row(str(item.get("animal", "")), styled)
    console.print(table)
    console.print(f"\n{result.data.get('total', 0)} animals in stock")


def _render_loans(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("Identity", style="ledger.identity", no_wrap=True)
    table.add_column("Animal")
    table.add_column("Borrowed", style="dim")
    for item in items:
        table.add_row(str(item["identity"]), str(item["animal"]), str(item["borrowed"]))
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} outstanding loans")


def _render_events(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Event")
    table.add_column("Animal")
    table.add_column("Count", justify="right")
    table.add_column("Identity", style="ledger.identity")
    if verbose:
        table.add_column("Created", style="dim")

    for item in items:
        kind = str(item.get("kind", ""))
        row: list[Any] = [
            str(item.get("seq", "")),
            Text(kind, style=style_for_event(kind)),
            str(item.get("animal", "")),
            str(item.get("count", "")),
            str(item.get("identity", "")),
        ]
        if verbose:
            row.append(str(item.get("created", "")))
        table.add_row(*row)
    console.print(table)


def _render_redeliver(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    items = result.data.get("items", [])
    if not items:
        console.print("Nothing owed to plugins")
        return
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Event")
    table.add_column("Delivery")
    for item in items:
        kind = str(item["kind"])
        table.add_row(str(item["seq"]), Text(kind, style=style_for_event(kind)), item["delivery"])
    console.print(table)
    console.print(f"\n{result.data.get('delivered', 0)} of {len(items)} delivered")


def _render_eligible(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "age", result.data.get("age"))
    _field(console, "gender", result.data.get("gender"))
    animals = result.data.get("animals", [])
    _field(console, "may borrow", ", ".join(animals) if animals else "(nothing)")
    if verbose:
        _field(console, "mask", f"{result.data.get('mask', 0):#08b}")


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback: status line plus every data field."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Any] = {
    # Mutations
    "init": _render_mutation,
    "add": _render_mutation,
    "borrow": _render_mutation,
    "return": _render_mutation,
    # Reads
    "available": _render_available,
    "inventory": _render_inventory,
    "loans": _render_loans,
    "events": _render_events,
    "eligible": _render_eligible,
    "redeliver": _render_redeliver,
    "status": _render_generic,
    "whoami": _render_generic,
}
