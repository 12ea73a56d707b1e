"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from objtasks.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from objtasks.services.result import ServiceResult

Renderer = Callable[["ServiceResult", "Console"], None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()
    if result.ok:
        _OP_RENDERERS.get(result.op, _render_generic)(result, console)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render the bare payload for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if "selector" in result.data:
        return str(result.data["selector"])
    if "can_sell" in result.data:
        return "yes" if result.data["can_sell"] else "no"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="obj.ok"), Text(f"  {result.op}", style="obj.op"))


def _field(console: Console, key: str, value: Any) -> None:
    if isinstance(value, (dict, list)):
        value = json.dumps(value, separators=(",", ":"))
    console.print(Text(f"  {key}: ", style="obj.key"), Text(str(value)), sep="", soft_wrap=True)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="obj.error"),
        Text(f"  {result.op}", style="obj.op"),
        Text(" — "),
        Text(msg),
        sep="",
        soft_wrap=True,
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Op renderers ──────────────────────────────────────────────────────


def _render_selector(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    # Selector text is shown verbatim; markup and wrapping would alter it.
    console.print(
        Text("  selector: ", style="obj.key"),
        Text(result.data["selector"], style="obj.selector"),
        sep="",
        soft_wrap=True,
    )
    _field(console, "compounds", result.data.get("compounds", 1))


def _render_tickets(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    can_sell = bool(result.data["can_sell"])
    verdict = Text("yes", style="obj.yes") if can_sell else Text("no", style="obj.no")
    console.print(Text("  can_sell: ", style="obj.key"), verdict, sep="")
    _field(console, "customers", result.data.get("customers", 0))


def _render_cities(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Country")
    table.add_column("City")
    for item in result.data.get("items", []):
        table.add_row(Text(item["country"]), Text(item["city"]))
    console.print(table)


def _render_groups(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for country, cities in result.data.get("groups", {}).items():
        console.print(Text(f"  {country}: ", style="obj.key"), Text(", ".join(cities)), sep="")


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Renderer] = {
    "build_selector": _render_selector,
    "sell_tickets": _render_tickets,
    "sort_cities": _render_cities,
    "group_cities": _render_groups,
}
