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

from labeledname.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from labeledname.services.result import ServiceResult

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
    """Minimal output for ``--quiet``: just the primary string(s)."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if result.op == "render":
        return "\n".join(str(item["identifier"]) for item in data.get("items", []))
    if result.op == "quote":
        return str(data.get("quoted", ""))
    if result.op == "parse":
        return str(data.get("base", ""))
    if "name" in data:
        return str(data["name"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="ln.ok"), Text(f"  {result.op}", style="ln.op"))


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    console.print(Text(f"  {key}: ", style="ln.key"), Text(str(value), style=style), sep="")


def _labels_table(labels: list[dict[str, str]]) -> Table:
    table = Table(show_header=True, header_style="ln.key", box=None, padding=(0, 2))
    table.add_column("#", justify="right")
    table.add_column("key", style="ln.label")
    table.add_column("value")
    for idx, label in enumerate(labels, start=1):
        # repr() keeps significant whitespace visible
        table.add_row(str(idx), Text(repr(label["key"])), Text(repr(label["value"])))
    return table


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="ln.error"),
        Text(f"  {result.op}", style="ln.op"),
        Text(f"— {msg}"),
    )

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v!r}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_build(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    _field(console, "name", result.data["name"], "ln.identifier")
    _field(console, "base", result.data["base"], "ln.base")
    _field(console, "labels", len(result.data["labels"]))


def _render_parse(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    _field(console, "base", result.data["base"], "ln.base")
    labels = result.data["labels"]
    if labels:
        console.print(_labels_table(labels))
    else:
        _field(console, "labels", "(none)")


def _render_render(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    _field(console, "domain", result.data["domain"])
    if "match" in result.data:
        _field(console, "match", result.data["match"])
    for item in result.data["items"]:
        console.print(Text(f"  {item['identifier']}", style="ln.identifier"))


def _render_quote(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    style = "ln.quoted" if result.data["changed"] else ""
    _field(console, "quoted", result.data["quoted"], style)


def _render_generic(result: ServiceResult, console: Console) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            value = json.dumps(value, separators=(",", ":"))
        _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Renderer] = {
    "build": _render_build,
    "parse": _render_parse,
    "render": _render_render,
    "quote": _render_quote,
}
