"""Operation-specific Rich renderers for ServiceResult.

Each renderer draws onto the buffered Console supplied by
:func:`render_to_text`; the collected text is returned to the caller.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.table import Table
from rich.text import Text

from friendgraph.output.console import render_to_text

if TYPE_CHECKING:
    from rich.console import Console

    from friendgraph.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """

    def draw(console: Console) -> None:
        if not result.ok:
            _render_error(result, console, verbose=verbose)
            return
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
        if verbose:
            _render_meta(console, result)

    return render_to_text(draw)


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: names only."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if result.op == "chain":
        return "\n".join(data.get("names", []))
    if result.op == "groups":
        return "\n".join(",".join(g.get("members", [])) for g in data.get("groups", []))
    if result.op == "connectors":
        return "\n".join(item["name"] for item in data.get("items", []))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="fg.ok")
    op = Text(f"  {result.op}", style="fg.op")
    console.print(label, op)


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="fg.key")
    if key in ("source", "target", "name"):
        v = Text(str(value), style="fg.name")
    elif key == "school":
        v = Text(str(value), style="fg.school")
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {name}"
    annotations = span_data.get("annotations") or {}
    if annotations:
        line += f"  ({', '.join(f'{k}={v}' for k, v in annotations.items())})"
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="fg.error")
    op = Text(f"  {result.op}", style="fg.op")
    console.print(label, op, Text(" — "), Text(msg), sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Analysis renderers ────────────────────────────────────────────────


def _render_chain(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a shortest chain as ``a → b → c``."""
    names = result.data.get("names", [])
    console.print(" → ".join(f"[fg.name]{escape(n)}[/fg.name]" for n in names))
    console.print(f"\nChain length: {result.data.get('length', max(len(names) - 1, 0))}")


def _render_groups(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render school groups, one block per group."""
    school = result.data.get("school", "")
    groups = result.data.get("groups", [])
    console.print(
        f"[bold]{result.data.get('count', len(groups))} groups[/bold] "
        f"at [fg.school]{escape(school)}[/fg.school]"
    )
    for group in groups:
        index = group.get("index", "?")
        console.print(f"\n[bold]Group {index}[/bold] ({group.get('size', 0)} members)")
        for member in group.get("members", []):
            console.print(f"  [fg.name]{escape(member)}[/fg.name]")


def _render_connectors(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    """Render connectors as a table."""
    items = result.data.get("items", [])
    if not items:
        console.print("No connectors found.")
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Name", style="fg.name", no_wrap=True)
    table.add_column("School", style="fg.school")
    table.add_column("Friends", style="fg.count", justify="right")
    for item in items:
        table.add_row(
            escape(str(item.get("name", ""))),
            escape(str(item.get("school", ""))) or "-",
            str(item.get("degree", "")),
        )
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} connectors")


def _render_summary(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render graph statistics followed by a school table."""
    _status_line(console, result)
    for key in (
        "people",
        "friendships",
        "components",
        "largest_component",
        "isolated",
        "density",
    ):
        if key in result.data:
            _field(console, key, result.data[key])

    schools = result.data.get("schools", [])
    if schools:
        console.print()
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("School", style="fg.school")
        table.add_column("Members", style="fg.count", justify="right")
        for entry in schools:
            table.add_row(escape(str(entry.get("school", ""))), str(entry.get("members", 0)))
        console.print(table)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "chain": _render_chain,
    "groups": _render_groups,
    "connectors": _render_connectors,
    "summary": _render_summary,
}
