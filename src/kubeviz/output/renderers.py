"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from kubeviz.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from rich.console import Console

    from kubeviz.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "share_encode":
        return str(result.data.get("url", ""))
    if result.op == "legend":
        return "\n".join(str(item["kind"]) for item in result.data.get("items", []))
    counts = result.data.get("counts")
    if counts and isinstance(counts, dict):
        return "\n".join(f"{kind} {count}" for kind, count in counts.items())

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="kv.ok")
    op = Text(f"  {result.op}", style="kv.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="kv.key")
    if key == "url":
        v = Text(str(value), style="kv.url")
    elif key in ("output", "path"):
        v = Text(str(value), style="kv.path")
    elif key.endswith("_count"):
        v = Text(str(value), style="kv.count")
    else:
        v = Text(str(value))
    console.print(k, v, end="", soft_wrap=True)
    console.print()


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
        line += "  (" + ", ".join(f"{ak}={av}" for ak, av in annotations.items()) + ")"

    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


def _count_table(counts: dict[str, int]) -> Table:
    """One row per kind, colored like the diagram nodes."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Kind", style="kv.kind")
    table.add_column("Count", style="kv.count", justify="right")
    for kind, count in counts.items():
        table.add_row(Text(kind, style=style_for_kind(kind)), str(count))
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="kv.error")
    op = Text(f"  {result.op}", style="kv.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg), soft_wrap=True)

    if err and err.detail.get("valid"):
        console.print(Text(f"  valid: {', '.join(err.detail['valid'])}"))
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Visualization renderers ───────────────────────────────────────────


def _render_visualize(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a visualization written to a file (the diagram itself is not shown)."""
    d = result.data
    _status_line(console, result)
    if "message" in d:
        _field(console, "message", d["message"])
    for key in ("format", "output", "resource_count", "node_count", "edge_count"):
        if key in d:
            _field(console, key, d[key])
    counts = d.get("counts") or {}
    if counts:
        console.print()
        console.print(_count_table(counts))
    if verbose:
        _render_meta(console, result)


def _render_summary(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render per-kind counts."""
    d = result.data
    counts = d.get("counts") or {}
    if not counts:
        console.print("No resources loaded")
        return
    console.print(_count_table(counts))
    console.print(
        f"\n{d.get('resource_count', sum(counts.values()))} resources, "
        f"{d.get('node_count', 0)} nodes, {d.get('edge_count', 0)} edges"
    )
    if verbose:
        _render_meta(console, result)


def _render_legend(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the kind color/size legend."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Kind", style="kv.kind")
    table.add_column("Color")
    table.add_column("Size", justify="right")
    for item in result.data.get("items", []):
        kind = str(item["kind"])
        table.add_row(
            Text(kind, style=style_for_kind(kind)),
            str(item["color"]),
            str(item["size"]),
        )
    console.print(table)


# ── Share renderers ───────────────────────────────────────────────────


def _render_share_encode(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "url", d.get("url", ""))
    if "copied_with" in d:
        _field(console, "copied_with", d["copied_with"])
    if verbose and "length" in d:
        _field(console, "length", d["length"])
    if verbose:
        _render_meta(console, result)


def _render_share_decode(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    d = result.data
    _status_line(console, result)
    if "output" in d:
        _field(console, "output", d["output"])
    content = str(d.get("content", ""))
    _field(console, "characters", len(content))
    if verbose:
        _render_meta(console, result)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "visualize": _render_visualize,
    "summary": _render_summary,
    "legend": _render_legend,
    "share_encode": _render_share_encode,
    "share_decode": _render_share_decode,
}
