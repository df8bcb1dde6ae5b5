"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.text import Text

from swaycmd.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from swaycmd.services.result import ServiceResult


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
    """Render minimal output for ``--quiet`` mode: the command text only."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"
    command = result.data.get("command")
    return str(command) if command is not None else f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK:", style="sway.ok")
    op = Text(result.op, style="sway.op")
    console.print(label, op)


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="sway.key")
    style = "sway.command" if key == "command" else ""
    if isinstance(value, (dict, list)):
        value = _json.dumps(value, separators=(",", ":"))
    console.print(k, Text(str(value), style=style), sep="")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR:", style="sway.error")
    op = Text(result.op, style="sway.op")
    console.print(label, op, "-", Text(msg))

    if err is None or not err.detail:
        return
    for outcome in err.detail.get("outcomes", []):
        if not outcome.get("success"):
            console.print(Text(f"  failed: {outcome.get('error')}", style="sway.failed"))
    if verbose:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_render(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render output is the command text itself, ready to paste or pipe."""
    console.print(Text(str(result.data.get("command", "")), style="sway.command"))
    if verbose:
        _field(console, "count", result.data.get("count", 0))


def _render_run(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "command", result.data.get("command", ""))
    _field(console, "count", result.data.get("count", 0))
    if result.data.get("dry_run"):
        _field(console, "dry_run", True)
    if verbose:
        for outcome in result.data.get("outcomes", []):
            console.print(Text(f"    {outcome}"))


def _render_version(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Both versions; the numeric parts and sway's config file with ``-v``."""
    _status_line(console, result)
    _field(console, "swaycmd", result.data.get("swaycmd"))
    _field(console, "sway", result.data.get("sway") or "unknown")
    if verbose:
        for key in ("major", "minor", "patch", "config_file"):
            value = result.data.get(key)
            if value is not None:
                _field(console, key, value)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "render": _render_render,
    "run": _render_run,
    "version": _render_version,
}
