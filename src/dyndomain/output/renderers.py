"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from dyndomain.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from dyndomain.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: just the answer."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "enumerate":
        return "\n".join(str(m) for m in result.data.get("members", []))
    if result.op == "check":
        return "yes" if result.data.get("member") else "no"
    notation = result.data.get("notation")
    return str(notation) if notation is not None else f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="dd.ok")
    op = Text(f"  {result.op}", style="dd.op")
    console.print(label, op, sep="")


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="dd.key")
    style = "dd.notation" if key == "notation" else ""
    console.print(k, Text(str(value), style=style), sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if isinstance(v, dict):
            console.print(Text(f"    {k}:"))
            for sub_k, sub_v in v.items():
                console.print(Text(f"      {sub_k}: {sub_v}"))
        else:
            console.print(Text(f"    {k}: {v}"))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="dd.error")
    op = Text(f"  {result.op}", style="dd.op")
    console.print(label, op, Text(f" — {msg}"), sep="")
    if verbose and err and err.detail:
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Op renderers ──────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


def _render_domain(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    data = result.data
    _field(console, "notation", data["notation"])
    _field(console, "kind", data["kind"])
    size = data["cardinality"]
    _field(console, "members", "infinite" if size is None else size)
    if verbose:
        for constraint in data.get("constraints", []):
            console.print(Text(f"    {constraint}", style="dim"))
        _render_meta(console, result)


def _render_members(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    data = result.data
    _field(console, "notation", data["notation"])
    count = f"{data['count']}+" if data["truncated"] else str(data["count"])
    _field(console, "count", count)
    members = Text(", ".join(str(m) for m in data["members"]) or "(none)", style="dd.member")
    console.print(Text("  members: ", style="dd.key"), members, sep="")
    if verbose:
        _render_meta(console, result)


def _render_membership(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    data = result.data
    _field(console, "notation", data["notation"])
    _field(console, "value", data["value"])
    verdict = Text("yes", style="dd.yes") if data["member"] else Text("no", style="dd.no")
    console.print(Text("  member: ", style="dd.key"), verdict, sep="")
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "render": _render_domain,
    "enumerate": _render_members,
    "check": _render_membership,
}
