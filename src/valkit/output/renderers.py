"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from valkit.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from valkit.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False, width: int | None = None) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console(width=width)

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

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item.get("name", "")) for item in items)
    if result.op == "email_parts":
        # Absent domain prints as an empty second field.
        domain = result.data.get("domain_part")
        return f"{result.data.get('local_part', '')}\t{domain if domain is not None else ''}"
    for key in ("value", "result", "name"):
        if key in result.data:
            return str(result.data[key])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="valkit.ok")
    op = Text(f"  {result.op}", style="valkit.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field. ``None`` shows as absent."""
    k = Text(f"  {key}: ", style="valkit.key")
    if value is None:
        v = Text("(absent)", style="valkit.absent")
    elif isinstance(value, bool):
        v = Text(str(value).lower(), style="valkit.valid" if value else "valkit.invalid")
    else:
        v = Text(str(value), style="valkit.value")
    console.print(k, v, end="")
    console.print()


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="valkit.error")
    op = Text(f"  {result.op}", style="valkit.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_email(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render check_email and email_parts with a fixed field order."""
    _status_line(console, result)
    for key in ("value", "text", "local_part", "domain_part", "valid"):
        if key in result.data:
            _field(console, key, result.data[key])


def _render_days(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Day", style="valkit.value")
    for item in items:
        table.add_row(str(item.get("index", "")), str(item.get("name", "")))
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} days")


def _render_rational(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    symbol = {"rational_add": "+", "rational_sub": "-", "rational_mul": "*"}.get(result.op, "?")
    _status_line(console, result)
    console.print(
        Text.assemble(
            f"  {d.get('left')} {symbol} {d.get('right')} = ",
            (str(d.get("result")), "valkit.value"),
        )
    )
    if verbose:
        _field(console, "numerator", d.get("numerator"))
        _field(console, "denominator", d.get("denominator"))


_OP_RENDERERS: dict[str, Any] = {
    "check_email": _render_email,
    "email_parts": _render_email,
    "list_days": _render_days,
    "rational_add": _render_rational,
    "rational_sub": _render_rational,
    "rational_mul": _render_rational,
}
