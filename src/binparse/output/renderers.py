"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from binparse.output.console import create_console, get_output, style_for_tier

if TYPE_CHECKING:
    from rich.console import Console

    from binparse.services.result import ServiceResult

_RELATION: dict[int, str] = {-1: "<", 0: "=", 1: ">"}


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    width: int | None = None,
) -> str:
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
        if result.op == "selftest" and result.data.get("checks"):
            _selftest_table(console, result.data["checks"])

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Prints only the values a script would pipe onward: parsed integers,
    comparison results, or sorted inputs.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if result.op == "parse":
        return str(data.get("value"))
    if result.op == "compare":
        return str(data.get("result"))
    if result.op == "parse_many":
        return "\n".join(_quiet_value(item.get("value")) for item in data.get("items", []))
    if result.op == "sort":
        return "\n".join(str(item.get("input", "")) for item in data.get("items", []))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _quiet_value(value: Any) -> str:
    return "-" if value is None else str(value)


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="bp.ok")
    op = Text(f"  {result.op}", style="bp.op")
    console.print(label, op, sep="")


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="bp.key")
    if key in ("input", "a", "b"):
        v = Text(repr(value) if value == "" else str(value), style="bp.input")
    elif key.endswith("value"):
        v = Text(_quiet_value(value), style="bp.value")
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}", markup=False)


def _display_input(text: str) -> str:
    return repr(text) if text == "" or text != text.strip() else text


def _input_cell(text: Any) -> Text:
    """Table cell for user input; never interpreted as console markup."""
    return Text(_display_input(str(text)), style="bp.input")


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="bp.error")
    op = Text(f"  {result.op}", style="bp.op")
    dash = Text(" — ")
    console.print(label, op, dash, Text(msg), sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}", markup=False)


# ── Operation renderers ───────────────────────────────────────────────


def _render_parse(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a single parse as input/value fields."""
    _status_line(console, result)
    for key in ("input", "value", "significant_bits"):
        if key in result.data:
            _field(console, key, result.data[key])
    if verbose:
        console.print(f"  binary: {result.data.get('value', 0):b}")
        _render_meta(console, result)


def _render_parse_many(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render parse_many as a table of inputs and values."""
    _status_line(console, result)
    items: list[dict[str, Any]] = result.data.get("items", [])

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Input", style="bp.input", no_wrap=True)
    table.add_column("Value", style="bp.value", justify="right")
    table.add_column("Reason")
    if verbose:
        table.add_column("Bits", justify="right", style="dim")

    for item in items:
        reason = item.get("reason", "")
        row: list[str | Text] = [
            _input_cell(item.get("input", "")),
            _quiet_value(item.get("value")),
            Text(reason, style="bp.tier.invalid") if reason else "",
        ]
        if verbose:
            row.append(str(item.get("significant_bits", "")))
        table.add_row(*row)
    console.print(table)

    count = result.data.get("count", len(items))
    invalid = result.data.get("invalid_count", 0)
    console.print(f"\n  {count} parsed, {invalid} invalid")
    if verbose:
        _render_meta(console, result)


def _render_compare(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a comparison as ``a <op> b`` plus the numeric result."""
    _status_line(console, result)
    d = result.data
    relation = _RELATION.get(d.get("result"), "?")
    line = Text("  ")
    line.append(_display_input(str(d.get("a", ""))), style="bp.input")
    line.append(f" {relation} ")
    line.append(_display_input(str(d.get("b", ""))), style="bp.input")
    console.print(line)
    _field(console, "mode", d.get("mode"))
    _field(console, "result", d.get("result"))
    if d.get("mode") == "lenient":
        for key in ("a_tier", "b_tier"):
            tier = str(d.get(key, ""))
            k = Text(f"  {key}: ", style="bp.key")
            console.print(k, Text(tier, style=style_for_tier(tier)), sep="")
    if verbose:
        _field(console, "a_value", d.get("a_value"))
        _field(console, "b_value", d.get("b_value"))
        _render_meta(console, result)


def _render_sort(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render sorted inputs with their tier and value."""
    _status_line(console, result)
    items: list[dict[str, Any]] = result.data.get("items", [])

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Input", style="bp.input", no_wrap=True)
    table.add_column("Tier")
    table.add_column("Value", style="bp.value", justify="right")

    for pos, item in enumerate(items, start=1):
        tier = str(item.get("tier", ""))
        table.add_row(
            str(pos),
            _input_cell(item.get("input", "")),
            Text(tier, style=style_for_tier(tier)),
            _quiet_value(item.get("value")),
        )
    console.print(table)
    if verbose:
        _render_meta(console, result)


def _selftest_table(console: Console, checks: list[dict[str, Any]]) -> None:
    """Print the per-check table and the first failure of each failed check."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Check")
    table.add_column("Cases", justify="right")
    table.add_column("Failures", justify="right")
    table.add_column("Status")

    for check in checks:
        passed = bool(check.get("passed"))
        status = Text("pass", style="bp.pass") if passed else Text("FAIL", style="bp.fail")
        table.add_row(
            Text(str(check.get("name", ""))),
            str(check.get("cases", 0)),
            str(check.get("failures", 0)),
            status,
        )
    console.print(table)

    for check in checks:
        if check.get("first_failure"):
            console.print(
                f"  {check['name']}: {check['first_failure']}",
                style="bp.warning",
                markup=False,
            )


def _render_selftest(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render selftest checks with pass/fail status."""
    _status_line(console, result)
    d = result.data
    _field(console, "seed", d.get("seed"))
    _field(console, "cases", d.get("cases"))
    _field(console, "max_length", d.get("max_length"))

    _selftest_table(console, d.get("checks", []))
    if verbose:
        _render_meta(console, result)


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
    "parse": _render_parse,
    "parse_many": _render_parse_many,
    "compare": _render_compare,
    "sort": _render_sort,
    "selftest": _render_selftest,
}
