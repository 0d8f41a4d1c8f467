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

from bitctl.output.console import bit_style, create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from bitctl.services.result import ServiceResult

BASE_LABELS: dict[str, str] = {
    "dec": "DEC",
    "bin": "BIN",
    "hex": "HEX",
    "hex_be": "HEX BE",
    "hex_le": "HEX LE",
    "oct": "OCT",
    "ascii": "ASCII",
    "utf8": "UTF-8",
}

AXIS_WIDTH = 50


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False, grid_columns: int = 8) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose, grid_columns=grid_columns)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: just the resulting value."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    d = result.data
    if result.op == "get_bit":
        return str(d.get("bit", ""))
    if result.op == "decode_float":
        return str(d.get("float", ""))
    if "output" in d:
        return str(d["output"])
    if "value" in d:
        return str(d["value"])
    return f"OK: {result.op}"


def render_grid(value: int, width: int, *, columns: int = 8) -> list[Text]:
    """One Text line per row of the bit grid, most significant bit first.

    Positions at or above *width* are shown in the inactive style.
    """
    lines: list[Text] = []
    for hi in range(63, -1, -columns):
        lo = hi - columns + 1
        line = Text(f"  {hi:>2}..{lo:<2} ", style="bit.index")
        for pos in range(hi, lo - 1, -1):
            on = (value >> pos) & 1 == 1
            line.append("1" if on else "0", style=bit_style(on, active=pos < width))
            if pos != lo:
                line.append(" ")
        lines.append(line)
    return lines


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult, detail: str = "") -> None:
    """Print the OK status line."""
    line = Text.assemble(("OK", "bit.ok"), (f"  {result.op}", "bit.op"))
    if detail:
        line.append(f"  {detail}")
    console.print(line)


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    console.print(
        Text.assemble(
            (f"  {key}: ", "bit.key"),
            (str(value), "bit.value" if key == "value" else ""),
        )
    )


def _representation_table(reps: dict[str, str]) -> Table:
    table = Table(show_header=False, show_edge=False, pad_edge=False, box=None, expand=False)
    table.add_column("Base", style="bit.base", no_wrap=True)
    table.add_column("Value", no_wrap=True, overflow="fold")
    for key, text in reps.items():
        table.add_row(f"  {BASE_LABELS.get(key, key)}", Text(text))
    return table


def _state_detail(result: ServiceResult) -> str:
    d = result.data
    if result.op == "operate":
        amount = d.get("amount", 1)
        return f"{d.get('label', d.get('operation', ''))}" + (f" x{amount}" if amount != 1 else "")
    if "position" in d:
        return f"bit {d['position']}"
    if result.op == "edit":
        return f"{BASE_LABELS.get(str(d.get('base')), d.get('base'))} {d.get('input', '')}"
    if result.op == "special":
        return str(d.get("label", ""))
    return f"width {d.get('width')}"


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "bit.error"), (f"  {result.op}", "bit.op"), " — ", msg)
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── State renderer ────────────────────────────────────────────────────


def _render_state(
    result: ServiceResult, console: Console, *, verbose: bool = False, grid_columns: int = 8
) -> None:
    """Render any result that carries a full state snapshot."""
    d = result.data
    _status_line(console, result, _state_detail(result))
    console.print()
    for line in render_grid(d["value"], d["width"], columns=grid_columns):
        console.print(line)
    console.print()
    console.print(_representation_table(d.get("representations", {})))
    if verbose:
        console.print()
        _field(console, "width", d["width"])
        _field(console, "popcount", d.get("popcount", 0))
        _field(console, "set_bits", ",".join(map(str, d.get("set_bits", []))) or "-")


# ── Query renderers ───────────────────────────────────────────────────


def _render_get_bit(
    result: ServiceResult, console: Console, *, verbose: bool = False, grid_columns: int = 8
) -> None:
    d = result.data
    _status_line(console, result, f"bit {d['position']}")
    _field(console, "bit", d["bit"])
    if verbose:
        _field(console, "value", d["value"])
        _field(console, "width", d["width"])


def _render_convert(
    result: ServiceResult, console: Console, *, verbose: bool = False, grid_columns: int = 8
) -> None:
    d = result.data
    _status_line(console, result, f"{BASE_LABELS.get(d['from'], d['from'])} {d['input']}")
    if "output" in d:
        _field(console, BASE_LABELS.get(d["to"], d["to"]), d["output"])
    else:
        console.print(_representation_table(d.get("representations", {})))


def _axis(position: float) -> Text:
    """A text distribution axis from -Inf to +Inf with a marker at *position*."""
    slot = min(int(position / 100 * (AXIS_WIDTH - 1) + 0.5), AXIS_WIDTH - 1)
    axis = Text("  -Inf [", style="dim")
    for i in range(AXIS_WIDTH):
        if i == slot:
            axis.append("|", style="bold")
        elif i == AXIS_WIDTH // 2:
            axis.append("0", style="dim")
        else:
            axis.append("-", style="dim")
    axis.append("] +Inf", style="dim")
    return axis


def _render_float(
    result: ServiceResult, console: Console, *, verbose: bool = False, grid_columns: int = 8
) -> None:
    d = result.data
    _status_line(console, result, f"{d['format']} ({d['width']} bit)")
    for key in ("sign", "exponent", "mantissa"):
        style = f"bit.float.{key}"
        console.print(Text.assemble((f"  {key}: ", "bit.key"), (str(d[key]), style)))
    _field(console, "type", d["kind"])
    _field(console, "float", d["float"])
    console.print()
    console.print(_axis(float(d["position"])))
    if verbose:
        _field(console, "position", d["position"])


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(
    result: ServiceResult, console: Console, *, verbose: bool = False, grid_columns: int = 8
) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    # State snapshots
    "inspect": _render_state,
    "toggle": _render_state,
    "set_bit": _render_state,
    "clear_bit": _render_state,
    "operate": _render_state,
    "edit": _render_state,
    "assign": _render_state,
    "resize": _render_state,
    "special": _render_state,
    # Queries
    "get_bit": _render_get_bit,
    "convert": _render_convert,
    "decode_float": _render_float,
}
