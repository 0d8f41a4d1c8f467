"""Command: interactive session over a single value cell.

The session owns one BitState for its lifetime. Each input line is one
user action (an operation, a bit toggle, a field edit, a width change);
after each action the new state is printed. Rejected input prints an error
and the cell keeps its last valid value.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import click
import structlog

from bitctl.commands._base import VALUE, BitCommand
from bitctl.domain.codec import parse_literal, resolve_base
from bitctl.domain.errors import BitctlError, ParseError
from bitctl.domain.special import special_names
from bitctl.domain.types import Operation
from bitctl.output.formatters import format_result
from bitctl.services.result import ServiceResult

if TYPE_CHECKING:
    from bitctl.commands._context import AppContext
    from bitctl.services.bits import BitService

log = structlog.get_logger(__name__)

QUIT_WORDS = frozenset({"quit", "exit", "q"})

SHELL_HELP = f"""\
Operations:   {" ".join(o.value for o in Operation)}  [N]
Bits:         toggle POS | setbit POS | clearbit POS | getbit POS
Fields:       dec TEXT | bin TEXT | hex TEXT | hex_be TEXT | hex_le TEXT | oct TEXT
Value:        load VALUE   (0x.., 0b.., 0o.., or decimal)
Width:        width 8|16|32|64
Float:        float | special NAME  ({", ".join(special_names())})
Session:      show | help | quit"""


def _int_arg(op: str, word: str, arg: str) -> int | ServiceResult:
    """Parse an integer argument, or a failed result naming *word*."""
    if not arg:
        return ServiceResult.failure(op, ParseError(f"'{word}' needs an argument"))
    try:
        return parse_literal(arg)
    except ParseError as exc:
        return ServiceResult.failure(op, exc)


def dispatch(svc: BitService, line: str) -> ServiceResult | None:
    """Run one shell line against *svc*; None means the line was empty."""
    parts = line.strip().split(maxsplit=1)
    if not parts:
        return None
    word = parts[0].lower()
    arg = parts[1].strip() if len(parts) > 1 else ""

    if word == "show":
        return svc.inspect()
    if word == "float":
        return svc.decode_float()
    if word == "special":
        if not arg:
            return ServiceResult.failure("special", ParseError("'special' needs a NAME"))
        return svc.special(arg)

    if word in {o.value for o in Operation}:
        amount = _int_arg("operate", word, arg) if arg else 1
        if isinstance(amount, ServiceResult):
            return amount
        return svc.operate(word, amount)

    bit_actions: dict[str, Callable[[int], ServiceResult]] = {
        "toggle": svc.toggle,
        "setbit": lambda pos: svc.set_bit(pos, on=True),
        "clearbit": lambda pos: svc.set_bit(pos, on=False),
        "getbit": svc.get_bit,
    }
    if word in bit_actions:
        pos = _int_arg(word, word, arg)
        if isinstance(pos, ServiceResult):
            return pos
        return bit_actions[word](pos)

    if word == "width":
        width = _int_arg("resize", word, arg)
        if isinstance(width, ServiceResult):
            return width
        return svc.resize(width)

    if word == "load":
        value = _int_arg("assign", word, arg)
        if isinstance(value, ServiceResult):
            return value
        return svc.assign(value)

    try:
        base = resolve_base(word)
    except BitctlError:
        base = None
    if base is not None:
        return svc.edit(str(base), arg)

    msg = f"Unknown command '{parts[0]}'; type 'help' for a list"
    return ServiceResult.failure("shell", ParseError(msg))


@click.command(
    cls=BitCommand,
    examples="""\
  bitctl shell
  bitctl shell 0xFF
  bitctl -w 16 shell 0x3C00
  printf 'lsh\\nnot\\nquit\\n' | bitctl shell 1""",
)
@click.argument("value", type=VALUE, required=False, default=0)
@click.pass_obj
def shell(app: AppContext, value: int) -> None:
    """Start an interactive session holding VALUE (default 0).

    Type 'help' inside the session for the list of actions.
    """
    app.load(value)
    svc = app.service()
    shell_cfg = app.settings.shell
    settings = app.output_settings
    if not shell_cfg.show_state and not settings.json_output:
        settings = settings.model_copy(update={"quiet": True})

    log.debug("shell.start", value=app.state.value, width=app.state.width)
    click.echo(format_result(svc.inspect(), settings=settings))

    while True:
        try:
            line = click.prompt(
                f"{shell_cfg.prompt}[{app.state.width}]",
                default="",
                show_default=False,
                prompt_suffix="> ",
            )
        except (EOFError, click.Abort):
            click.echo()
            break

        word = line.strip().lower()
        if word in QUIT_WORDS:
            break
        if word in {"help", "?"}:
            click.echo(SHELL_HELP)
            continue

        result = dispatch(svc, line)
        if result is None:
            continue
        output = format_result(result, settings=settings)
        click.echo(output, err=not result.ok)

    log.debug("shell.end", value=app.state.value, width=app.state.width)
