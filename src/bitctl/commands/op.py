"""Command: apply a bitwise operation to a value."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bitctl.commands._base import VALUE, BitCommand
from bitctl.domain.types import Operation

if TYPE_CHECKING:
    from bitctl.commands._context import AppContext


@click.command(
    cls=BitCommand,
    examples="""\
  bitctl op lsh 1
  bitctl op lshr 0x8000000000000000
  bitctl op rshr 0x01 -n 4
  bitctl -w 8 op not 0x0F
  bitctl op clr 12345
  bitctl -w 32 op set 0""",
)
@click.argument("name", type=click.Choice([o.value for o in Operation], case_sensitive=False))
@click.argument("value", type=VALUE)
@click.option(
    "-n",
    "--amount",
    type=click.IntRange(min=0),
    default=1,
    show_default=True,
    help="Shift/rotate distance, or repeat count for not/rev.",
)
@click.pass_obj
def op(app: AppContext, name: str, value: int, amount: int) -> None:
    """Apply operation NAME to VALUE.

    \b
    lsh   shift left        rsh   shift right
    lshr  rotate left       rshr  rotate right
    not   invert            rev   reverse bit order
    clr   clear all bits    set   set all bits
    """
    app.load(value)
    app.emit(app.service().operate(name, amount))
