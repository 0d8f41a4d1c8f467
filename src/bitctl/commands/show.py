"""Command: show the bit grid and every representation of a value."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bitctl.commands._base import VALUE, BitCommand

if TYPE_CHECKING:
    from bitctl.commands._context import AppContext


@click.command(
    cls=BitCommand,
    examples="""\
  bitctl show 42
  bitctl show 0xDEADBEEF
  bitctl -w 16 show 0b1010000011110000
  bitctl --json show 0o777""",
)
@click.argument("value", type=VALUE)
@click.pass_obj
def show(app: AppContext, value: int) -> None:
    """Show VALUE as a bit grid with DEC/BIN/HEX/OCT and character views."""
    app.load(value)
    app.emit(app.service().inspect())
