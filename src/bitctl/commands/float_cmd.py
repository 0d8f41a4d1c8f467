"""Command: decode a value as an IEEE-754 float."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bitctl.commands._base import VALUE, BitCommand

if TYPE_CHECKING:
    from bitctl.commands._context import AppContext


@click.command(
    "float",
    cls=BitCommand,
    examples="""\
  bitctl float 0x3FF0000000000000
  bitctl -w 32 float 0x40490FDB
  bitctl -w 16 float 0x7C00""",
)
@click.argument("value", type=VALUE)
@click.pass_obj
def float_cmd(app: AppContext, value: int) -> None:
    """Decode VALUE as a half (16), single (32), or double (64) float.

    The format follows the active width (--width).
    """
    app.load(value)
    app.emit(app.service().decode_float())
