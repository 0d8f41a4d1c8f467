"""Command: produce a special IEEE-754 bit pattern."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bitctl.commands._base import BitCommand

if TYPE_CHECKING:
    from bitctl.commands._context import AppContext


@click.command(
    cls=BitCommand,
    examples="""\
  bitctl special nan
  bitctl -w 32 special neg-inf
  bitctl special -- -0
  bitctl -w 16 special max-pos""",
)
@click.argument("name")
@click.pass_obj
def special(app: AppContext, name: str) -> None:
    """Show the bit pattern of special float NAME at the active width.

    NAME is one of: nan, snan, +inf, -inf, +0, -0, min-pos, max-pos.
    Names starting with "-" need a preceding "--" or the neg- form
    (neg-inf, neg-0).
    """
    app.emit(app.service().special(name))
