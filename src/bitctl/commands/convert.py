"""Command: convert text between the numeric bases."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bitctl.commands._base import BitCommand
from bitctl.domain.types import EDITABLE_BASES, Base

if TYPE_CHECKING:
    from bitctl.commands._context import AppContext

_INPUT_BASES = sorted(b.value for b in EDITABLE_BASES)
_OUTPUT_BASES = [b.value for b in Base]


@click.command(
    cls=BitCommand,
    examples="""\
  bitctl convert 255 --from dec
  bitctl convert ff --from hex --to bin
  bitctl -w 32 convert 78563412 --from hex_le --to hex
  bitctl -q convert 0o17 --from oct --to dec""",
)
@click.argument("text")
@click.option(
    "-f",
    "--from",
    "from_base",
    type=click.Choice(_INPUT_BASES, case_sensitive=False),
    required=True,
    help="Base TEXT is written in.",
)
@click.option(
    "-t",
    "--to",
    "to_base",
    type=click.Choice(_OUTPUT_BASES, case_sensitive=False),
    default=None,
    help="Single output base (default: all views).",
)
@click.pass_obj
def convert(app: AppContext, text: str, from_base: str, to_base: str | None) -> None:
    """Parse TEXT in one base and print it in another (or all)."""
    app.emit(app.service().convert(text, from_base, to_base))
