"""Command group: single-bit access (the bit grid)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bitctl.commands._base import VALUE, BitGroup

if TYPE_CHECKING:
    from bitctl.commands._context import AppContext

_BIT_EXAMPLES = """\
  bitctl bit toggle 0 3
  bitctl bit set 0xFF00 0
  bitctl bit clear 0xFF 7
  bitctl -q bit get 0b100 2"""

_POSITION = click.IntRange(min=0)


@click.group(cls=BitGroup, examples=_BIT_EXAMPLES)
def bit() -> None:
    """Read or change a single bit of a value (position 0 is the LSB)."""


@bit.command(examples="  bitctl bit toggle 0 3\n  bitctl -w 8 bit toggle 0x80 7")
@click.argument("value", type=VALUE)
@click.argument("position", type=_POSITION)
@click.pass_obj
def toggle(app: AppContext, value: int, position: int) -> None:
    """Flip bit POSITION of VALUE."""
    app.load(value)
    app.emit(app.service().toggle(position))


@bit.command(name="set", examples="  bitctl bit set 0 63")
@click.argument("value", type=VALUE)
@click.argument("position", type=_POSITION)
@click.pass_obj
def set_(app: AppContext, value: int, position: int) -> None:
    """Set bit POSITION of VALUE to 1."""
    app.load(value)
    app.emit(app.service().set_bit(position, on=True))


@bit.command(examples="  bitctl bit clear 0xFF 0")
@click.argument("value", type=VALUE)
@click.argument("position", type=_POSITION)
@click.pass_obj
def clear(app: AppContext, value: int, position: int) -> None:
    """Clear bit POSITION of VALUE to 0."""
    app.load(value)
    app.emit(app.service().set_bit(position, on=False))


@bit.command(examples="  bitctl bit get 0b100 2\n  bitctl -q bit get 0x80 7")
@click.argument("value", type=VALUE)
@click.argument("position", type=_POSITION)
@click.pass_obj
def get(app: AppContext, value: int, position: int) -> None:
    """Print bit POSITION of VALUE."""
    app.load(value)
    app.emit(app.service().get_bit(position))
