"""Custom Click base classes and parameter types.

BitCommand and BitGroup accept an ``examples`` parameter; passing
``--examples`` prints them and exits, keeping ``--help`` concise.
ValueLiteral parses prefixed integer literals for VALUE arguments.
"""

from __future__ import annotations

from typing import Any

import click

from bitctl.domain.codec import parse_literal
from bitctl.domain.errors import ParseError

WIDTH_CHOICES = ("8", "16", "32", "64")


def _add_examples_option(cmd: click.Command | click.Group, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class BitCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class BitGroup(click.Group):
    """Click Group subclass that supports an ``--examples`` flag.

    Sets ``command_class = BitCommand`` so all subcommands automatically
    accept the ``examples`` parameter without explicit ``cls=`` each time.
    """

    command_class = BitCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class ValueLiteral(click.ParamType):
    """A 64-bit integer literal: ``42``, ``0xFF``, ``0b1010``, or ``0o17``."""

    name = "value"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> int:
        if isinstance(value, int):
            return value
        try:
            return parse_literal(str(value))
        except ParseError as exc:
            self.fail(str(exc), param, ctx)


VALUE = ValueLiteral()
