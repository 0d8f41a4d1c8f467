"""Subcommand modules for bitctl.

Provides register_commands() which uses deferred imports to keep
``bitctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from bitctl.commands.bit import bit

    cli.add_command(bit)

    # --- Standalone commands ---
    from bitctl.commands.convert import convert
    from bitctl.commands.float_cmd import float_cmd
    from bitctl.commands.op import op
    from bitctl.commands.shell import shell
    from bitctl.commands.show import show
    from bitctl.commands.special import special

    cli.add_command(show)
    cli.add_command(op)
    cli.add_command(convert)
    cli.add_command(float_cmd)
    cli.add_command(special)
    cli.add_command(shell)
