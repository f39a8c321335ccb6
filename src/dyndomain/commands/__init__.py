"""Subcommand modules for dyndomain.

Provides register_commands() which uses deferred imports to keep
``dyndomain --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from dyndomain.commands.check import check
    from dyndomain.commands.enumerate_cmd import enumerate_cmd
    from dyndomain.commands.render import render

    cli.add_command(render)
    cli.add_command(enumerate_cmd)
    cli.add_command(check)
