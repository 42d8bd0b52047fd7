"""Subcommand modules for labeledname.

register_commands() imports lazily to keep ``labeledname --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from labeledname.commands.build import build
    from labeledname.commands.parse import parse
    from labeledname.commands.quote import quote
    from labeledname.commands.render import render

    cli.add_command(build)
    cli.add_command(parse)
    cli.add_command(render)
    cli.add_command(quote)
