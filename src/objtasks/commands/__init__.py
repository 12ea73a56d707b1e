"""Subcommand modules for objtasks.

Provides register_commands() which uses deferred imports to keep
``objtasks --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every standalone command on the root CLI group."""
    from objtasks.commands.cities import cities
    from objtasks.commands.selector import selector
    from objtasks.commands.tickets import tickets

    cli.add_command(selector)
    cli.add_command(tickets)
    cli.add_command(cities)
