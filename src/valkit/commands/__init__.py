"""Subcommand modules for valkit.

Provides register_commands() which uses deferred imports to keep
``valkit --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups on the root CLI group."""
    from valkit.commands.days import days
    from valkit.commands.email import email
    from valkit.commands.rational import rational

    cli.add_command(email)
    cli.add_command(days)
    cli.add_command(rational)
