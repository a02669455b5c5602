"""Subcommand modules for friendgraph.

Provides register_commands() which uses deferred imports to keep
``friendgraph --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``analyze`` group and standalone commands on the root CLI group."""
    from friendgraph.commands.analyze import analyze
    from friendgraph.commands.summary import summary

    cli.add_command(analyze)
    cli.add_command(summary)
