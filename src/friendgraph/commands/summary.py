"""Standalone command: graph statistics."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from friendgraph.commands._base import FgCommand

if TYPE_CHECKING:
    from friendgraph.commands._context import AppContext


@click.command(
    cls=FgCommand,
    examples="""\
  friendgraph summary
  friendgraph --json -g friends.txt summary""",
)
@click.pass_obj
def summary(app: AppContext) -> None:
    """Show people, friendships, components, and schools."""
    app.emit(app.analysis().summary())
