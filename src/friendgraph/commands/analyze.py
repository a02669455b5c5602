"""Command group: shortest chains, school groups, and connectors."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from friendgraph.commands._base import FgGroup

if TYPE_CHECKING:
    from friendgraph.commands._context import AppContext

_ANALYZE_EXAMPLES = """\
  friendgraph analyze chain sam aparna
  friendgraph analyze groups rutgers
  friendgraph analyze connectors
  friendgraph --json -g graph2.txt analyze connectors"""


@click.group(cls=FgGroup, examples=_ANALYZE_EXAMPLES)
def analyze() -> None:
    """Analyze the friendship graph."""


@analyze.command(
    examples="""\
  friendgraph analyze chain sam aparna
  friendgraph -q analyze chain sam aparna
  friendgraph --json analyze chain sam aparna"""
)
@click.argument("source")
@click.argument("target")
@click.pass_obj
def chain(app: AppContext, source: str, target: str) -> None:
    """Find the shortest chain of friends from SOURCE to TARGET."""
    app.emit(app.analysis().chain(source, target))


@analyze.command(
    examples="""\
  friendgraph analyze groups rutgers
  friendgraph --json analyze groups rutgers"""
)
@click.argument("school")
@click.pass_obj
def groups(app: AppContext, school: str) -> None:
    """List the friend groups within SCHOOL."""
    app.emit(app.analysis().groups(school))


@analyze.command(
    examples="""\
  friendgraph analyze connectors
  friendgraph --workers 4 analyze connectors
  friendgraph -q analyze connectors"""
)
@click.pass_obj
def connectors(app: AppContext) -> None:
    """Find people whose removal would split the graph."""
    app.emit(app.analysis().connectors())
