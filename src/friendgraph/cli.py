"""Root CLI group for friendgraph with global flags and command registration."""

from __future__ import annotations

import click

from friendgraph import __version__
from friendgraph.commands import register_commands
from friendgraph.commands._context import AppContext
from friendgraph.config.settings import FriendSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="friendgraph")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output (names only).")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with timing info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "-g",
    "--graph",
    "graph_path",
    default=None,
    type=click.Path(dir_okay=False),
    help="Graph file to analyze (overrides [graph] path).",
)
@click.option(
    "--workers",
    default=None,
    type=click.IntRange(min=1),
    help="Threads for connector detection (overrides [analysis] workers).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    graph_path: str | None,
    workers: int | None,
) -> None:
    """friendgraph — analyze a friendship graph."""
    settings = FriendSettings.from_cli(
        config_path=config_path,
        graph_path=graph_path,
        workers=workers,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
