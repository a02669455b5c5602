"""Click command classes that accept an ``examples=`` keyword.

Any command or group built with ``examples="..."`` gains an eager
``--examples`` flag that prints the text and exits, so ``--help`` stays short.
"""

from __future__ import annotations

from typing import Any

import click


def _examples_option(text: str) -> click.Option:
    def callback(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value and not ctx.resilient_parsing:
            click.echo(f"Examples for '{ctx.command_path}':\n\n{text}")
            ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=callback,
        help="Show usage examples and exit.",
    )


class _ExamplesMixin:
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)  # type: ignore[call-arg]
        self.examples = examples
        if examples:
            self.params.append(_examples_option(examples))  # type: ignore[attr-defined]


class FgCommand(_ExamplesMixin, click.Command):
    """A command with optional ``--examples``."""


class FgGroup(_ExamplesMixin, click.Group):
    """A group with optional ``--examples``; its subcommands are :class:`FgCommand`."""

    command_class = FgCommand
