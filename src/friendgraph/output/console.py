"""Off-screen Rich rendering for friendgraph output.

Renderers draw onto a Console backed by a string buffer and hand the text
back, so the command layer decides where it goes (stdout or stderr).
Colour codes only appear when Rich detects a terminal, never in pipes or
under CliRunner.
"""

from __future__ import annotations

from collections.abc import Callable
from io import StringIO

from rich.console import Console
from rich.theme import Theme

FG_THEME = Theme(
    {
        "fg.ok": "bold green",
        "fg.error": "bold red",
        "fg.op": "bold cyan",
        "fg.key": "dim",
        "fg.name": "bold blue",
        "fg.school": "green",
        "fg.count": "magenta",
    }
)

DEFAULT_WIDTH = 120


def render_to_text(
    draw: Callable[[Console], None],
    *,
    width: int = DEFAULT_WIDTH,
    no_color: bool = False,
) -> str:
    """Run *draw* against a buffered Console and return what it printed.

    Trailing newlines are dropped; ``click.echo`` adds its own.
    """
    buffer = StringIO()
    console = Console(
        file=buffer,
        theme=FG_THEME,
        highlight=False,
        width=width,
        no_color=no_color,
    )
    draw(console)
    return buffer.getvalue().rstrip("\n")
