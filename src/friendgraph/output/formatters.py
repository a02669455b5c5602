"""Output mode dispatch for ServiceResult.

The CLI renders ServiceResult for humans (Rich tables and chains),
for scripts (``--quiet``: bare names, one per line), or for machines
(``--json``: the serialized result).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from friendgraph.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output flags copied from the CLI settings."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
) -> str:
    """Format a ServiceResult according to *settings* (default: human output)."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)

    from friendgraph.output.renderers import render_quiet, render_result

    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
