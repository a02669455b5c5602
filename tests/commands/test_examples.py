"""Tests for --examples flag on CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from friendgraph.cli import cli

# (CLI args, expected keywords in output)
EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["analyze", "--examples"], ["friendgraph analyze chain", "friendgraph analyze connectors"]),
    (["analyze", "chain", "--examples"], ["-q analyze chain"]),
    (["analyze", "groups", "--examples"], ["analyze groups rutgers"]),
    (["analyze", "connectors", "--examples"], ["--workers 4"]),
    (["summary", "--examples"], ["friendgraph summary"]),
]


def _examples_id(item: tuple[list[str], list[str]]) -> str:
    args, _ = item
    return "_".join(a for a in args if a != "--examples")


@pytest.mark.parametrize(
    "args,expected_keywords",
    EXAMPLES_COMMANDS,
    ids=[_examples_id(item) for item in EXAMPLES_COMMANDS],
)
def test_examples_flag(
    cli_runner: CliRunner, args: list[str], expected_keywords: list[str]
) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    assert "Examples for" in result.output
    for kw in expected_keywords:
        assert kw in result.output, f"Expected '{kw}' in examples output for {args}"


@pytest.mark.parametrize(
    "args",
    [
        ["analyze", "--help"],
        ["analyze", "chain", "--help"],
        ["summary", "--help"],
    ],
)
def test_examples_listed_in_help(cli_runner: CliRunner, args: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    assert "--examples" in result.output
