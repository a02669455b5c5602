"""Shared pytest fixtures and test helpers for friendgraph tests."""

from __future__ import annotations

from collections.abc import Generator, Iterable
from pathlib import Path

import networkx as nx
import pytest
from click.testing import CliRunner

from friendgraph.domain.graph import SocialGraph
from friendgraph.infrastructure.graph.engine import GraphEngine
from friendgraph.infrastructure.loader import load_graph
from friendgraph.services.telemetry import _current_span, disable_telemetry

FIXTURES = Path(__file__).parent / "fixtures"
CAMPUS_FILE = FIXTURES / "campus.txt"


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """Undo enable_telemetry() left behind by a --verbose CLI invocation."""
    yield
    disable_telemetry()
    _current_span.set(None)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def campus() -> SocialGraph:
    """The 15-person campus graph from ``tests/fixtures/campus.txt``.

    Three components: an 11-person rutgers/penn state cluster, the
    michele–rachel–rajesh path, and tom on his own.
    """
    return load_graph(CAMPUS_FILE)


@pytest.fixture
def campus_engine(campus: SocialGraph) -> GraphEngine:
    return GraphEngine.from_graph(campus, CAMPUS_FILE)


@pytest.fixture
def _isolated_workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Change CWD to a temp dir holding a copy of the campus graph as friends.txt.

    Use via ``@pytest.mark.usefixtures("_isolated_workspace")`` on command
    test classes; ``friends.txt`` is the default ``[graph] path``.
    """
    monkeypatch.delenv("FRIENDGRAPH_CONFIG", raising=False)
    (tmp_path / "friends.txt").write_text(CAMPUS_FILE.read_text(encoding="utf-8"))
    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# Shared test helpers (used across test modules)
# ---------------------------------------------------------------------------


def make_graph(
    friendships: Iterable[tuple[str, str]],
    *,
    schools: dict[str, str] | None = None,
    loners: Iterable[str] = (),
) -> SocialGraph:
    """Build a SocialGraph from friendship pairs.

    People are registered in order of first appearance, then *loners*.
    *schools* maps names to schools; everyone else has no school.
    """
    pairs = list(friendships)
    names: dict[str, None] = {}
    for a, b in pairs:
        names.setdefault(a)
        names.setdefault(b)
    for name in loners:
        names.setdefault(name)
    schools = schools or {}
    return SocialGraph.from_edges(((n, schools.get(n, "")) for n in names), pairs)


def from_networkx(g: nx.Graph, schools: dict[int, str] | None = None) -> SocialGraph:
    """Convert an integer-labelled NetworkX graph into a SocialGraph."""
    schools = schools or {}
    people = [(str(n), schools.get(n, "")) for n in sorted(g.nodes())]
    return SocialGraph.from_edges(people, ((str(a), str(b)) for a, b in g.edges()))
