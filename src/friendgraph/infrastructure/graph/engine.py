"""GraphEngine — lazy-loaded SocialGraph plus a NetworkX view for statistics.

Loaded per invocation, no cross-invocation cache.
Commands that don't need the graph (``--help``, ``--version``) never load it.
The core algorithms run on the SocialGraph itself; the NetworkX view only
backs graph-level statistics.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import networkx as nx

from friendgraph.infrastructure.loader import load_graph

if TYPE_CHECKING:
    from pathlib import Path

    from friendgraph.domain.graph import SocialGraph


class GraphEngine:
    """Lazy-loading graph engine backed by a graph file."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self._graph: SocialGraph | None = None
        self._nx_graph: nx.Graph | None = None

    @classmethod
    def from_graph(cls, graph: SocialGraph, path: Path | None = None) -> GraphEngine:
        """Wrap an already-built graph (no file access)."""
        from pathlib import Path

        engine = cls(path or Path("<memory>"))
        engine._graph = graph
        return engine

    @property
    def graph(self) -> SocialGraph:
        """Return the social graph, loading it from disk on first access."""
        if self._graph is None:
            self._graph = load_graph(self.path)
        return self._graph

    @property
    def nx_graph(self) -> nx.Graph:
        """Return an undirected NetworkX view keyed by person name."""
        if self._nx_graph is None:
            self._nx_graph = self._build_nx(self.graph)
        return self._nx_graph

    def invalidate(self) -> None:
        """Drop the loaded graph, forcing a reload on next access."""
        self._graph = None
        self._nx_graph = None

    @staticmethod
    def _build_nx(graph: SocialGraph) -> nx.Graph:
        """Build a NetworkX Graph from the social graph.

        Adds all people first (so isolated people appear in the graph),
        then the friendships.
        """
        g = nx.Graph()
        for person in graph:
            g.add_node(person.name, school=person.school)
        for a, b in graph.edges():
            g.add_edge(graph.name_of(a), graph.name_of(b))
        return g
