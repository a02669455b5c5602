"""AnalysisService — shortest chains, school groups, connectors, and summary.

The three core queries run the domain algorithms directly on the
SocialGraph. ``summary`` uses the NetworkX view from the GraphEngine for
component statistics and density.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import TYPE_CHECKING, Any

import networkx as nx

from friendgraph.domain.chains import ChainStatus, shortest_chain
from friendgraph.domain.connectors import connector_indices
from friendgraph.domain.groups import school_groups
from friendgraph.services.base import BaseService
from friendgraph.services.result import ServiceResult
from friendgraph.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from friendgraph.infrastructure.graph.engine import GraphEngine

logger = logging.getLogger(__name__)


class AnalysisService(BaseService):
    """Read-only queries over the social graph."""

    def __init__(self, engine: GraphEngine, *, workers: int = 1) -> None:
        super().__init__(engine)
        self._workers = max(1, workers)

    # ------------------------------------------------------------------
    # chain — shortest acquaintance chain (BFS)
    # ------------------------------------------------------------------

    @traced
    def chain(self, source: str, target: str) -> ServiceResult:
        """Find the shortest chain of friends from *source* to *target*.

        Fails with ``UNKNOWN_PERSON`` when either name is absent (so a typo
        is distinguishable from a disconnected pair) and ``NO_PATH`` when
        both exist but nothing connects them.
        """
        op = "chain"
        graph = self._load_graph(op)
        if isinstance(graph, ServiceResult):
            return graph

        with trace_span("bfs") as span:
            outcome = shortest_chain(graph, source, target)
            if span:
                span.annotate("status", str(outcome.status))

        if outcome.status is ChainStatus.UNKNOWN_PERSON:
            missing = list(outcome.missing)
            return ServiceResult.failure(
                op,
                "UNKNOWN_PERSON",
                f"Unknown person: {', '.join(repr(n) for n in missing)}",
                missing=missing,
            )
        if outcome.status is ChainStatus.NO_PATH:
            return ServiceResult.failure(
                op,
                "NO_PATH",
                f"No chain connects '{source}' and '{target}'",
                source=source,
                target=target,
            )

        logger.debug("Chain %s -> %s has length %d", source, target, outcome.length)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "source": source,
                "target": target,
                "length": outcome.length,
                "names": list(outcome.names),
            },
        )

    # ------------------------------------------------------------------
    # groups — same-school connected components
    # ------------------------------------------------------------------

    @traced
    def groups(self, school: str) -> ServiceResult:
        """List the friend groups within *school*.

        A school nobody attends is a valid, empty result.
        """
        op = "groups"
        graph = self._load_graph(op)
        if isinstance(graph, ServiceResult):
            return graph

        with trace_span("bfs") as span:
            found = school_groups(graph, school)
            if span:
                span.annotate("groups", len(found))

        warnings: list[str] = []
        if not found:
            warnings.append(f"No one in the graph attends '{school}'")

        groups: list[dict[str, Any]] = [
            {"index": i, "size": len(members), "members": members}
            for i, members in enumerate(found, start=1)
        ]
        return ServiceResult(
            ok=True,
            op=op,
            data={"school": school, "count": len(groups), "groups": groups},
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # connectors — articulation points
    # ------------------------------------------------------------------

    @traced
    def connectors(self) -> ServiceResult:
        """Find the people whose removal would split the friendship graph."""
        op = "connectors"
        graph = self._load_graph(op)
        if isinstance(graph, ServiceResult):
            return graph

        with trace_span("dfs") as span:
            indices = connector_indices(graph, workers=self._workers)
            if span:
                span.annotate("workers", self._workers)
                span.annotate("connectors", len(indices))

        items: list[dict[str, Any]] = []
        for idx in indices:
            person = graph.person_at(idx)
            items.append({"name": person.name, "school": person.school, "degree": person.degree})

        return ServiceResult(
            ok=True,
            op=op,
            data={"count": len(items), "items": items},
        )

    # ------------------------------------------------------------------
    # summary — graph-level statistics
    # ------------------------------------------------------------------

    @traced
    def summary(self) -> ServiceResult:
        """Report people, friendships, components, and schools."""
        op = "summary"
        graph = self._load_graph(op)
        if isinstance(graph, ServiceResult):
            return graph

        if len(graph) == 0:
            return ServiceResult(
                ok=True,
                op=op,
                data={
                    "people": 0,
                    "friendships": 0,
                    "components": 0,
                    "largest_component": 0,
                    "isolated": 0,
                    "density": 0.0,
                    "schools": [],
                },
            )

        with trace_span("build_nx") as span:
            g = self._engine.nx_graph
            if span:
                span.annotate("nodes", g.number_of_nodes())
                span.annotate("edges", g.number_of_edges())

        components = list(nx.connected_components(g))
        attendance = Counter(p.school for p in graph if p.school)
        schools = [
            {"school": school, "members": attendance[school]} for school in graph.schools()
        ]

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "people": g.number_of_nodes(),
                "friendships": g.number_of_edges(),
                "components": len(components),
                "largest_component": max(len(c) for c in components),
                "isolated": nx.number_of_isolates(g),
                "density": round(nx.density(g), 6),
                "schools": schools,
            },
        )
