"""BaseService — foundation for all friendgraph services.

Every service receives a :class:`GraphEngine` at construction time. The
engine loads the graph lazily; load failures are turned into
ServiceResult errors here so no service raises for a bad graph file.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from friendgraph.domain.graph import GraphError
from friendgraph.services.result import ServiceResult
from friendgraph.services.telemetry import trace_span

if TYPE_CHECKING:
    from friendgraph.domain.graph import SocialGraph
    from friendgraph.infrastructure.graph.engine import GraphEngine

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class AnalysisService(BaseService):
            def chain(self, a: str, b: str) -> ServiceResult:
                graph = self._load_graph("chain")
                if isinstance(graph, ServiceResult):
                    return graph
                ...
    """

    def __init__(self, engine: GraphEngine) -> None:
        self._engine = engine

    def _load_graph(self, op: str) -> SocialGraph | ServiceResult:
        """Return the graph, or a failed ServiceResult for *op* if it can't load."""
        path = self._engine.path
        with trace_span("load_graph") as span:
            try:
                graph = self._engine.graph
            except FileNotFoundError:
                logger.debug("Graph file not found: %s", path)
                return ServiceResult.failure(
                    op,
                    "GRAPH_NOT_FOUND",
                    f"Graph file not found: {path}",
                    path=str(path),
                )
            except GraphError as exc:
                logger.debug("Invalid graph file %s: %s", path, exc)
                return ServiceResult.failure(
                    op,
                    "INVALID_GRAPH",
                    f"Invalid graph file {path}: {exc}",
                    path=str(path),
                    line=getattr(exc, "line", None),
                )
            except OSError as exc:
                logger.debug("Cannot read graph file %s: %s", path, exc)
                return ServiceResult.failure(
                    op,
                    "GRAPH_UNREADABLE",
                    f"Cannot read graph file {path}: {exc.strerror or exc}",
                    path=str(path),
                )
            if span:
                span.annotate("people", len(graph))
        return graph
