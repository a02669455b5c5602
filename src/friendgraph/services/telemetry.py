"""Timing spans for service calls, switched on by ``--verbose``.

Each ``@traced`` service method opens a root span; ``trace_span`` blocks
inside it (``load_graph``, ``bfs``, ``dfs``, ``build_nx``) become children.
The finished tree lands in ``ServiceResult.meta["telemetry"]``. With
telemetry off, both helpers cost a single ContextVar lookup.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec

import structlog

from friendgraph.services.result import ServiceResult

log = structlog.get_logger("friendgraph.telemetry")

_enabled: ContextVar[bool] = ContextVar("friendgraph_telemetry", default=False)
_current_span: ContextVar[Span | None] = ContextVar("friendgraph_span", default=None)

_P = ParamSpec("_P")


@dataclass
class Span:
    """One timed step; ``children`` are the steps nested inside it."""

    name: str
    started: float = field(default_factory=time.perf_counter)
    finished: float | None = None
    children: list[Span] = field(default_factory=list)
    annotations: dict[str, Any] = field(default_factory=dict)

    @property
    def duration_ms(self) -> float:
        if self.finished is None:
            return 0.0
        return (self.finished - self.started) * 1000

    def end(self) -> None:
        self.finished = time.perf_counter()

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def to_dict(self) -> dict[str, Any]:
        """Serialize the tree; empty annotation and child lists are omitted."""
        data: dict[str, Any] = {"name": self.name, "duration_ms": round(self.duration_ms, 2)}
        if self.annotations:
            data["annotations"] = dict(self.annotations)
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data


def enable_telemetry() -> None:
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)


@contextmanager
def trace_span(name: str) -> Iterator[Span | None]:
    """Time the enclosed block as a child of the active span.

    Yields None when telemetry is off or no ``@traced`` call is running.
    """
    parent = _current_span.get() if _enabled.get() else None
    if parent is None:
        yield None
        return

    span = Span(name)
    parent.children.append(span)
    token = _current_span.set(span)
    try:
        yield span
    finally:
        span.end()
        _current_span.reset(token)


def traced(method: Callable[_P, ServiceResult]) -> Callable[_P, ServiceResult]:
    """Time a service method and attach its span tree to the returned result."""

    @functools.wraps(method)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> ServiceResult:
        if not _enabled.get():
            return method(*args, **kwargs)

        span = Span(method.__qualname__)
        token = _current_span.set(span)
        ok = False
        try:
            result = method(*args, **kwargs)
            ok = result.ok
        finally:
            span.end()
            _current_span.reset(token)
            log.debug(
                "span.complete",
                span_name=span.name,
                duration_ms=round(span.duration_ms, 2),
                ok=ok,
                children=len(span.children),
            )

        meta = {**(result.meta or {}), "telemetry": span.to_dict()}
        return result.model_copy(update={"meta": meta})

    return wrapper
