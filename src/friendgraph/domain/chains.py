"""Shortest acquaintance chain between two people (unweighted BFS)."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from friendgraph.domain.graph import SocialGraph


class ChainStatus(StrEnum):
    """Outcome of a shortest-chain query."""

    FOUND = "found"
    NO_PATH = "no_path"
    UNKNOWN_PERSON = "unknown_person"


@dataclass(frozen=True)
class ChainResult:
    """Result of :func:`shortest_chain`.

    ``names`` is empty unless ``status`` is FOUND. ``missing`` lists the
    queried names absent from the graph when status is UNKNOWN_PERSON.
    """

    status: ChainStatus
    names: tuple[str, ...] = ()
    missing: tuple[str, ...] = ()

    @property
    def found(self) -> bool:
        return self.status is ChainStatus.FOUND

    @property
    def length(self) -> int:
        """Number of friendships along the chain."""
        return max(len(self.names) - 1, 0)


def shortest_chain(graph: SocialGraph, p1: str, p2: str) -> ChainResult:
    """Find the shortest chain of names from *p1* to *p2*.

    Each consecutive pair in the returned chain is a friendship. BFS visits
    each person at most once, so the chain is minimal and the search is
    O(V + E).
    """
    src = graph.lookup(p1)
    dest = graph.lookup(p2)
    if src is None or dest is None:
        missing = tuple(
            dict.fromkeys(name for name, idx in ((p1, src), (p2, dest)) if idx is None)
        )
        return ChainResult(ChainStatus.UNKNOWN_PERSON, missing=missing)

    if src == dest:
        return ChainResult(ChainStatus.FOUND, names=(p1,))

    parent: dict[int, int | None] = {src: None}
    queue: deque[int] = deque([src])
    while queue:
        current = queue.popleft()
        if current == dest:
            break
        for friend in graph.friends_of(current):
            if friend not in parent:
                parent[friend] = current
                queue.append(friend)

    if dest not in parent:
        return ChainResult(ChainStatus.NO_PATH)

    path: list[str] = []
    step: int | None = dest
    while step is not None:
        path.append(graph.name_of(step))
        step = parent[step]
    path.reverse()
    return ChainResult(ChainStatus.FOUND, names=tuple(path))
