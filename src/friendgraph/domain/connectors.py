"""Connectors — articulation points of the friendship graph.

Uses the discovery-order / low-link method, one DFS per connected
component. The DFS keeps an explicit stack so long friendship chains never
hit the interpreter's recursion limit.

Components are independent: with ``workers > 1`` each component's DFS runs
on its own thread with private ``disc``/``low`` maps and the per-component
results are concatenated.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from friendgraph.domain.graph import SocialGraph


def connected_components(graph: SocialGraph) -> list[list[int]]:
    """Return the person indices of each connected component, in index order."""
    visited = [False] * len(graph)
    components: list[list[int]] = []
    for start in range(len(graph)):
        if visited[start]:
            continue
        visited[start] = True
        component = [start]
        queue: deque[int] = deque([start])
        while queue:
            current = queue.popleft()
            for friend in graph.friends_of(current):
                if not visited[friend]:
                    visited[friend] = True
                    component.append(friend)
                    queue.append(friend)
        components.append(component)
    return components


def component_cut_vertices(graph: SocialGraph, root: int) -> set[int]:
    """Return the cut-vertices of the component containing *root*.

    ``low[v]`` is the smallest discovery number reachable from the subtree
    of ``v`` through at most one back edge. A non-root ``u`` is a cut-vertex
    when some DFS child ``v`` has ``low[v] >= disc[u]``; the root is one
    when it has two or more DFS children.
    """
    disc: dict[int, int] = {root: 0}
    low: dict[int, int] = {root: 0}
    cuts: set[int] = set()
    root_children = 0

    # (vertex, DFS parent, remaining neighbours)
    stack: list[tuple[int, int | None, Iterator[int]]] = [
        (root, None, iter(graph.friends_of(root)))
    ]
    while stack:
        u, parent, neighbours = stack[-1]
        descended = False
        for w in neighbours:
            if w not in disc:
                disc[w] = low[w] = len(disc)
                stack.append((w, u, iter(graph.friends_of(w))))
                descended = True
                break
            if w != parent:
                low[u] = min(low[u], disc[w])
        if descended:
            continue

        stack.pop()
        if parent is None:
            continue
        low[parent] = min(low[parent], low[u])
        if parent == root:
            root_children += 1
        elif low[u] >= disc[parent]:
            cuts.add(parent)

    if root_children >= 2:
        cuts.add(root)
    return cuts


def connector_indices(graph: SocialGraph, *, workers: int = 1) -> list[int]:
    """Return the person index of every connector, in ascending order.

    A connector is a person whose removal splits their friends into more
    connected components. People with at most one friend are never
    connectors.

    Args:
        graph: The graph to analyze (read only).
        workers: Number of threads; components are distributed across them.
    """
    roots = [component[0] for component in connected_components(graph) if len(component) > 2]

    if workers > 1 and len(roots) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            per_component = list(pool.map(lambda r: component_cut_vertices(graph, r), roots))
    else:
        per_component = [component_cut_vertices(graph, r) for r in roots]

    candidates: list[int] = []
    for cuts in per_component:
        candidates.extend(cuts)

    return [i for i in sorted(candidates) if graph.degree(i) > 1]


def find_connectors(graph: SocialGraph, *, workers: int = 1) -> list[str]:
    """Return the names of every connector, ordered by person index."""
    return [graph.name_of(i) for i in connector_indices(graph, workers=workers)]
