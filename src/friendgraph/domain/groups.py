"""School groups — connected components of the same-school induced subgraph."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from friendgraph.domain.graph import SocialGraph


def school_groups(graph: SocialGraph, school: str) -> list[list[str]]:
    """Return the maximal friend groups of people attending *school*.

    Two people share a group only if a chain of friends connects them
    without ever leaving the school. People from other schools are never
    members and never serve as intermediate hops.

    Groups are ordered by the index of their first member; names within a
    group follow BFS discovery order. An empty *school* means "no school",
    which is never a group.
    """
    if not school:
        return []

    visited = [False] * len(graph)
    groups: list[list[str]] = []

    for start, person in enumerate(graph):
        if visited[start]:
            continue
        if person.school != school:
            visited[start] = True
            continue

        members: list[str] = []
        recorded: set[int] = set()
        queue: deque[int] = deque([start])
        while queue:
            current = queue.popleft()
            visited[current] = True
            if current in recorded:
                continue
            recorded.add(current)
            members.append(graph.name_of(current))
            for friend in graph.friends_of(current):
                # Other schools are left untouched for their own groups.
                if not visited[friend] and graph.person_at(friend).school == school:
                    queue.append(friend)
        groups.append(members)

    return groups
