"""SocialGraph — immutable arena of people addressed by integer index.

Friendships are stored as tuples of indices rather than references between
Person records. The graph is built once and never mutated, so any number of
analyses may read it concurrently.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from types import MappingProxyType


class GraphError(ValueError):
    """Raised when a social graph cannot be constructed."""


@dataclass(frozen=True, slots=True)
class Person:
    """A named member of the graph.

    Attributes:
        name: Unique, case-sensitive identity.
        school: School affiliation; empty string means no school.
        friends: Indices of direct friends in adjacency order.
    """

    name: str
    school: str = ""
    friends: tuple[int, ...] = ()

    @property
    def degree(self) -> int:
        return len(self.friends)


class SocialGraph:
    """Read-only view of people, their schools, and their friendships."""

    __slots__ = ("_index", "_people")

    def __init__(self, people: Sequence[Person]) -> None:
        index: dict[str, int] = {}
        for i, person in enumerate(people):
            if person.name in index:
                msg = f"Duplicate person name: {person.name!r}"
                raise GraphError(msg)
            index[person.name] = i

        size = len(people)
        for person in people:
            for f in person.friends:
                if not 0 <= f < size:
                    msg = f"Friend index {f} of {person.name!r} is out of range"
                    raise GraphError(msg)

        self._people: tuple[Person, ...] = tuple(people)
        self._index = MappingProxyType(index)

    @classmethod
    def from_edges(
        cls,
        people: Iterable[tuple[str, str]],
        friendships: Iterable[tuple[str, str]],
    ) -> SocialGraph:
        """Build a graph from ``(name, school)`` pairs and ``(name, name)`` friendships.

        Friendships are made symmetric here. A repeated pair is kept once;
        adjacency order follows the order friendships are given.
        """
        names: list[str] = []
        schools: list[str] = []
        index: dict[str, int] = {}
        for name, school in people:
            if name in index:
                msg = f"Duplicate person name: {name!r}"
                raise GraphError(msg)
            index[name] = len(names)
            names.append(name)
            schools.append(school)

        adjacency: list[list[int]] = [[] for _ in names]
        seen: set[tuple[int, int]] = set()
        for a, b in friendships:
            for name in (a, b):
                if name not in index:
                    msg = f"Friendship refers to unknown person: {name!r}"
                    raise GraphError(msg)
            ia, ib = index[a], index[b]
            if ia == ib:
                msg = f"Person cannot befriend themselves: {a!r}"
                raise GraphError(msg)
            key = (min(ia, ib), max(ia, ib))
            if key in seen:
                continue
            seen.add(key)
            adjacency[ia].append(ib)
            adjacency[ib].append(ia)

        return cls(
            [
                Person(name=name, school=school, friends=tuple(adj))
                for name, school, adj in zip(names, schools, adjacency, strict=True)
            ]
        )

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._people)

    def __iter__(self) -> Iterator[Person]:
        return iter(self._people)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def lookup(self, name: str) -> int | None:
        """Return the index of *name*, or None if nobody has that name."""
        return self._index.get(name)

    def person_at(self, index: int) -> Person:
        return self._people[index]

    def friends_of(self, index: int) -> tuple[int, ...]:
        return self._people[index].friends

    def degree(self, index: int) -> int:
        return len(self._people[index].friends)

    def name_of(self, index: int) -> str:
        return self._people[index].name

    # ------------------------------------------------------------------
    # Aggregates
    # ------------------------------------------------------------------

    def friendship_count(self) -> int:
        """Number of undirected friendships."""
        return sum(p.degree for p in self._people) // 2

    def schools(self) -> list[str]:
        """Sorted distinct school names (people without a school are skipped)."""
        return sorted({p.school for p in self._people if p.school})

    def edges(self) -> Iterator[tuple[int, int]]:
        """Yield each friendship once as ``(lower_index, higher_index)``."""
        for i, person in enumerate(self._people):
            for f in person.friends:
                if i < f:
                    yield i, f
