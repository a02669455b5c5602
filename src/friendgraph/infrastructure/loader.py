"""Graph file loader — parses the friendship text format into a SocialGraph.

Format::

    <n>
    name|y|school      (person attending a school)
    name|n             (person without a school)
    ...                (exactly n person lines)
    nameA|nameB        (friendship lines until end of file)

Blank lines are skipped and fields are stripped. Names and schools keep
their case; the ``y``/``n`` flag does not.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from friendgraph.domain.graph import GraphError, SocialGraph

logger = logging.getLogger(__name__)

SEPARATOR = "|"


class GraphFormatError(GraphError):
    """The graph text is malformed. ``line`` is 1-based, or None if unknown."""

    def __init__(self, message: str, line: int | None = None) -> None:
        super().__init__(f"line {line}: {message}" if line is not None else message)
        self.line = line


def _numbered(lines: Iterable[str]) -> Iterator[tuple[int, str]]:
    for lineno, raw in enumerate(lines, start=1):
        text = raw.strip()
        if text:
            yield lineno, text


def _parse_person(text: str, lineno: int) -> tuple[str, str]:
    fields = [f.strip() for f in text.split(SEPARATOR)]
    name = fields[0]
    if not name:
        raise GraphFormatError("Person line has an empty name", lineno)
    flag = fields[1].lower() if len(fields) > 1 else ""
    if flag == "y" and len(fields) == 3 and fields[2]:
        return name, fields[2]
    if flag == "n" and len(fields) == 2:
        return name, ""
    raise GraphFormatError(f"Malformed person line: {text!r}", lineno)


def parse_graph(lines: Iterable[str]) -> SocialGraph:
    """Build a SocialGraph from the lines of a graph file."""
    rows = _numbered(lines)

    header = next(rows, None)
    if header is None:
        raise GraphFormatError("Graph file is empty")
    lineno, text = header
    try:
        count = int(text)
    except ValueError:
        raise GraphFormatError(f"Expected person count, got {text!r}", lineno) from None
    if count < 0:
        raise GraphFormatError(f"Person count cannot be negative: {count}", lineno)

    people: list[tuple[str, str]] = []
    names: dict[str, int] = {}
    for _ in range(count):
        row = next(rows, None)
        if row is None:
            raise GraphFormatError(f"Expected {count} people, found {len(people)}")
        lineno, text = row
        name, school = _parse_person(text, lineno)
        if name in names:
            raise GraphFormatError(
                f"Duplicate person {name!r} (first defined on line {names[name]})", lineno
            )
        names[name] = lineno
        people.append((name, school))

    friendships: list[tuple[str, str]] = []
    for lineno, text in rows:
        fields = [f.strip() for f in text.split(SEPARATOR)]
        if len(fields) != 2 or not all(fields):
            raise GraphFormatError(f"Malformed friendship line: {text!r}", lineno)
        a, b = fields
        for name in (a, b):
            if name not in names:
                raise GraphFormatError(f"Friendship refers to unknown person {name!r}", lineno)
        if a == b:
            raise GraphFormatError(f"Person cannot befriend themselves: {a!r}", lineno)
        friendships.append((a, b))

    graph = SocialGraph.from_edges(people, friendships)
    logger.debug(
        "Parsed graph: %d people, %d friendships", len(graph), graph.friendship_count()
    )
    return graph


def load_graph(path: Path) -> SocialGraph:
    """Read and parse the graph file at *path*.

    Raises:
        FileNotFoundError: *path* does not exist.
        OSError: *path* cannot be read (a directory, no permission).
        GraphFormatError: the file content is malformed or not UTF-8.
    """
    logger.debug("Loading graph from %s", path)
    raw = path.read_bytes()
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        line = raw.count(b"\n", 0, exc.start) + 1
        msg = f"Not valid UTF-8 (byte {raw[exc.start]:#04x})"
        raise GraphFormatError(msg, line) from exc
    return parse_graph(text.split("\n"))
