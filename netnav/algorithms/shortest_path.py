"""Breadth-first shortest path between two people."""

from __future__ import annotations

from collections import deque

from netnav.models.graph import Connection, GraphSnapshot, Person
from netnav.models.results import PathResult, ResultStatus
from netnav.utils.exceptions import DataInconsistency, EntityNotFound
from netnav.utils.logging import get_logger

logger = get_logger(__name__)

NEED_TWO_NAMES = "I need two people's names to find a path. Please try again."
NO_PATH = "No path found between the specified individuals."
INCONSISTENT = (
    "The network data is inconsistent for this path, so I can't show it reliably."
)


def _bfs(
    snapshot: GraphSnapshot,
    start_id: str,
    end_id: str,
    connection_type: str | None,
) -> list[str] | None:
    parents: dict[str, str | None] = {start_id: None}
    queue: deque[str] = deque([start_id])
    while queue:
        current = queue.popleft()
        if current == end_id:
            path = [current]
            while (parent := parents[path[-1]]) is not None:
                path.append(parent)
            path.reverse()
            return path
        for neighbor in snapshot.neighbors(current, connection_type):
            if neighbor not in parents:
                parents[neighbor] = current
                queue.append(neighbor)
    return None


def _realize(
    snapshot: GraphSnapshot, path: list[str], connection_type: str | None
) -> tuple[list[Person], list[Connection]]:
    nodes = [p for p in (snapshot.person(pid) for pid in path) if p is not None]
    edges = [
        e
        for e in (
            snapshot.edge_between(a, b, connection_type) for a, b in zip(path, path[1:])
        )
        if e is not None
    ]
    if len(nodes) != len(path) or len(edges) != len(path) - 1:
        raise DataInconsistency(
            f"path of {len(path)} ids realized {len(nodes)} nodes and {len(edges)} edges"
        )
    return nodes, edges


def _lookup(snapshot: GraphSnapshot, name: str) -> Person:
    person = snapshot.find_by_name(name)
    if person is None:
        raise EntityNotFound(name)
    return person


def shortest_path(
    entities: list[str],
    snapshot: GraphSnapshot,
    connection_type: str | None = None,
) -> PathResult:
    usable = [e for e in entities if isinstance(e, str) and e.strip()]
    if len(usable) < 2:
        return PathResult(status=ResultStatus.INSUFFICIENT_ENTITIES, message=NEED_TWO_NAMES)

    try:
        start = _lookup(snapshot, usable[0])
        end = _lookup(snapshot, usable[1])
    except EntityNotFound as exc:
        return PathResult(status=ResultStatus.ENTITY_NOT_FOUND, message=str(exc))

    path = _bfs(snapshot, start.id, end.id, connection_type)
    if path is None:
        return PathResult(status=ResultStatus.NO_PATH, message=NO_PATH)

    try:
        nodes, edges = _realize(snapshot, path, connection_type)
    except DataInconsistency as exc:
        logger.warning("path_inconsistent", start=start.id, end=end.id, detail=str(exc))
        return PathResult(status=ResultStatus.DATA_INCONSISTENCY, message=INCONSISTENT)

    distance = len(path) - 1
    return PathResult(
        path=path,
        distance=distance,
        nodes=nodes,
        edges=edges,
        message=f"Found a path with {distance} degrees of separation.",
    )
