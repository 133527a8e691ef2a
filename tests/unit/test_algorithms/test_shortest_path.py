"""Unit tests for breadth-first shortest path."""

from __future__ import annotations

from collections import deque

import pytest

from netnav.algorithms.shortest_path import INCONSISTENT, NEED_TWO_NAMES, NO_PATH, shortest_path
from netnav.models.graph import GraphSnapshot
from netnav.models.results import ResultStatus


def _reference_distance(snapshot: GraphSnapshot, start: str, end: str) -> int | None:
    dist = {start: 0}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for neighbor in snapshot.neighbors(node):
            if neighbor not in dist:
                dist[neighbor] = dist[node] + 1
                queue.append(neighbor)
    return dist.get(end)


def test_path_through_intermediate(abc_snapshot):
    result = shortest_path(["A", "C"], abc_snapshot)

    assert result.ok
    assert result.path == ["A", "B", "C"]
    assert result.distance == 2
    assert [e.id for e in result.edges] == ["e1", "e2"]
    assert result.message == "Found a path with 2 degrees of separation."


def test_unknown_person_reported(abc_snapshot):
    result = shortest_path(["A", "Z"], abc_snapshot)

    assert result.status is ResultStatus.ENTITY_NOT_FOUND
    assert result.message == 'Could not find "Z" in the network.'
    assert result.path == []


@pytest.mark.parametrize("entities", [[], ["A"], ["A", "  "]])
def test_needs_two_names(abc_snapshot, entities):
    result = shortest_path(entities, abc_snapshot)

    assert result.status is ResultStatus.INSUFFICIENT_ENTITIES
    assert result.message == NEED_TWO_NAMES


def test_same_person_has_zero_distance(abc_snapshot):
    result = shortest_path(["B", "b"], abc_snapshot)

    assert result.ok
    assert result.path == ["B"]
    assert result.distance == 0
    assert result.edges == []


def test_disconnected_people(snapshot_factory):
    snapshot = snapshot_factory(["A", "B", "C", "D"], [("A", "B"), ("C", "D")])

    result = shortest_path(["A", "D"], snapshot)

    assert result.status is ResultStatus.NO_PATH
    assert result.message == NO_PATH


def test_names_match_case_insensitively(network):
    result = shortest_path(["alice chen", "FRANK OSEI"], network)

    assert result.ok
    assert result.path[0] == "p-alice"
    assert result.path[-1] == "p-frank"


def test_ties_follow_edge_order(snapshot_factory):
    # A-B-D and A-C-D are both length 2; A-B is listed first
    snapshot = snapshot_factory(
        ["A", "B", "C", "D"], [("A", "B"), ("A", "C"), ("C", "D"), ("B", "D")]
    )

    result = shortest_path(["A", "D"], snapshot)

    assert result.path == ["A", "B", "D"]


def test_distance_is_minimal_on_denser_graph(snapshot_factory):
    names = [str(i) for i in range(8)]
    pairs = [
        ("0", "1"), ("1", "2"), ("2", "3"), ("3", "4"), ("0", "5"),
        ("5", "4"), ("4", "6"), ("6", "7"), ("2", "7"),
    ]
    snapshot = snapshot_factory(names, pairs)

    for end in names:
        result = shortest_path(["0", end], snapshot)
        assert result.distance == _reference_distance(snapshot, "0", end)
        assert len(result.edges) == len(result.path) - 1


def test_path_edges_join_consecutive_nodes(network):
    result = shortest_path(["Alice Chen", "Frank Osei"], network)

    for i, edge in enumerate(result.edges):
        assert {edge.person_a_id, edge.person_b_id} == {result.path[i], result.path[i + 1]}
    assert [p.id for p in result.nodes] == result.path


def test_connection_type_filter(network):
    unrestricted = shortest_path(["Alice Chen", "Dave Okafor"], network)
    work_only = shortest_path(["Alice Chen", "Dave Okafor"], network, "WORK")
    study_only = shortest_path(["Alice Chen", "Dave Okafor"], network, "STUDY")

    assert unrestricted.distance == 2
    assert all(e.connection_type == "WORK" for e in work_only.edges)
    assert study_only.status is ResultStatus.NO_PATH


class _EdgelessLookupSnapshot(GraphSnapshot):
    def edge_between(self, a_id, b_id, connection_type=None):
        return None


def test_inconsistent_edges_reported(abc_snapshot):
    snapshot = _EdgelessLookupSnapshot(nodes=abc_snapshot.nodes, edges=abc_snapshot.edges)

    result = shortest_path(["A", "C"], snapshot)

    assert result.status is ResultStatus.DATA_INCONSISTENCY
    assert result.message == INCONSISTENT
    assert result.path == []
