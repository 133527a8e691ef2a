"""High-degree "bridge" candidates.

This is a degree threshold, not a cut-vertex or betweenness computation.
"""

from __future__ import annotations

from netnav.models.graph import GraphSnapshot
from netnav.models.results import BridgeResult, ResultStatus

BRIDGE_MIN_DEGREE = 3
BRIDGE_LIMIT = 5


def find_bridges(snapshot: GraphSnapshot) -> BridgeResult:
    bridges = [p for p in snapshot.nodes if snapshot.degree(p.id) >= BRIDGE_MIN_DEGREE]
    bridges = bridges[:BRIDGE_LIMIT]
    if not bridges:
        return BridgeResult(
            status=ResultStatus.NO_CANDIDATES,
            min_degree=BRIDGE_MIN_DEGREE,
            message="No one in the network has enough connections to act as a bridge.",
        )
    return BridgeResult(
        bridges=bridges,
        min_degree=BRIDGE_MIN_DEGREE,
        message=f"Found {len(bridges)} well-connected people.",
    )
