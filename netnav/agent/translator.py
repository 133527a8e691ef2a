"""Map operation results to visualization actions for the graph canvas."""

from __future__ import annotations

from typing import Callable

from netnav.models.results import (
    BridgeResult,
    GeneralResult,
    OperationResult,
    PathResult,
    PotentialConnectionsResult,
    RankResult,
    RecommendResult,
    SelectResult,
    SimilarResult,
)
from netnav.models.schemas import VisualizationAction

HIGHLIGHT_TOP_RANKED = 5


def _nodes(ids: list[str]) -> VisualizationAction:
    return VisualizationAction(kind="highlight_nodes", node_ids=list(dict.fromkeys(ids)))


def _path(result: PathResult) -> VisualizationAction:
    return VisualizationAction(
        kind="highlight_path",
        node_ids=list(result.path),
        edge_ids=[e.id for e in result.edges],
    )


def _rank(result: RankResult) -> VisualizationAction:
    return _nodes([r.person.id for r in result.ranked[:HIGHLIGHT_TOP_RANKED]])


def _recommend(result: RecommendResult) -> VisualizationAction:
    return _nodes([r.person.id for r in result.recommendations])


def _similar(result: SimilarResult) -> VisualizationAction:
    target = [result.target.id] if result.target else []
    return _nodes(target + [p.id for p in result.similar])


def _potential(result: PotentialConnectionsResult) -> VisualizationAction:
    target = [result.target.id] if result.target else []
    return _nodes(target + [p.id for p in result.candidates])


def _bridge(result: BridgeResult) -> VisualizationAction:
    return _nodes([p.id for p in result.bridges])


def _select(result: SelectResult) -> VisualizationAction:
    return _nodes([p.id for p in result.matches])


def _general(result: GeneralResult) -> VisualizationAction:
    return VisualizationAction(kind="none")


_RULES: dict[type, Callable] = {
    PathResult: _path,
    RankResult: _rank,
    RecommendResult: _recommend,
    SimilarResult: _similar,
    PotentialConnectionsResult: _potential,
    BridgeResult: _bridge,
    SelectResult: _select,
    GeneralResult: _general,
}


def to_visualization_action(result: OperationResult | None) -> VisualizationAction:
    """Total, side-effect-free mapping; anything unrecognized yields ``none``."""
    rule = _RULES.get(type(result))
    if rule is None:
        return VisualizationAction(kind="none")
    return rule(result)
