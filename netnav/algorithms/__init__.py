"""Graph operations over a snapshot, dispatched by operation tag."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Awaitable, Callable

from netnav.algorithms.bridges import find_bridges
from netnav.algorithms.influence import rank_nodes
from netnav.algorithms.recommend import recommend_people
from netnav.algorithms.selection import select_by_name
from netnav.algorithms.shortest_path import shortest_path
from netnav.algorithms.similarity import find_potential_connections, find_similar
from netnav.models.graph import GraphSnapshot
from netnav.models.results import GeneralResult, OperationResult
from netnav.models.schemas import IntentParameters

if TYPE_CHECKING:
    from netnav.services.collaborators import SimilarityService


@dataclass(frozen=True)
class OperationContext:
    snapshot: GraphSnapshot
    entities: list[str]
    current_user_name: str
    similarity: SimilarityService
    parameters: IntentParameters = field(default_factory=IntentParameters)


async def _find_path(ctx: OperationContext) -> OperationResult:
    return shortest_path(ctx.entities, ctx.snapshot, ctx.parameters.connection_type)


async def _rank_nodes(ctx: OperationContext) -> OperationResult:
    return rank_nodes(ctx.snapshot, ctx.parameters.topic)


async def _recommend_person(ctx: OperationContext) -> OperationResult:
    return recommend_people(ctx.current_user_name, ctx.snapshot)


async def _find_similar(ctx: OperationContext) -> OperationResult:
    return await find_similar(ctx.entities, ctx.snapshot, ctx.similarity)


async def _find_bridge(ctx: OperationContext) -> OperationResult:
    return find_bridges(ctx.snapshot)


async def _select_node(ctx: OperationContext) -> OperationResult:
    return select_by_name(ctx.entities, ctx.snapshot)


async def _find_potential_connections(ctx: OperationContext) -> OperationResult:
    return await find_potential_connections(ctx.entities, ctx.snapshot, ctx.similarity)


OPERATION_HANDLERS: dict[str, Callable[[OperationContext], Awaitable[OperationResult]]] = {
    "find_path": _find_path,
    "rank_nodes": _rank_nodes,
    "recommend_person": _recommend_person,
    "find_similar": _find_similar,
    "find_bridge": _find_bridge,
    "select_node": _select_node,
    "find_potential_connections": _find_potential_connections,
}


async def execute_operation(operation: str, ctx: OperationContext) -> OperationResult:
    """Run the operation's algorithm; unknown operations yield an empty result."""
    handler = OPERATION_HANDLERS.get(operation)
    if handler is None:
        return GeneralResult()
    return await handler(ctx)


__all__ = [
    "OPERATION_HANDLERS",
    "OperationContext",
    "execute_operation",
    "find_bridges",
    "find_potential_connections",
    "find_similar",
    "rank_nodes",
    "recommend_people",
    "select_by_name",
    "shortest_path",
]
