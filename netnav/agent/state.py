"""Per-query state schema for the orchestrator graph."""

from __future__ import annotations

from typing import TypedDict

from netnav.models.graph import GraphSnapshot, Person
from netnav.models.results import AnyResult
from netnav.models.schemas import HistoryMessage, IntentRequest, VisualizationAction


class QueryState(TypedDict, total=False):
    """Everything one query accumulates on its way through the graph.

    Nodes return partial updates; nothing here outlives the request.
    """

    # ── Input (set once at start) ──
    text: str
    clean_text: str
    current_user: Person
    snapshot: GraphSnapshot
    history: list[HistoryMessage]

    # ── Routing ──
    category: str
    intent: IntentRequest
    operation: str

    # ── Resolution ──
    entities: list[str]
    dropped_entities: list[str]
    short_circuited: bool

    # ── Output ──
    result: AnyResult
    response_text: str
    visualization_action: VisualizationAction | None
