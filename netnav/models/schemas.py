"""Pydantic models for data flowing into and out of the query pipeline."""

from __future__ import annotations

from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, Field

Category = Literal["graph_query", "relational_query", "knowledge_qa"]
Operation = Literal[
    "find_path",
    "rank_nodes",
    "recommend_person",
    "find_similar",
    "find_bridge",
    "select_node",
    "find_potential_connections",
    "general",
]

CATEGORIES: tuple[str, ...] = get_args(Category)
OPERATIONS: tuple[str, ...] = get_args(Operation)


# ── Conversation ─────────────────────────────────────────────────────


class HistoryMessage(BaseModel):
    sender: Literal["user", "assistant"]
    message: str


# ── Extraction ───────────────────────────────────────────────────────


class IntentParameters(BaseModel):
    model_config = ConfigDict(extra="forbid")

    topic: str | None = None
    limit: int | None = None
    connection_type: str | None = None
    target_person: str | None = None


class IntentRequest(BaseModel):
    """Structured output of the intent extractor, validated strictly."""

    model_config = ConfigDict(extra="forbid")

    category: Category = "graph_query"
    operation: Operation
    entities: list[str] = Field(default_factory=list)
    parameters: IntentParameters = Field(default_factory=IntentParameters)
    confidence: float | None = Field(default=None, description="0.0 to 1.0")


# ── Output ───────────────────────────────────────────────────────────


class VisualizationAction(BaseModel):
    kind: Literal["highlight_path", "highlight_nodes", "none"]
    node_ids: list[str] = Field(default_factory=list)
    edge_ids: list[str] = Field(default_factory=list)


class QueryResponse(BaseModel):
    response_text: str
    operation: str
    category: str | None = None
    visualization_action: VisualizationAction | None = None
    processing_time_ms: int = 0
    resolved_entities: list[str] = Field(default_factory=list)
