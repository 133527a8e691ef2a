"""Conditional edge routing for the orchestrator graph."""

from __future__ import annotations

from typing import Any

from langgraph.graph import END

_CATEGORY_ROUTES = {
    "graph_query": "extract",
    "relational_query": "delegate_relational",
    "knowledge_qa": "delegate_knowledge",
}


def route_after_classify(state: dict[str, Any]) -> str:
    """Graph questions go through extraction; the rest are delegated."""
    return _CATEGORY_ROUTES.get(state.get("category", ""), "delegate_knowledge")


def route_after_resolve(state: dict[str, Any]) -> str:
    """Skip the algorithms entirely when resolution left too few people."""
    if state.get("short_circuited"):
        return END
    return "execute"
