"""Delegate nodes: hand relational and knowledge questions to external answerers."""

from __future__ import annotations

from typing import Any

from netnav.models.schemas import VisualizationAction
from netnav.services.collaborators import KnowledgeAnswerer, RelationalAnswerer
from netnav.utils.logging import get_logger

logger = get_logger(__name__)


async def delegate_relational_node(
    state: dict[str, Any], *, answerer: RelationalAnswerer
) -> dict[str, Any]:
    text = await answerer.answer(state["clean_text"], state.get("history", []))
    logger.info("relational_answer_received", length=len(text))
    return {
        "operation": "relational_query",
        "response_text": text,
        "visualization_action": VisualizationAction(kind="none"),
    }


async def delegate_knowledge_node(
    state: dict[str, Any], *, answerer: KnowledgeAnswerer
) -> dict[str, Any]:
    text = await answerer.answer(state["clean_text"], state.get("history", []))
    logger.info("knowledge_answer_received", length=len(text))
    return {
        "operation": "knowledge_qa",
        "response_text": text,
        "visualization_action": VisualizationAction(kind="none"),
    }
