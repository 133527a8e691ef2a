"""Extract and resolve nodes: turn a graph question into an operation plus people."""

from __future__ import annotations

from typing import Any

from netnav.core.resolver import resolve
from netnav.models.schemas import VisualizationAction
from netnav.services.collaborators import IntentExtractor
from netnav.utils.exceptions import InsufficientEntities
from netnav.utils.logging import get_logger

logger = get_logger(__name__)

MIN_ENTITIES: dict[str, int] = {
    "find_path": 2,
    "select_node": 1,
    "find_similar": 1,
    "find_potential_connections": 1,
}


def check_arity(operation: str, entities: list[str]) -> None:
    required = MIN_ENTITIES.get(operation, 0)
    if len(entities) < required:
        raise InsufficientEntities(operation, required, len(entities))


def unidentified_message(dropped: list[str]) -> str:
    if dropped:
        quoted = ", ".join(f'"{name}"' for name in dropped)
        return f"I couldn't identify a person matching {quoted} in the network. Could you check the name?"
    return "I couldn't identify a person in your question. Could you mention who you mean?"


async def extract_node(state: dict[str, Any], *, extractor: IntentExtractor) -> dict[str, Any]:
    snapshot = state["snapshot"]
    intent = await extractor.extract(
        state["clean_text"],
        state.get("history", []),
        state["current_user"].name,
        snapshot.names,
    )
    logger.info(
        "intent_extracted",
        operation=intent.operation,
        entity_count=len(intent.entities),
        confidence=intent.confidence,
    )
    return {"intent": intent, "operation": intent.operation}


async def resolve_node(state: dict[str, Any]) -> dict[str, Any]:
    intent = state["intent"]
    resolved = resolve(
        intent.entities,
        state["snapshot"].names,
        state["current_user"].name,
        intent.operation,
    )
    updates: dict[str, Any] = {
        "entities": resolved.names,
        "dropped_entities": resolved.dropped,
        "short_circuited": False,
    }

    try:
        check_arity(intent.operation, resolved.names)
    except InsufficientEntities as exc:
        logger.info(
            "insufficient_entities",
            operation=exc.operation,
            required=exc.required,
            found=exc.found,
        )
        updates.update(
            short_circuited=True,
            response_text=unidentified_message(resolved.dropped),
            visualization_action=VisualizationAction(kind="none"),
        )
    return updates
