"""Synthesize node: builds the answer text and the visualization action."""

from __future__ import annotations

from typing import Any

from netnav.agent.explainer import explain
from netnav.agent.translator import to_visualization_action
from netnav.services.collaborators import TextGenerator


async def synthesize_node(state: dict[str, Any], *, generator: TextGenerator) -> dict[str, Any]:
    result = state["result"]
    text = await explain(
        result,
        question=state["clean_text"],
        current_user_name=state["current_user"].name,
        generator=generator,
    )
    return {
        "response_text": text,
        "visualization_action": to_visualization_action(result),
    }
