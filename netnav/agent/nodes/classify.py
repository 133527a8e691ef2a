"""Classify node: picks graph, relational or knowledge handling for a question."""

from __future__ import annotations

from typing import Any

from netnav.models.schemas import CATEGORIES
from netnav.services.collaborators import Classifier
from netnav.utils.exceptions import ClassificationAmbiguous
from netnav.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CATEGORY = "knowledge_qa"


def coerce_category(label: object) -> str:
    """Normalize a classifier label, raising if it is not a known category."""
    if not isinstance(label, str):
        raise ClassificationAmbiguous(label)
    normalized = label.strip().strip("\"'`.").lower().replace("-", "_").replace(" ", "_")
    if normalized not in CATEGORIES:
        raise ClassificationAmbiguous(label)
    return normalized


async def classify_node(state: dict[str, Any], *, classifier: Classifier) -> dict[str, Any]:
    label = await classifier.classify(state["clean_text"], state.get("history", []))
    try:
        category = coerce_category(label)
    except ClassificationAmbiguous as exc:
        logger.info("classification_degraded", label=str(exc.label)[:100], fallback=DEFAULT_CATEGORY)
        category = DEFAULT_CATEGORY

    logger.info("query_classified", category=category)
    return {"category": category}
