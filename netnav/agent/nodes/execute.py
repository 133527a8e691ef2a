"""Execute node: runs the graph algorithm for the extracted operation."""

from __future__ import annotations

import time
from typing import Any

from netnav.algorithms import OperationContext, execute_operation
from netnav.services.collaborators import SimilarityService
from netnav.utils.logging import get_logger

logger = get_logger(__name__)


async def execute_node(state: dict[str, Any], *, similarity: SimilarityService) -> dict[str, Any]:
    intent = state["intent"]
    ctx = OperationContext(
        snapshot=state["snapshot"],
        entities=state.get("entities", []),
        current_user_name=state["current_user"].name,
        similarity=similarity,
        parameters=intent.parameters,
    )

    start = time.monotonic()
    result = await execute_operation(intent.operation, ctx)
    elapsed_ms = int((time.monotonic() - start) * 1000)

    logger.info(
        "operation_executed",
        operation=intent.operation,
        status=result.status.value,
        elapsed_ms=elapsed_ms,
    )
    return {"result": result}
