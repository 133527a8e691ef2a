"""Unit tests for the model router with fallback logic."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.messages import HumanMessage

from netnav.models.model_router import ModelRouter
from netnav.utils.exceptions import DownstreamFailure, ModelTimeoutError


def _failing_model(exc: Exception) -> MagicMock:
    model = MagicMock()
    model.ainvoke = AsyncMock(side_effect=exc)
    model.model_name = "failing"
    return model


@pytest.mark.asyncio
async def test_router_invokes_primary_model(mock_registry):
    mock_result = MagicMock()
    mock_result.content = "graph_query"
    mock_result.usage_metadata = {"total_tokens": 12}
    mock_registry.get_model("classifier").ainvoke = AsyncMock(return_value=mock_result)

    router = ModelRouter(mock_registry)
    result = await router.invoke("classifier", [HumanMessage(content="test")])

    assert result is mock_result
    assert mock_registry.stats["classifier"]["tokens"] == 12


@pytest.mark.asyncio
async def test_router_falls_back_on_failure(mock_registry):
    mock_registry._models["explainer"] = _failing_model(RuntimeError("boom"))

    fallback_result = MagicMock()
    fallback_result.content = "fallback response"
    fallback_result.usage_metadata = None

    fallback_model = MagicMock()
    fallback_model.ainvoke = AsyncMock(return_value=fallback_result)
    fallback_model.model_name = "fallback"
    mock_registry.get_fallback_chain = MagicMock(return_value=[fallback_model])

    router = ModelRouter(mock_registry)
    result = await router.invoke("explainer", [HumanMessage(content="test")])

    assert result is fallback_result


@pytest.mark.asyncio
async def test_router_raises_timeout_when_chain_times_out(mock_registry):
    mock_registry._models["classifier"] = _failing_model(asyncio.TimeoutError())
    mock_registry.get_fallback_chain = MagicMock(
        return_value=[_failing_model(asyncio.TimeoutError())]
    )

    router = ModelRouter(mock_registry)
    with pytest.raises(ModelTimeoutError):
        await router.invoke("classifier", [HumanMessage(content="test")])


@pytest.mark.asyncio
async def test_router_raises_downstream_failure_when_chain_fails(mock_registry):
    mock_registry._models["classifier"] = _failing_model(RuntimeError("boom"))
    mock_registry.get_fallback_chain = MagicMock(return_value=[])

    router = ModelRouter(mock_registry)
    with pytest.raises(DownstreamFailure, match="boom"):
        await router.invoke("classifier", [HumanMessage(content="test")])
