"""Integration tests for the compiled orchestrator graph."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from netnav.agent.graph import build_query_graph, compile_query_graph
from netnav.models.results import RankResult
from netnav.models.schemas import IntentParameters, IntentRequest


def test_graph_builds_without_error(collaborators):
    compiled = build_query_graph(collaborators).compile()

    node_names = set(compiled.nodes.keys())
    assert {
        "classify",
        "extract",
        "resolve",
        "execute",
        "synthesize",
        "delegate_relational",
        "delegate_knowledge",
    } <= node_names


@pytest.mark.asyncio
async def test_rank_question_flows_through_generator(collaborators, current_user, network):
    collaborators.extractor.extract = AsyncMock(
        return_value=IntentRequest(
            operation="rank_nodes", parameters=IntentParameters(topic="genomics")
        )
    )
    graph = compile_query_graph(collaborators)

    final = await graph.ainvoke(
        {
            "text": "Who leads in genomics?",
            "clean_text": "Who leads in genomics?",
            "current_user": current_user,
            "snapshot": network,
            "history": [],
        }
    )

    assert final["category"] == "graph_query"
    assert final["operation"] == "rank_nodes"
    assert isinstance(final["result"], RankResult)
    assert final["result"].topic == "genomics"
    assert final["response_text"] == "Generated explanation."
    assert final["visualization_action"].node_ids[:3] == ["p-bob", "p-carol", "p-frank"]


@pytest.mark.asyncio
async def test_potential_connections_use_similarity(collaborators, current_user, network):
    collaborators.extractor.extract = AsyncMock(
        return_value=IntentRequest(operation="find_potential_connections", entities=["me"])
    )
    collaborators.similarity.find_similar = AsyncMock(return_value=["p-frank", "p-dave"])
    graph = compile_query_graph(collaborators)

    final = await graph.ainvoke(
        {
            "text": "Who should I meet?",
            "clean_text": "Who should I meet?",
            "current_user": current_user,
            "snapshot": network,
            "history": [],
        }
    )

    assert final["entities"] == ["Alice Chen"]
    assert final["visualization_action"].node_ids == ["p-alice", "p-carol"]
    assert "you could connect with Dr. Carol Li" in final["response_text"]


@pytest.mark.asyncio
async def test_short_circuit_skips_execution(collaborators, current_user, network):
    collaborators.extractor.extract = AsyncMock(
        return_value=IntentRequest(operation="find_path", entities=[])
    )
    graph = compile_query_graph(collaborators)

    final = await graph.ainvoke(
        {
            "text": "How do they connect?",
            "clean_text": "How do they connect?",
            "current_user": current_user,
            "snapshot": network,
            "history": [],
        }
    )

    assert final["short_circuited"] is True
    assert "result" not in final
    assert final["visualization_action"].kind == "none"
