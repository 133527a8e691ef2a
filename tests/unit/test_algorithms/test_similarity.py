"""Unit tests for similarity-backed operations and name selection."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from netnav.algorithms import OperationContext, execute_operation
from netnav.algorithms.selection import select_by_name
from netnav.algorithms.similarity import find_potential_connections, find_similar
from netnav.models.results import GeneralResult, PathResult, ResultStatus
from netnav.models.schemas import IntentParameters


@pytest.mark.asyncio
async def test_find_similar_filters_target_and_unknown_ids(network, similarity, people):
    similarity.find_similar = AsyncMock(
        return_value=["p-bob", "p-frank", "p-missing", people["alice"]]
    )

    result = await find_similar(["Bob"], network, similarity)

    assert result.ok
    assert result.target.id == "p-bob"
    assert [p.id for p in result.similar] == ["p-frank", "p-alice"]
    similarity.find_similar.assert_awaited_once_with("p-bob", 5)


@pytest.mark.asyncio
async def test_find_similar_unknown_target(network, similarity):
    result = await find_similar(["Zed"], network, similarity)

    assert result.status is ResultStatus.ENTITY_NOT_FOUND
    similarity.find_similar.assert_not_awaited()


@pytest.mark.asyncio
async def test_find_similar_without_candidates(network, similarity):
    result = await find_similar(["Grace Kim"], network, similarity)

    assert result.status is ResultStatus.NO_CANDIDATES
    assert result.target.id == "p-grace"


@pytest.mark.asyncio
async def test_potential_connections_skip_existing_ties(network, similarity):
    similarity.find_similar = AsyncMock(return_value=["p-frank", "p-dave"])

    result = await find_potential_connections(["Alice Chen"], network, similarity)

    assert result.ok
    assert [p.id for p in result.similar] == ["p-frank", "p-dave"]
    assert [p.id for p in result.candidates] == ["p-carol"]

    excluded = set(network.neighbors("p-alice")) | {"p-alice", "p-frank", "p-dave"}
    assert not excluded & {p.id for p in result.candidates}
    similarity.find_similar.assert_awaited_once_with("p-alice", 3)


@pytest.mark.asyncio
async def test_potential_connections_none_left(network, similarity):
    similarity.find_similar = AsyncMock(return_value=["p-erin"])

    result = await find_potential_connections(["Alice Chen"], network, similarity)

    assert result.status is ResultStatus.NO_CANDIDATES
    assert result.candidates == []


def test_select_by_name_collects_all_matches(network):
    result = select_by_name(["bob", "Carol"], network)

    assert [p.id for p in result.matches] == ["p-bob", "p-carol"]
    assert result.query == ["bob", "Carol"]


def test_select_by_name_not_found(network):
    result = select_by_name(["Zed"], network)

    assert result.status is ResultStatus.ENTITY_NOT_FOUND
    assert result.message == (
        "I've searched the network, but I could not find anyone matching the name 'Zed'."
    )


@pytest.mark.asyncio
async def test_execute_operation_passes_connection_type(network, similarity):
    ctx = OperationContext(
        snapshot=network,
        entities=["Alice Chen", "Dave Okafor"],
        current_user_name="Alice Chen",
        similarity=similarity,
        parameters=IntentParameters(connection_type="STUDY"),
    )

    result = await execute_operation("find_path", ctx)

    assert isinstance(result, PathResult)
    assert result.status is ResultStatus.NO_PATH


@pytest.mark.asyncio
async def test_execute_operation_general_is_empty(network, similarity):
    ctx = OperationContext(
        snapshot=network, entities=[], current_user_name="Alice Chen", similarity=similarity
    )

    result = await execute_operation("general", ctx)

    assert isinstance(result, GeneralResult)
    assert result.ok
