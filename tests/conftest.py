"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from netnav.models.graph import Connection, GraphSnapshot, Person


@pytest.fixture(autouse=True)
def _env_setup(monkeypatch):
    """Set required environment variables for tests."""
    monkeypatch.setenv("OPENROUTER_API_KEY", "test-key")
    monkeypatch.setenv("NEO4J_URI", "bolt://localhost:7687")
    monkeypatch.setenv("NEO4J_USER", "neo4j")
    monkeypatch.setenv("NEO4J_PASSWORD", "test")
    monkeypatch.setenv("REDIS_URL", "redis://localhost:6379/0")
    monkeypatch.setenv("LANGSMITH_API_KEY", "")
    monkeypatch.setenv("LANGCHAIN_TRACING_V2", "false")


@pytest.fixture
def settings():
    from netnav.config import Settings

    return Settings(
        OPENROUTER_API_KEY="test-key",
        LANGSMITH_API_KEY="",
        LANGCHAIN_TRACING_V2=False,
    )


@pytest.fixture
def mock_registry(settings):
    """LLM registry with mocked models."""
    from netnav.models.llm_registry import MODEL_CONFIG, LLMRegistry

    with patch.object(LLMRegistry, "__init__", lambda self, s: None):
        registry = LLMRegistry.__new__(LLMRegistry)
        registry._settings = settings
        registry._models = {}
        registry._slug_cache = {}
        registry._call_stats = {}

        mock_model = MagicMock()
        mock_model.ainvoke = AsyncMock(return_value=MagicMock(content="test response"))
        mock_model.model_name = "test-model"

        for task in MODEL_CONFIG:
            registry._models[task] = mock_model
            registry._call_stats[task] = {"calls": 0, "tokens": 0}

        return registry


@pytest.fixture
def mock_router(mock_registry):
    from netnav.models.model_router import ModelRouter

    return ModelRouter(mock_registry)


# ── Network fixtures ─────────────────────────────────────────────────


def make_snapshot(names: list[str], pairs: list[tuple[str, str]], **edge_kwargs) -> GraphSnapshot:
    """Snapshot whose person ids equal their names, edges named e1..eN."""
    nodes = [Person(id=n, name=n) for n in names]
    edges = [
        Connection(id=f"e{i}", person_a_id=a, person_b_id=b, **edge_kwargs)
        for i, (a, b) in enumerate(pairs, start=1)
    ]
    return GraphSnapshot(nodes=nodes, edges=edges)


@pytest.fixture
def snapshot_factory():
    return make_snapshot


@pytest.fixture
def abc_snapshot() -> GraphSnapshot:
    """A - B - C chain."""
    return make_snapshot(["A", "B", "C"], [("A", "B"), ("B", "C")])


@pytest.fixture
def people() -> dict[str, Person]:
    return {
        "alice": Person(
            id="p-alice",
            name="Alice Chen",
            title="Research Scientist",
            company="Acme Robotics",
            expertise_areas=["Machine Learning", "Robotics"],
            interests=["Climbing"],
        ),
        "bob": Person(
            id="p-bob",
            name="Bob Martinez",
            title="Engineering Manager",
            company="Acme Robotics",
            expertise_areas=["Machine Learning"],
        ),
        "carol": Person(
            id="p-carol",
            name="Dr. Carol Li",
            title="Professor",
            institution="MIT",
            expertise_areas=["Genomics"],
        ),
        "dave": Person(id="p-dave", name="Dave Okafor", expertise_areas=["Robotics"]),
        "erin": Person(id="p-erin", name="Erin Walsh", expertise_areas=["Finance"]),
        "frank": Person(
            id="p-frank",
            name="Frank Osei",
            expertise_areas=["Genomics", "Machine Learning"],
            interests=["Climbing"],
        ),
        "grace": Person(id="p-grace", name="Grace Kim", expertise_areas=["Design"]),
    }


@pytest.fixture
def network(people) -> GraphSnapshot:
    """Small professional network; Grace is isolated, Bob is the hub."""
    edges = [
        Connection(
            id="c1",
            person_a_id="p-alice",
            person_b_id="p-bob",
            connection_type="WORK",
            notes="Worked together at company Acme Robotics",
        ),
        Connection(
            id="c2",
            person_a_id="p-bob",
            person_b_id="p-carol",
            connection_type="STUDY",
            notes="Studied together at MIT",
        ),
        Connection(id="c3", person_a_id="p-bob", person_b_id="p-dave", connection_type="WORK"),
        Connection(id="c4", person_a_id="p-bob", person_b_id="p-erin", connection_type="OTHER"),
        Connection(id="c5", person_a_id="p-carol", person_b_id="p-frank", connection_type="WORK"),
        Connection(id="c6", person_a_id="p-dave", person_b_id="p-frank", connection_type="OTHER"),
    ]
    return GraphSnapshot(nodes=list(people.values()), edges=edges)


@pytest.fixture
def current_user(people) -> Person:
    return people["alice"]


# ── Collaborator fakes ───────────────────────────────────────────────


@pytest.fixture
def similarity():
    """Similarity service returning canned ids per person."""
    service = MagicMock()
    service.find_similar = AsyncMock(return_value=[])
    return service


@pytest.fixture
def generator():
    service = MagicMock()
    service.generate = AsyncMock(return_value="Generated explanation.")
    return service


@pytest.fixture
def collaborators(similarity, generator):
    from netnav.agent.graph import Collaborators

    classifier = MagicMock()
    classifier.classify = AsyncMock(return_value="graph_query")
    extractor = MagicMock()
    extractor.extract = AsyncMock()
    relational = MagicMock()
    relational.answer = AsyncMock(return_value="They worked together at Acme.")
    knowledge = MagicMock()
    knowledge.answer = AsyncMock(return_value="Carol studies genomics.")

    return Collaborators(
        classifier=classifier,
        extractor=extractor,
        similarity=similarity,
        generator=generator,
        relational=relational,
        knowledge=knowledge,
    )
