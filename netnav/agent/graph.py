"""Orchestrator StateGraph: wires classification, extraction, execution and synthesis."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Any

from langgraph.graph import END, START, StateGraph

from netnav.agent.edges import route_after_classify, route_after_resolve
from netnav.agent.nodes import (
    classify_node,
    delegate_knowledge_node,
    delegate_relational_node,
    execute_node,
    extract_node,
    resolve_node,
    synthesize_node,
)
from netnav.agent.state import QueryState
from netnav.services.collaborators import (
    Classifier,
    IntentExtractor,
    KnowledgeAnswerer,
    RelationalAnswerer,
    SimilarityService,
    TextGenerator,
)


@dataclass(frozen=True)
class Collaborators:
    """External services the orchestrator calls out to."""

    classifier: Classifier
    extractor: IntentExtractor
    similarity: SimilarityService
    generator: TextGenerator
    relational: RelationalAnswerer
    knowledge: KnowledgeAnswerer


def build_query_graph(collaborators: Collaborators) -> StateGraph:
    """Build the orchestrator StateGraph.

    Each node is a partial-applied async function that receives its
    collaborator via closure, so the compiled graph is stateless and can
    serve concurrent queries.
    """
    _classify = functools.partial(classify_node, classifier=collaborators.classifier)
    _extract = functools.partial(extract_node, extractor=collaborators.extractor)
    _execute = functools.partial(execute_node, similarity=collaborators.similarity)
    _synthesize = functools.partial(synthesize_node, generator=collaborators.generator)
    _relational = functools.partial(delegate_relational_node, answerer=collaborators.relational)
    _knowledge = functools.partial(delegate_knowledge_node, answerer=collaborators.knowledge)

    graph = StateGraph(QueryState)

    graph.add_node("classify", _classify)
    graph.add_node("extract", _extract)
    graph.add_node("resolve", resolve_node)
    graph.add_node("execute", _execute)
    graph.add_node("synthesize", _synthesize)
    graph.add_node("delegate_relational", _relational)
    graph.add_node("delegate_knowledge", _knowledge)

    graph.add_edge(START, "classify")
    graph.add_conditional_edges(
        "classify",
        route_after_classify,
        {
            "extract": "extract",
            "delegate_relational": "delegate_relational",
            "delegate_knowledge": "delegate_knowledge",
        },
    )
    graph.add_edge("extract", "resolve")
    graph.add_conditional_edges(
        "resolve",
        route_after_resolve,
        {"execute": "execute", END: END},
    )
    graph.add_edge("execute", "synthesize")
    graph.add_edge("synthesize", END)
    graph.add_edge("delegate_relational", END)
    graph.add_edge("delegate_knowledge", END)

    return graph


def compile_query_graph(collaborators: Collaborators) -> Any:
    return build_query_graph(collaborators).compile()
