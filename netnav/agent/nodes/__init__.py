"""Orchestrator graph nodes."""

from __future__ import annotations

from netnav.agent.nodes.classify import classify_node
from netnav.agent.nodes.delegate import delegate_knowledge_node, delegate_relational_node
from netnav.agent.nodes.execute import execute_node
from netnav.agent.nodes.extract import extract_node, resolve_node
from netnav.agent.nodes.synthesize import synthesize_node

__all__ = [
    "classify_node",
    "delegate_knowledge_node",
    "delegate_relational_node",
    "execute_node",
    "extract_node",
    "resolve_node",
    "synthesize_node",
]
