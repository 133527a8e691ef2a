"""Turn operation results into user-facing text.

Structural results (paths, similarity, selections) are narrated from
templates. Everything else goes to the free-text generator with the result
attached as grounding context.
"""

from __future__ import annotations

import re

from netnav.agent.prompts.explainer import EXPLAINER_PROMPT
from netnav.models.graph import Connection, Person
from netnav.models.results import (
    OperationResult,
    PathResult,
    PotentialConnectionsResult,
    SelectResult,
    SimilarResult,
)
from netnav.services.collaborators import TextGenerator
from netnav.utils.text_processing import fold, human_join

PATH_HEADER = "Here's how the connection runs through the network:"
PATH_FOOTER = "Ask me about anyone on this path to learn more about them."

_SHARED_VERBS = {"WORK": "worked with", "STUDY": "studied with"}

_TOGETHER_RE = re.compile(
    r"\b(?:working|studying|worked|studied)\s+together\b(?:\s+at\s+(?:the\s+)?company\b)?",
    re.IGNORECASE,
)
_AT_COMPANY_RE = re.compile(r"\bat\s+(?:the\s+)?company\s+", re.IGNORECASE)
_PREPOSITION_RE = re.compile(r"^(?:at|in|on|for|during|from|through|while|since)\b", re.IGNORECASE)


def clean_notes(notes: str, *names: str) -> str:
    """Strip phrasing from connection notes that would repeat the sentence's own words."""
    text = notes.strip()
    name_alt = "|".join(re.escape(n) for n in names if n)
    lead = r"^(?:they\s+|both\s+)?(?:worked|working|work|studied|studying|study)\b(?:\s+together)?"
    if name_alt:
        lead += rf"(?:\s+with\s+(?:{name_alt}))?"
    text = re.sub(lead, "", text, flags=re.IGNORECASE)
    text = _TOGETHER_RE.sub("", text)
    text = _AT_COMPANY_RE.sub("at ", text)
    text = re.sub(r"\s+", " ", text)
    return text.strip(" ,.;:-")


def _hop_sentence(subject: str, is_you: bool, other: Person, edge: Connection, source: Person) -> str:
    verb = _SHARED_VERBS.get(edge.connection_type.upper())
    if verb is None:
        linking = "are" if is_you else "is"
        return f"{subject} {linking} connected to {other.name}."

    detail = clean_notes(edge.notes, other.name, source.name)
    sentence = f"{subject} {verb} {other.name}"
    if detail:
        sentence += f" {detail}" if _PREPOSITION_RE.match(detail) else f" ({detail})"
    return sentence + "."


def narrate_path(result: PathResult, current_user_name: str) -> str:
    if not result.ok:
        return result.message
    if result.distance == 0:
        return "That's the same person, so there's no path to walk."

    sentences: list[str] = []
    for i, edge in enumerate(result.edges):
        source, other = result.nodes[i], result.nodes[i + 1]
        is_you = i == 0 and fold(source.name) == fold(current_user_name)
        subject = "You" if is_you else source.name
        sentences.append(_hop_sentence(subject, is_you, other, edge, source))

    return "\n\n".join([PATH_HEADER, " ".join(sentences), PATH_FOOTER])


def _names(people: list[Person]) -> str:
    return human_join([p.name for p in people])


def narrate_similar(result: SimilarResult) -> str:
    if not result.ok or result.target is None:
        return result.message
    return (
        f"People with profiles similar to {result.target.name} include "
        f"{_names(result.similar)}. I've highlighted them on the graph."
    )


def narrate_potential(result: PotentialConnectionsResult, current_user_name: str) -> str:
    if not result.ok or result.target is None:
        return result.message
    is_you = fold(result.target.name) == fold(current_user_name)
    subject = "you" if is_you else result.target.name
    return (
        f"Based on people with similar profiles ({_names(result.similar)}), "
        f"{subject} could connect with {_names(result.candidates)}."
    )


def narrate_selection(result: SelectResult) -> str:
    if not result.ok:
        return result.message
    return f"I've highlighted {_names(result.matches)} on the graph."


async def explain(
    result: OperationResult,
    *,
    question: str,
    current_user_name: str,
    generator: TextGenerator,
) -> str:
    if isinstance(result, PathResult):
        return narrate_path(result, current_user_name)
    if isinstance(result, SimilarResult):
        return narrate_similar(result)
    if isinstance(result, PotentialConnectionsResult):
        return narrate_potential(result, current_user_name)
    if isinstance(result, SelectResult):
        return narrate_selection(result)
    if result.message and not result.ok:
        return result.message

    prompt = EXPLAINER_PROMPT.format(
        question=question,
        operation=result.operation,
        result_json=result.model_dump_json(indent=2)[:20_000],
    )
    return await generator.generate(prompt)
