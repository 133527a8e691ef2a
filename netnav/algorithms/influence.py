"""Degree-based influence ranking with an optional topic boost."""

from __future__ import annotations

from netnav.models.graph import GraphSnapshot, Person
from netnav.models.results import RankedPerson, RankResult
from netnav.utils.text_processing import fold

RANK_LIMIT = 10
TOPIC_MULTIPLIER = 2


def _matches_topic(person: Person, topic: str) -> bool:
    key = fold(topic)
    return any(key in fold(area) for area in person.expertise_areas)


def rank_nodes(snapshot: GraphSnapshot, topic: str | None = None) -> RankResult:
    topic = (topic or "").strip()
    scored: list[RankedPerson] = []
    for person in snapshot.nodes:
        score = snapshot.degree(person.id)
        if topic and _matches_topic(person, topic):
            score *= TOPIC_MULTIPLIER
        scored.append(RankedPerson(person=person, score=score))

    # sorted() is stable, so ties keep snapshot order
    scored = sorted(scored, key=lambda r: r.score, reverse=True)[:RANK_LIMIT]
    return RankResult(
        ranked=scored,
        topic=topic,
        total_analyzed=len(snapshot.nodes),
        message=f"Ranked {len(scored)} of {len(snapshot.nodes)} people by influence.",
    )
