"""Deterministic people recommendations for the asking user."""

from __future__ import annotations

from netnav.models.graph import GraphSnapshot, Person
from netnav.models.results import RankedPerson, RecommendResult, ResultStatus
from netnav.utils.text_processing import fold

RECOMMEND_LIMIT = 5


def _tags(person: Person) -> set[str]:
    return {fold(t) for t in [*person.expertise_areas, *person.interests] if t}


def recommend_people(current_user_name: str, snapshot: GraphSnapshot) -> RecommendResult:
    """Suggest unconnected people scored by mutual contacts plus shared tags."""
    user = snapshot.find_by_name(current_user_name)
    if user is None:
        return RecommendResult(
            status=ResultStatus.ENTITY_NOT_FOUND,
            message=f'Could not find "{current_user_name}" in the network.',
        )

    direct = set(snapshot.neighbors(user.id))
    user_tags = _tags(user)

    scored: list[RankedPerson] = []
    for person in snapshot.nodes:
        if person.id == user.id or person.id in direct:
            continue
        mutual = direct & set(snapshot.neighbors(person.id))
        score = len(mutual) + len(user_tags & _tags(person))
        if score > 0:
            scored.append(RankedPerson(person=person, score=score))

    scored = sorted(scored, key=lambda r: r.score, reverse=True)[:RECOMMEND_LIMIT]
    if not scored:
        return RecommendResult(
            status=ResultStatus.NO_CANDIDATES,
            message="I don't have any recommendations for you yet.",
        )
    return RecommendResult(
        recommendations=scored,
        reasoning="Based on shared interests and mutual connections",
    )
