"""Similarity-backed operations.

The embedding search itself is an external service; these functions only
combine its answers with the snapshot topology.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from netnav.models.graph import GraphSnapshot, Person
from netnav.models.results import PotentialConnectionsResult, ResultStatus, SimilarResult
from netnav.utils.logging import get_logger

if TYPE_CHECKING:
    from netnav.services.collaborators import SimilarityService

logger = get_logger(__name__)

SIMILAR_LIMIT = 5
SEED_LIMIT = 3
CANDIDATE_LIMIT = 5


def _resolve_target(entities: list[str], snapshot: GraphSnapshot) -> Person | None:
    if not entities:
        return None
    name = entities[0]
    exact = snapshot.find_by_name(name)
    if exact is not None:
        return exact
    partial = snapshot.search_by_name(name)
    return partial[0] if partial else None


def _to_people(
    items: Sequence[Person | str], snapshot: GraphSnapshot, exclude: str, limit: int
) -> list[Person]:
    people: list[Person] = []
    seen = {exclude}
    for item in items:
        person_id = item.id if isinstance(item, Person) else str(item)
        if person_id in seen:
            continue
        person = snapshot.person(person_id)
        if person is None:
            logger.debug("similar_person_not_in_snapshot", person_id=person_id)
            continue
        seen.add(person_id)
        people.append(person)
        if len(people) == limit:
            break
    return people


async def find_similar(
    entities: list[str],
    snapshot: GraphSnapshot,
    similarity: SimilarityService,
) -> SimilarResult:
    target = _resolve_target(entities, snapshot)
    if target is None:
        name = entities[0] if entities else ""
        return SimilarResult(
            status=ResultStatus.ENTITY_NOT_FOUND,
            message=f'Could not find "{name}" in the network.',
        )

    raw = await similarity.find_similar(target.id, SIMILAR_LIMIT)
    similar = _to_people(raw or [], snapshot, target.id, SIMILAR_LIMIT)
    if not similar:
        return SimilarResult(
            status=ResultStatus.NO_CANDIDATES,
            target=target,
            message=f"I couldn't find anyone with a profile similar to {target.name}.",
        )
    return SimilarResult(target=target, similar=similar)


async def find_potential_connections(
    entities: list[str],
    snapshot: GraphSnapshot,
    similarity: SimilarityService,
) -> PotentialConnectionsResult:
    """People one hop beyond the target's look-alikes, minus existing ties."""
    target = _resolve_target(entities, snapshot)
    if target is None:
        name = entities[0] if entities else ""
        return PotentialConnectionsResult(
            status=ResultStatus.ENTITY_NOT_FOUND,
            message=f'Could not find "{name}" in the network.',
        )

    raw = await similarity.find_similar(target.id, SEED_LIMIT)
    seeds = _to_people(raw or [], snapshot, target.id, SEED_LIMIT)
    if not seeds:
        return PotentialConnectionsResult(
            status=ResultStatus.NO_CANDIDATES,
            target=target,
            message=f"I couldn't find anyone with a profile similar to {target.name}.",
        )

    excluded = set(snapshot.neighbors(target.id)) | {target.id}
    seed_ids = {p.id for p in seeds}

    candidates: list[Person] = []
    seen: set[str] = set()
    for seed in seeds:
        for edge in snapshot.incident_edges(seed.id):
            other = edge.other(seed.id)
            if other in excluded or other in seed_ids or other in seen:
                continue
            person = snapshot.person(other)
            if person is None:
                continue
            seen.add(other)
            candidates.append(person)
            if len(candidates) == CANDIDATE_LIMIT:
                break
        if len(candidates) == CANDIDATE_LIMIT:
            break

    if not candidates:
        return PotentialConnectionsResult(
            status=ResultStatus.NO_CANDIDATES,
            target=target,
            similar=seeds,
            message=f"I couldn't find new people for {target.name} to connect with.",
        )
    return PotentialConnectionsResult(target=target, similar=seeds, candidates=candidates)
