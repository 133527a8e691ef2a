from __future__ import annotations

from netnav.models.graph import GraphSnapshot, Person
from netnav.models.results import ResultStatus, SelectResult


def select_by_name(entities: list[str], snapshot: GraphSnapshot) -> SelectResult:
    """Highlight everyone whose name contains any of the given fragments."""
    seen: set[str] = set()
    matches: list[Person] = []
    for entity in entities:
        for person in snapshot.search_by_name(entity):
            if person.id not in seen:
                seen.add(person.id)
                matches.append(person)

    if not matches:
        return SelectResult(
            status=ResultStatus.ENTITY_NOT_FOUND,
            query=list(entities),
            message=(
                "I've searched the network, but I could not find anyone matching "
                f"the name '{', '.join(entities)}'."
            ),
        )
    return SelectResult(query=list(entities), matches=matches)
