"""Map free-text name fragments from the extractor onto people in the snapshot."""

from __future__ import annotations

from dataclasses import dataclass, field

from netnav.utils.logging import get_logger
from netnav.utils.text_processing import fold, strip_mention

logger = get_logger(__name__)

FIRST_PERSON_PRONOUNS = frozenset({"i", "me", "my", "myself"})


@dataclass(frozen=True)
class ResolvedEntities:
    names: list[str] = field(default_factory=list)
    dropped: list[str] = field(default_factory=list)


def _match(token: str, known_names: list[str]) -> str | None:
    key = fold(token)
    if not key:
        return None
    for name in known_names:
        if fold(name) == key:
            return name
    for name in known_names:
        if key in fold(name):
            return name
    return None


def resolve(
    raw_entities: list[str],
    known_names: list[str],
    current_user_name: str,
    operation: str | None = None,
) -> ResolvedEntities:
    """Resolve raw entity tokens to canonical names.

    Pronouns referring to the asker are replaced with ``current_user_name``
    before matching. Exact (case-insensitive) matches win over substring
    matches; tokens matching nothing are dropped. For ``find_path`` a lone
    entity other than the asker gets the asker prepended as the start.
    """
    names: list[str] = []
    dropped: list[str] = []

    for raw in raw_entities:
        if not isinstance(raw, str):
            continue
        token = strip_mention(raw)
        if fold(token) in FIRST_PERSON_PRONOUNS:
            token = current_user_name
        matched = _match(token, known_names)
        if matched is None:
            if token:
                dropped.append(token)
            continue
        if matched not in names:
            names.append(matched)

    if (
        operation == "find_path"
        and len(names) == 1
        and fold(names[0]) != fold(current_user_name)
    ):
        names.insert(0, current_user_name)

    if dropped:
        logger.info("entities_dropped", dropped=dropped, kept=names)
    return ResolvedEntities(names=names, dropped=dropped)
