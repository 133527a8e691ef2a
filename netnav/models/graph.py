"""Immutable person/connection snapshot the algorithms run against."""

from __future__ import annotations

from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    ValidationInfo,
    field_validator,
)

from netnav.utils.logging import get_logger
from netnav.utils.text_processing import content_hash, fold

logger = get_logger(__name__)


class Person(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    id: str
    name: str
    title: str = ""
    company: str | None = None
    institution: str | None = None
    expertise_areas: list[str] = Field(default_factory=list)
    interests: list[str] = Field(default_factory=list)


class Connection(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    person_a_id: str
    person_b_id: str
    connection_type: str = "OTHER"
    strength: float | None = None
    notes: str = ""

    def other(self, person_id: str) -> str:
        """The endpoint opposite ``person_id``."""
        return self.person_b_id if self.person_a_id == person_id else self.person_a_id

    def touches(self, person_id: str) -> bool:
        return person_id in (self.person_a_id, self.person_b_id)

    def is_type(self, connection_type: str | None) -> bool:
        if not connection_type:
            return True
        return self.connection_type.casefold() == connection_type.casefold()


class GraphSnapshot(BaseModel):
    """All people and connections visible to one query.

    Edges whose endpoints are missing from ``nodes`` are dropped at
    construction time. Lookup indexes are derived once and never mutated,
    so a snapshot can be shared across concurrent queries.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    nodes: list[Person] = Field(default_factory=list)
    edges: list[Connection] = Field(
        default_factory=list,
        validation_alias=AliasChoices("edges", "connections"),
    )

    _by_id: dict[str, Person] = PrivateAttr(default_factory=dict)
    _incident: dict[str, list[Connection]] = PrivateAttr(default_factory=dict)

    @field_validator("edges")
    @classmethod
    def _drop_dangling_edges(cls, edges: list[Connection], info: ValidationInfo) -> list[Connection]:
        known = {p.id for p in info.data.get("nodes", [])}
        kept: list[Connection] = []
        for edge in edges:
            if edge.person_a_id in known and edge.person_b_id in known:
                kept.append(edge)
            else:
                logger.warning(
                    "dangling_edge_dropped",
                    edge_id=edge.id,
                    person_a_id=edge.person_a_id,
                    person_b_id=edge.person_b_id,
                )
        return kept

    def model_post_init(self, __context: Any) -> None:
        by_id: dict[str, Person] = {}
        for person in self.nodes:
            # First occurrence wins on duplicate ids
            by_id.setdefault(person.id, person)
        incident: dict[str, list[Connection]] = {pid: [] for pid in by_id}
        for edge in self.edges:
            incident[edge.person_a_id].append(edge)
            if edge.person_b_id != edge.person_a_id:
                incident[edge.person_b_id].append(edge)
        self._by_id = by_id
        self._incident = incident

    # ── Lookups ──

    @property
    def names(self) -> list[str]:
        return [p.name for p in self.nodes]

    def person(self, person_id: str) -> Person | None:
        return self._by_id.get(person_id)

    def find_by_name(self, name: str) -> Person | None:
        """Case-insensitive exact name lookup, first match in snapshot order."""
        key = fold(name)
        for person in self.nodes:
            if fold(person.name) == key:
                return person
        return None

    def search_by_name(self, fragment: str) -> list[Person]:
        """Case-insensitive substring match against names, snapshot order."""
        key = fold(fragment)
        if not key:
            return []
        return [p for p in self.nodes if key in fold(p.name)]

    # ── Topology ──

    def incident_edges(self, person_id: str) -> list[Connection]:
        return list(self._incident.get(person_id, []))

    def degree(self, person_id: str) -> int:
        return len(self._incident.get(person_id, []))

    def neighbors(self, person_id: str, connection_type: str | None = None) -> list[str]:
        """Adjacent person ids in snapshot edge order (may repeat on parallel edges)."""
        return [
            edge.other(person_id)
            for edge in self._incident.get(person_id, [])
            if edge.is_type(connection_type)
        ]

    def edge_between(
        self, a_id: str, b_id: str, connection_type: str | None = None
    ) -> Connection | None:
        """First edge joining ``a_id`` and ``b_id`` in either direction."""
        for edge in self._incident.get(a_id, []):
            if edge.other(a_id) == b_id and edge.is_type(connection_type):
                return edge
        return None

    def fingerprint(self) -> str:
        """Stable digest of node and edge ids, used in cache keys."""
        node_part = ",".join(p.id for p in self.nodes)
        edge_part = ",".join(f"{e.id}:{e.person_a_id}-{e.person_b_id}" for e in self.edges)
        return content_hash(f"{node_part}|{edge_part}")
