"""Typed operation results, one variant per graph operation.

``OperationResult`` is a discriminated union on ``operation`` so the
translator and explainer can dispatch on the variant type.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from netnav.models.graph import Connection, Person


class ResultStatus(str, Enum):
    OK = "ok"
    INSUFFICIENT_ENTITIES = "insufficient_entities"
    ENTITY_NOT_FOUND = "entity_not_found"
    NO_PATH = "no_path"
    DATA_INCONSISTENCY = "data_inconsistency"
    NO_CANDIDATES = "no_candidates"


class _ResultBase(BaseModel):
    status: ResultStatus = ResultStatus.OK
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status is ResultStatus.OK


class PathResult(_ResultBase):
    operation: Literal["find_path"] = "find_path"
    path: list[str] = Field(default_factory=list)
    distance: int = 0
    nodes: list[Person] = Field(default_factory=list)
    edges: list[Connection] = Field(default_factory=list)


class RankedPerson(BaseModel):
    person: Person
    score: int


class RankResult(_ResultBase):
    operation: Literal["rank_nodes"] = "rank_nodes"
    ranked: list[RankedPerson] = Field(default_factory=list)
    topic: str = ""
    total_analyzed: int = 0


class RecommendResult(_ResultBase):
    operation: Literal["recommend_person"] = "recommend_person"
    recommendations: list[RankedPerson] = Field(default_factory=list)
    reasoning: str = ""


class SimilarResult(_ResultBase):
    operation: Literal["find_similar"] = "find_similar"
    target: Person | None = None
    similar: list[Person] = Field(default_factory=list)


class BridgeResult(_ResultBase):
    operation: Literal["find_bridge"] = "find_bridge"
    bridges: list[Person] = Field(default_factory=list)
    min_degree: int = 3


class SelectResult(_ResultBase):
    operation: Literal["select_node"] = "select_node"
    query: list[str] = Field(default_factory=list)
    matches: list[Person] = Field(default_factory=list)


class PotentialConnectionsResult(_ResultBase):
    operation: Literal["find_potential_connections"] = "find_potential_connections"
    target: Person | None = None
    similar: list[Person] = Field(default_factory=list)
    candidates: list[Person] = Field(default_factory=list)


class GeneralResult(_ResultBase):
    operation: Literal["general"] = "general"


AnyResult = Union[
    PathResult,
    RankResult,
    RecommendResult,
    SimilarResult,
    BridgeResult,
    SelectResult,
    PotentialConnectionsResult,
    GeneralResult,
]

OperationResult = Annotated[AnyResult, Field(discriminator="operation")]
