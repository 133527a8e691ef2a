"""Embedding similarity search backed by a Neo4j vector index."""

from __future__ import annotations

from neo4j.exceptions import ServiceUnavailable, SessionExpired

from netnav.graph_db.connection import Neo4jConnection
from netnav.graph_db.queries import SIMILAR_PEOPLE
from netnav.utils.exceptions import SimilarityServiceError
from netnav.utils.logging import get_logger
from netnav.utils.retry import async_retry

logger = get_logger(__name__)


class Neo4jSimilarityService:
    """Returns ids of the people whose stored embeddings are nearest a given person."""

    def __init__(self, neo4j_conn: Neo4jConnection, index_name: str) -> None:
        self._conn = neo4j_conn
        self._index_name = index_name

    @async_retry(max_attempts=3, retryable_exceptions=(ServiceUnavailable, SessionExpired))
    async def _query(self, person_id: str, count: int) -> list[dict]:
        return await self._conn.execute_read(
            SIMILAR_PEOPLE,
            person_id=person_id,
            count=count,
            index_name=self._index_name,
        )

    async def find_similar(self, person_id: str, count: int) -> list[str]:
        try:
            records = await self._query(person_id, count)
        except Exception as exc:
            raise SimilarityServiceError(f"Similarity lookup failed for {person_id}: {exc}") from exc
        ids = [str(r["id"]) for r in records if r.get("id") is not None]
        logger.debug("similar_people_found", person_id=person_id, count=len(ids))
        return ids
