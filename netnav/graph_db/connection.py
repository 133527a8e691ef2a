"""Read-only Neo4j access for the person embedding index."""

from __future__ import annotations

from neo4j import AsyncDriver, AsyncGraphDatabase, RoutingControl

from netnav.config import Settings
from netnav.graph_db.queries import VECTOR_INDEX_EXISTS
from netnav.utils.logging import get_logger

logger = get_logger(__name__)


class Neo4jConnection:
    """Driver wrapper used only for similarity lookups.

    The query pipeline never writes to Neo4j; embeddings and the vector
    index are maintained by whatever ingests profiles.
    """

    def __init__(self, settings: Settings) -> None:
        self._uri = settings.NEO4J_URI
        self._auth = (settings.NEO4J_USER, settings.NEO4J_PASSWORD)
        self._index_name = settings.NEO4J_VECTOR_INDEX
        self._driver: AsyncDriver | None = None

    @property
    def driver(self) -> AsyncDriver:
        if self._driver is None:
            raise RuntimeError("Neo4j driver not initialized, call connect() first")
        return self._driver

    async def connect(self) -> None:
        self._driver = AsyncGraphDatabase.driver(self._uri, auth=self._auth)
        await self._driver.verify_connectivity()
        if not await self.index_exists():
            # Similarity questions will fail until the index is built
            logger.warning("vector_index_missing", index=self._index_name)
        logger.info("neo4j_connected", uri=self._uri)

    async def close(self) -> None:
        if self._driver is None:
            return
        await self._driver.close()
        self._driver = None
        logger.info("neo4j_disconnected")

    async def index_exists(self) -> bool:
        rows = await self.execute_read(VECTOR_INDEX_EXISTS, index_name=self._index_name)
        return bool(rows and rows[0].get("found"))

    async def execute_read(self, query: str, **params: object) -> list[dict]:
        records, _, _ = await self.driver.execute_query(
            query, params, routing_=RoutingControl.READ
        )
        return [record.data() for record in records]
