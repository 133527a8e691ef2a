"""Query boundary: runs one question through the orchestrator graph.

``QueryService.process_query`` never raises. Any failure inside the graph,
including collaborator errors and timeouts, becomes a fixed apology
response carrying only the elapsed time.
"""

from __future__ import annotations

import asyncio
import time
import uuid
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

import structlog

from netnav.agent.graph import Collaborators, compile_query_graph
from netnav.config import Settings, get_settings
from netnav.graph_db.connection import Neo4jConnection
from netnav.models.graph import GraphSnapshot, Person
from netnav.models.llm_registry import LLMRegistry
from netnav.models.model_router import ModelRouter
from netnav.models.schemas import HistoryMessage, QueryResponse
from netnav.services.cache_service import (
    DEFAULT_TTL_SECONDS,
    InMemoryCache,
    QueryCache,
    RedisCache,
    build_cache_key,
)
from netnav.services.collaborators import (
    LLMClassifier,
    LLMIntentExtractor,
    LLMKnowledgeAnswerer,
    LLMRelationalAnswerer,
    LLMTextGenerator,
)
from netnav.services.similarity_service import Neo4jSimilarityService
from netnav.utils.logging import get_logger, setup_logging
from netnav.utils.text_processing import strip_mentions

logger = get_logger(__name__)

APOLOGY_MESSAGE = (
    "I apologize, but I'm having trouble processing your request right now. "
    "Please try again in a moment."
)
EMPTY_QUESTION_MESSAGE = "Ask me anything about the people in your network."


def _elapsed_ms(start: float) -> int:
    return int((time.monotonic() - start) * 1000)


class QueryService:
    """Processes chat questions against a caller-supplied graph snapshot."""

    def __init__(
        self,
        collaborators: Collaborators,
        *,
        cache: QueryCache | None = None,
        cache_ttl: int = DEFAULT_TTL_SECONDS,
        history_window: int = 3,
    ) -> None:
        self._graph = compile_query_graph(collaborators)
        self._cache = cache
        self._cache_ttl = cache_ttl
        self._history_window = history_window

    @property
    def cache(self) -> QueryCache | None:
        return self._cache

    async def process_query(
        self,
        text: str,
        current_user: Person,
        snapshot: GraphSnapshot,
        history: list[HistoryMessage | dict[str, Any]] | None = None,
    ) -> QueryResponse:
        start = time.monotonic()
        query_id = uuid.uuid4().hex[:12]

        with structlog.contextvars.bound_contextvars(query_id=query_id):
            try:
                return await self._run(text, current_user, snapshot, history, start)
            except asyncio.CancelledError:
                task = asyncio.current_task()
                if task is not None and task.cancelling():
                    raise
                logger.error("query_failed", error="collaborator call cancelled")
                return self._error_response(start)
            except Exception as exc:
                logger.error("query_failed", error=str(exc), error_type=type(exc).__name__, exc_info=True)
                return self._error_response(start)

    async def _run(
        self,
        text: str,
        current_user: Person,
        snapshot: GraphSnapshot,
        history: list[HistoryMessage | dict[str, Any]] | None,
        start: float,
    ) -> QueryResponse:
        clean_text = strip_mentions(text or "")
        if not clean_text:
            return QueryResponse(
                response_text=EMPTY_QUESTION_MESSAGE,
                operation="general",
                visualization_action=None,
                processing_time_ms=_elapsed_ms(start),
            )

        logger.info("query_received", user_id=current_user.id, length=len(clean_text))

        # JSON front ends send history as plain dicts.
        window = list(history or [])[-self._history_window:] if self._history_window > 0 else []
        recent = [HistoryMessage.model_validate(m) for m in window]

        cache_key = None
        if self._cache is not None:
            cache_key = build_cache_key(
                clean_text, current_user.id, snapshot.fingerprint(), recent, self._history_window
            )
            cached = await self._cache_get(cache_key)
            if cached is not None:
                logger.info("cache_hit")
                return cached.model_copy(update={"processing_time_ms": _elapsed_ms(start)})

        final = await self._graph.ainvoke(
            {
                "text": text,
                "clean_text": clean_text,
                "current_user": current_user,
                "snapshot": snapshot,
                "history": recent,
            }
        )

        response = self._build_response(final, start)
        logger.info(
            "query_completed",
            category=response.category,
            operation=response.operation,
            processing_time_ms=response.processing_time_ms,
        )
        if cache_key is not None:
            await self._cache_set(cache_key, response)
        return response

    # ── Envelopes ──

    @staticmethod
    def _build_response(final: dict[str, Any], start: float) -> QueryResponse:
        category = final.get("category")
        operation = final.get("operation") or category or "general"
        return QueryResponse(
            response_text=final.get("response_text", ""),
            operation=operation,
            category=category,
            visualization_action=final.get("visualization_action"),
            processing_time_ms=_elapsed_ms(start),
            resolved_entities=list(final.get("entities", [])),
        )

    @staticmethod
    def _error_response(start: float) -> QueryResponse:
        return QueryResponse(
            response_text=APOLOGY_MESSAGE,
            operation="general",
            visualization_action=None,
            processing_time_ms=_elapsed_ms(start),
        )

    # ── Cache ──

    async def _cache_get(self, key: str) -> QueryResponse | None:
        if self._cache is None:
            return None
        try:
            raw = await self._cache.get(key)
            return QueryResponse.model_validate(raw) if raw is not None else None
        except Exception as exc:
            logger.warning("cache_read_failed", error=str(exc))
            return None

    async def _cache_set(self, key: str, response: QueryResponse) -> None:
        if self._cache is None:
            return
        try:
            await self._cache.set(key, response.model_dump(mode="json"), ttl=self._cache_ttl)
        except Exception as exc:
            logger.warning("cache_write_failed", error=str(exc))


def build_query_service(
    settings: Settings,
    registry: LLMRegistry,
    neo4j_conn: Neo4jConnection,
    *,
    use_redis_cache: bool = False,
) -> QueryService:
    """Wire LLM-backed collaborators and the Neo4j similarity index into a service."""
    router = ModelRouter(registry)
    collaborators = Collaborators(
        classifier=LLMClassifier(router),
        extractor=LLMIntentExtractor(router),
        similarity=Neo4jSimilarityService(neo4j_conn, settings.NEO4J_VECTOR_INDEX),
        generator=LLMTextGenerator(router),
        relational=LLMRelationalAnswerer(router),
        knowledge=LLMKnowledgeAnswerer(router),
    )

    cache: QueryCache | None = None
    if settings.CACHE_ENABLED:
        cache = RedisCache(settings.REDIS_URL) if use_redis_cache else InMemoryCache()

    return QueryService(
        collaborators,
        cache=cache,
        cache_ttl=settings.CACHE_TTL_SECONDS,
        history_window=settings.HISTORY_WINDOW,
    )


@asynccontextmanager
async def query_service_lifespan(
    settings: Settings | None = None,
    *,
    use_redis_cache: bool = False,
) -> AsyncIterator[QueryService]:
    """Own startup and shutdown of everything a hosting app needs to serve queries."""
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)

    neo4j_conn = Neo4jConnection(settings)
    await neo4j_conn.connect()
    registry = LLMRegistry(settings)
    service = build_query_service(settings, registry, neo4j_conn, use_redis_cache=use_redis_cache)
    logger.info("query_service_started", cache=type(service.cache).__name__)

    try:
        yield service
    finally:
        if isinstance(service.cache, RedisCache):
            await service.cache.close()
        await neo4j_conn.close()
        logger.info("query_service_stopped")
