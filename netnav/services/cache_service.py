"""Response caches for the query service.

The query service only needs ``get``/``set``; TTL and eviction are the
cache's own business, so the in-process and Redis implementations are
interchangeable.
"""

from __future__ import annotations

import json
import time
from collections import OrderedDict
from typing import Any, Protocol, runtime_checkable

import redis.asyncio as aioredis

from netnav.models.schemas import HistoryMessage
from netnav.utils.logging import get_logger
from netnav.utils.text_processing import content_hash

logger = get_logger(__name__)

DEFAULT_TTL_SECONDS = 300
DEFAULT_MAX_ENTRIES = 1024


@runtime_checkable
class QueryCache(Protocol):
    async def get(self, key: str) -> Any | None: ...

    async def set(self, key: str, value: Any, ttl: int = DEFAULT_TTL_SECONDS) -> None: ...


def build_cache_key(
    text: str,
    current_user_id: str,
    snapshot_fingerprint: str,
    history: list[HistoryMessage],
    history_window: int = 3,
) -> str:
    """Stable key from the question, asker, snapshot and recent history."""
    recent = history[-history_window:] if history_window > 0 else []
    payload = {
        "history": [f"{m.sender}: {m.message}" for m in recent],
        "snapshot": snapshot_fingerprint,
        "text": text,
        "user": current_user_id,
    }
    return "query:" + content_hash(json.dumps(payload, sort_keys=True))


class InMemoryCache:
    """Per-process TTL cache bounded to ``max_size`` entries.

    Expired entries are purged on every write; when the cache is still full
    the oldest entry is evicted.
    """

    def __init__(self, clock=time.monotonic, max_size: int = DEFAULT_MAX_ENTRIES) -> None:
        self._entries: OrderedDict[str, tuple[float, Any]] = OrderedDict()
        self._clock = clock
        self._max_size = max_size

    async def get(self, key: str) -> Any | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            return None
        return value

    def _purge_expired(self) -> None:
        now = self._clock()
        expired = [key for key, (expires_at, _) in self._entries.items() if now >= expires_at]
        for key in expired:
            del self._entries[key]

    async def set(self, key: str, value: Any, ttl: int = DEFAULT_TTL_SECONDS) -> None:
        self._purge_expired()
        self._entries.pop(key, None)
        while self._entries and len(self._entries) >= self._max_size:
            self._entries.popitem(last=False)
        self._entries[key] = (self._clock() + ttl, value)

    def __len__(self) -> int:
        return len(self._entries)


class RedisCache:
    """Redis-backed cache shared across processes."""

    def __init__(self, redis_url: str) -> None:
        self._client = aioredis.from_url(redis_url, decode_responses=True)

    async def get(self, key: str) -> Any | None:
        raw = await self._client.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            return raw

    async def set(self, key: str, value: Any, ttl: int = DEFAULT_TTL_SECONDS) -> None:
        serialized = json.dumps(value) if not isinstance(value, str) else value
        await self._client.set(key, serialized, ex=ttl)

    async def close(self) -> None:
        await self._client.aclose()
