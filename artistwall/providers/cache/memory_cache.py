"""cachetools-backed store for the wall's lookup caches.

Entries live for the process by default: without ``max_size`` or ``ttl``
nothing is ever evicted, so a user switch reuses everything the previous
wall already resolved.  ``max_size`` turns on least-recently-used eviction
and ``ttl`` switches to a ``TTLCache``.
"""

from __future__ import annotations

import math
from typing import Any

import structlog
from cachetools import Cache, LRUCache, TTLCache

from artistwall.interfaces.cache_provider import ICacheProvider

logger = structlog.get_logger(logger_name=__name__)


class MemoryCacheProvider(ICacheProvider):
    """Process-local :class:`ICacheProvider`.

    ``name`` only labels log events ("images:itunes", "mbid" and so on);
    ``max_size`` (optional) bounds the store, evicting the least recently
    used key.
    """

    def __init__(self, max_size: int | None = None, ttl: int | None = None, name: str = "cache") -> None:
        self._name = name
        bound = math.inf if max_size is None else max_size
        self._store: Cache = LRUCache(maxsize=bound) if ttl is None else TTLCache(maxsize=bound, ttl=ttl)

    async def get(self, key: str) -> Any | None:
        value = self._store.get(key)
        logger.debug("lookup_cache_read", cache=self._name, key=key, hit=key in self._store)
        return value

    async def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        # Per-call ttl is ignored; the store's own expiry applies.
        self._store[key] = value
        logger.debug("lookup_cache_write", cache=self._name, key=key, empty=value is None)

    async def delete(self, key: str) -> None:
        self._store.pop(key, None)

    async def exists(self, key: str) -> bool:
        return key in self._store

    def __len__(self) -> int:
        return len(self._store)
