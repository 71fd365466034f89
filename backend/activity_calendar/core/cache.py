"""TTL cache for directory listings (Redis, with an in-process fallback)."""

from __future__ import annotations

import json
import logging
import time
from typing import Any, Optional

import redis
from redis.exceptions import ConnectionError, RedisError

logger = logging.getLogger(__name__)


def _connect(url: Optional[str]) -> redis.Redis | _InMemoryCache:
    """Return a Redis client for ``url`` or an in-memory store if unusable."""
    if not url:
        return _InMemoryCache()
    try:
        pool = redis.ConnectionPool.from_url(url, max_connections=10, decode_responses=True)
        client = redis.Redis(connection_pool=pool)
        # Test connection
        client.ping()
        logger.info(f"Redis cache connected: {url}")
        return client
    except (ConnectionError, RedisError) as e:
        logger.warning(f"Failed to connect to Redis cache: {e}. Using fallback in-memory cache.")
        return _InMemoryCache()


class _InMemoryCache:
    """Fallback in-memory cache when Redis is unavailable."""

    def __init__(self, clock=time.monotonic):
        self._cache: dict[str, tuple[float, Any]] = {}
        self._clock = clock

    def get(self, key: str) -> Optional[Any]:
        item = self._cache.get(key)
        if item is None:
            return None
        expires_at, value = item
        if expires_at <= self._clock():
            del self._cache[key]
            return None
        return value

    def set(self, key: str, value: Any, ex: int) -> None:
        self._cache[key] = (self._clock() + ex, value)

    def delete(self, key: str) -> None:
        self._cache.pop(key, None)

    def clear(self) -> None:
        self._cache.clear()


class ListingCache:
    """Cache for listing results with a fixed time-to-live.

    A ``ttl`` of 0 disables caching: ``get`` always misses and ``set`` is a
    no-op, so every request re-lists the filesystem.
    """

    def __init__(self, ttl: int = 0, url: Optional[str] = None, *, prefix: str = "listing:"):
        self.ttl = ttl
        self.prefix = prefix
        self._client = _connect(url) if ttl > 0 else None

    @property
    def enabled(self) -> bool:
        return self._client is not None

    def get(self, key: str) -> Optional[Any]:
        """Get value from cache."""
        if self._client is None:
            return None
        try:
            if isinstance(self._client, _InMemoryCache):
                return self._client.get(self.prefix + key)

            value = self._client.get(self.prefix + key)
            if value is None:
                return None
            return json.loads(value)
        except (ConnectionError, RedisError) as e:
            logger.warning(f"Redis cache get error for key {key}: {e}")
            return None
        except json.JSONDecodeError:
            logger.warning(f"Discarding undecodable cache entry {key}")
            return None

    def set(self, key: str, value: Any) -> None:
        """Set value in cache with the configured TTL."""
        if self._client is None:
            return
        try:
            if isinstance(self._client, _InMemoryCache):
                self._client.set(self.prefix + key, value, ex=self.ttl)
                return
            self._client.setex(self.prefix + key, self.ttl, json.dumps(value))
        except (ConnectionError, RedisError) as e:
            logger.warning(f"Redis cache set error for key {key}: {e}")

    def clear(self) -> None:
        """Drop every cached listing."""
        if self._client is None:
            return
        try:
            if isinstance(self._client, _InMemoryCache):
                self._client.clear()
                return
            for key in self._client.scan_iter(match=f"{self.prefix}*"):
                self._client.delete(key)
        except (ConnectionError, RedisError) as e:
            logger.warning(f"Redis cache clear error: {e}")
