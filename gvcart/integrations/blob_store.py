"""Key-value blob stores backing the cart.

The cart treats persistence as an opaque string store addressed by key.
``MemoryBlobStore`` serves tests and local runs, ``RedisBlobStore`` keeps
carts across restarts.
"""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import redis

from gvcart.core.exceptions import StorageException
from gvcart.logging_config import logger


@runtime_checkable
class BlobStore(Protocol):
    """Minimal persistent blob interface."""

    def read(self, key: str) -> str | None:
        ...

    def write(self, key: str, value: str) -> None:
        ...


class MemoryBlobStore:
    """Process-local blob store."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})
        self.writes = 0

    def read(self, key: str) -> str | None:
        return self._data.get(key)

    def write(self, key: str, value: str) -> None:
        self._data[key] = value
        self.writes += 1


class RedisBlobStore:
    """Blob store persisted in Redis.

    Args:
        redis_url: Connection URL, e.g. ``redis://localhost:6379/0``
        ttl_seconds: Optional expiry refreshed on every write. ``None`` keeps
            carts until the key is cleared externally.
        client: Pre-built client (tests, shared pools)
    """

    def __init__(
        self,
        redis_url: str | None = None,
        ttl_seconds: int | None = None,
        client: Any = None,
    ) -> None:
        if client is None and not redis_url:
            raise ValueError("redis_url or client is required")
        self._ttl = ttl_seconds
        self._client: Any = client or redis.from_url(
            redis_url,
            decode_responses=True,
            socket_connect_timeout=5,
            socket_timeout=5,
        )

    def ping(self) -> bool:
        """Check if Redis is available."""
        try:
            return bool(self._client.ping())
        except redis.RedisError as exc:
            logger.warning("Redis ping failed: %s", exc)
            return False

    def read(self, key: str) -> str | None:
        try:
            value = self._client.get(key)
        except redis.RedisError as exc:
            logger.error("Redis read failed for %s: %s", key, exc)
            raise StorageException(key, exc) from exc
        if value is None:
            return None
        if isinstance(value, bytes):
            return value.decode("utf-8", errors="replace")
        return str(value)

    def write(self, key: str, value: str) -> None:
        try:
            if self._ttl:
                self._client.setex(key, self._ttl, value)
            else:
                self._client.set(key, value)
        except redis.RedisError as exc:
            logger.error("Redis write failed for %s: %s", key, exc)
            raise StorageException(key, exc) from exc
