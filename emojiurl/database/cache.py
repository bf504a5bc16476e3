"""Redis read cache for resolved records."""

import json
import logging
from typing import Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from .models import Record

KEY_PREFIX = "emojiurl:record:"


class RedisCache:
    """Write-once cache of key -> record.

    Records never change after allocation, so entries only leave the cache
    by TTL. Every Redis failure is logged and reported as a miss; the store
    stays the source of truth.
    """

    def __init__(
        self,
        redis_url: Optional[str] = None,
        ttl_seconds: int = 3600,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Args:
            redis_url: e.g. redis://localhost:6379/0; None disables caching
            ttl_seconds: Lifetime of cached records
            logger: Optional logger instance
        """
        self.redis_url = redis_url
        self.ttl_seconds = ttl_seconds
        self.logger = logger or logging.getLogger(__name__)
        self.enabled = redis_url is not None
        self.client: Optional[redis.Redis] = None

    @property
    def _ready(self) -> bool:
        return self.enabled and self.client is not None

    async def connect(self) -> None:
        """Open the Redis client; disables the cache if Redis is unreachable."""
        if not self.enabled:
            return

        self.client = redis.from_url(self.redis_url, decode_responses=True)
        try:
            await self.client.ping()
        except (RedisError, OSError) as e:
            self.logger.error(f"Redis unreachable, caching disabled: {e}")
            self.enabled = False
            return
        self.logger.info(f"Redis cache connected (ttl={self.ttl_seconds}s)")

    async def get_record(self, key: str) -> Optional[Record]:
        if not self._ready:
            return None

        try:
            payload = await self.client.get(self.get_cache_key(key))
        except Exception as e:
            self.logger.error(f"Cache read failed for {key}: {e}")
            return None

        if payload is None:
            return None
        try:
            return Record.from_dict(json.loads(payload))
        except (ValueError, KeyError) as e:
            self.logger.warning(f"Discarding malformed cache entry for {key}: {e}")
            return None

    async def set_record(self, record: Record, ttl: Optional[int] = None) -> bool:
        """Cache a record.

        Args:
            record: Record to cache
            ttl: Lifetime override in seconds

        Returns:
            True if Redis accepted the write
        """
        if not self._ready:
            return False

        payload = json.dumps(record.to_dict(), ensure_ascii=False)
        try:
            await self.client.setex(self.get_cache_key(record.key), ttl or self.ttl_seconds, payload)
        except Exception as e:
            self.logger.error(f"Cache write failed for {record.key}: {e}")
            return False
        return True

    async def ping(self) -> bool:
        if not self._ready:
            return False

        try:
            return bool(await self.client.ping())
        except Exception as e:
            self.logger.error(f"Cache ping failed: {e}")
            return False

    async def close(self) -> None:
        if self.client is not None:
            await self.client.aclose()
            self.client = None

    @staticmethod
    def get_cache_key(key: str) -> str:
        return f"{KEY_PREFIX}{key}"
