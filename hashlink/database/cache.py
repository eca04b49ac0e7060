"""Redis cache layer for URL shortener."""

import logging
from typing import Optional

import redis.asyncio as redis


class RedisCache:
    """Redis cache for resolved short codes.

    Mappings never change once written, so entries only expire by TTL.
    Cache failures are logged and treated as misses.
    """

    def __init__(
        self,
        redis_url: Optional[str] = None,
        ttl_seconds: int = 3600,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize Redis cache.

        Args:
            redis_url: Redis connection URL (e.g., redis://localhost:6379/0)
            ttl_seconds: Default TTL for cached items
            logger: Optional logger instance
        """
        self.redis_url = redis_url
        self.ttl_seconds = ttl_seconds
        self.logger = logger or logging.getLogger(__name__)
        self.enabled = redis_url is not None
        self.client: Optional[redis.Redis] = None

        if redis_url:
            self.logger.info(f"Redis cache enabled with TTL={ttl_seconds}s")

    async def connect(self) -> None:
        """Connect to Redis."""
        if not self.enabled:
            return

        try:
            self.client = redis.from_url(
                self.redis_url,
                encoding="utf-8",
                decode_responses=True,
            )
            await self.client.ping()
            self.logger.info("Connected to Redis")
        except redis.RedisError as e:
            self.logger.error(f"Failed to connect to Redis: {e}")
            self.enabled = False

    async def get(self, key: str) -> Optional[str]:
        """Get value from cache, or None on miss or error."""
        if not self.enabled or not self.client:
            return None

        try:
            return await self.client.get(key)
        except redis.RedisError as e:
            self.logger.error(f"Cache get error: {e}")
            return None

    async def set(self, key: str, value: str, ttl: Optional[int] = None) -> bool:
        """Set value in cache.

        Args:
            key: Cache key
            value: Value to cache
            ttl: Optional TTL override (seconds)

        Returns:
            True if successful
        """
        if not self.enabled or not self.client:
            return False

        try:
            await self.client.setex(key, ttl or self.ttl_seconds, value)
            return True
        except redis.RedisError as e:
            self.logger.error(f"Cache set error: {e}")
            return False

    async def ping(self) -> bool:
        """Check the Redis connection."""
        if not self.enabled or not self.client:
            return False
        try:
            return bool(await self.client.ping())
        except redis.RedisError as e:
            self.logger.error(f"Cache ping error: {e}")
            return False

    async def close(self) -> None:
        """Close Redis connection."""
        if self.client:
            await self.client.aclose()
            self.logger.info("Redis connection closed")

    def get_cache_key(self, short_code: str) -> str:
        return f"hashlink:url:{short_code}"
