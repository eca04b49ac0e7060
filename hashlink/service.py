"""Business logic service for URL shortener."""

import logging
from typing import Any, Dict, Optional

from .allocator import CodeAllocator
from .common.url_builder import build_short_url
from .database.base import URLStoreBase
from .database.cache import RedisCache
from .database.models import URLMapping
from .resolver import Resolver


class URLShortenerService:
    """Service layer tying allocation, lookup and the store lifecycle together."""

    def __init__(
        self,
        store: URLStoreBase,
        cache: Optional[RedisCache] = None,
        allocator: Optional[CodeAllocator] = None,
        logger: Optional[logging.Logger] = None,
        max_collision_retries: int = 3,
    ):
        """Initialize URL shortener service.

        Args:
            store: Store instance, already connected
            cache: Optional cache for lookups
            allocator: Optional allocator (built over store if omitted)
            logger: Optional logger
            max_collision_retries: Perturbations allowed per allocation
        """
        self.store = store
        self.cache = cache
        self.logger = logger or logging.getLogger(__name__)
        self.allocator = allocator or CodeAllocator(
            store,
            max_retries=max_collision_retries,
            logger=self.logger,
        )
        self.resolver = Resolver(store, cache=cache, logger=self.logger)

    async def create_short_url(
        self,
        long_url: str,
        base_url: str,
        path_prefix: str = "",
    ) -> Dict[str, Any]:
        """Create (or reuse) the short URL for a long URL.

        URL syntax is expected to be validated by the caller.

        Args:
            long_url: The original long URL
            base_url: Origin the short URL is served from
            path_prefix: Optional path prefix

        Returns:
            Dictionary with hash, short_url, long_url

        Raises:
            AllocationExhausted: If no unique code could be produced
            StorageError: If the store failed
        """
        short_code = await self.allocator.allocate(long_url)
        short_url = build_short_url(short_code, base_url, path_prefix)

        self.logger.info(f"Short URL ready: {short_url} -> {long_url}")

        return {
            "hash": short_code,
            "short_url": short_url,
            "long_url": long_url,
        }

    async def get_original_url(self, short_code: str) -> Optional[str]:
        """Get the long URL for a short code, or None if not found."""
        return await self.resolver.resolve(short_code)

    async def get_url_info(self, short_code: str) -> Optional[URLMapping]:
        """Get the full stored mapping for a short code."""
        return await self.store.find_by_hash(short_code)

    async def health_check(self) -> Dict[str, bool]:
        """Perform health check.

        Returns:
            Dictionary with health status
        """
        db_healthy = await self.store.health_check()

        cache_healthy = True
        if self.cache and self.cache.enabled:
            cache_healthy = await self.cache.ping()

        return {
            "database": db_healthy,
            "cache": cache_healthy,
            "overall": db_healthy and cache_healthy,
        }

    async def close(self) -> None:
        """Close service connections."""
        await self.store.close()
        if self.cache:
            await self.cache.close()
