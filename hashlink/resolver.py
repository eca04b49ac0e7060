"""Short code lookup."""

import logging
from typing import Optional

from .database.base import URLStoreBase
from .database.cache import RedisCache


class Resolver:
    """Resolves a short code to its long URL."""

    def __init__(
        self,
        store: URLStoreBase,
        cache: Optional[RedisCache] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.store = store
        self.cache = cache
        self.logger = logger or logging.getLogger(__name__)

    async def resolve(self, short_code: str) -> Optional[str]:
        """Get the long URL for a short code.

        Args:
            short_code: The short code to lookup

        Returns:
            Long URL, or None if no mapping exists

        Raises:
            StorageError: If the store cannot be read
        """
        if self.cache:
            cached_url = await self.cache.get(self.cache.get_cache_key(short_code))
            if cached_url:
                self.logger.debug(f"Cache hit for {short_code}")
                return cached_url

        mapping = await self.store.find_by_hash(short_code)
        if mapping is None:
            self.logger.info(f"Short code not found: {short_code}")
            return None

        if self.cache:
            await self.cache.set(self.cache.get_cache_key(short_code), mapping.long_url)

        self.logger.debug(f"Resolved: {short_code} -> {mapping.long_url}")
        return mapping.long_url
