"""Short code allocation with collision handling."""

import logging
from typing import Callable, Optional

from .database.base import URLStoreBase
from .errors import AllocationExhausted, ConflictError
from .hasher import hash_url, perturb


class CodeAllocator:
    """Maps a long URL to a unique short code and persists the mapping once.

    The store's unique index on the code is the only conflict signal, so
    any number of allocators may share one store without locking.
    """

    def __init__(
        self,
        store: URLStoreBase,
        hasher: Callable[[str], str] = hash_url,
        perturber: Callable[[str], str] = perturb,
        max_retries: int = 3,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize allocator.

        Args:
            store: Store with insert-with-unique-code semantics
            hasher: Function mapping a string to a short code
            perturber: Function returning a modified hash input for a URL
            max_retries: Number of perturbations before giving up
            logger: Optional logger
        """
        self.store = store
        self.hasher = hasher
        self.perturber = perturber
        self.max_retries = max_retries
        self.logger = logger or logging.getLogger(__name__)

    async def allocate(self, long_url: str) -> str:
        """Get the short code for a long URL, creating the mapping if needed.

        Args:
            long_url: The original long URL

        Returns:
            Short code now mapped to long_url

        Raises:
            AllocationExhausted: If every attempt collided
            StorageError: On any storage failure other than a conflict
        """
        short_code = self.hasher(long_url)
        retries = 0

        while retries < self.max_retries:
            try:
                await self.store.insert_mapping(short_code, long_url)
                self.logger.info(f"Allocated short code: {short_code} -> {long_url}")
                return short_code
            except ConflictError:
                self.logger.debug(f"Short code conflict on {short_code} (retry {retries})")

            # Only before the first perturbation can the conflict be our own URL
            if retries == 0:
                existing = await self.store.find_by_long_url(long_url)
                if existing:
                    self.logger.info(f"Reusing short code {existing.hash} for {long_url}")
                    return existing.hash

            retries += 1
            short_code = self.hasher(self.perturber(long_url))
            self.logger.warning(
                f"Hash collision for {long_url}, retrying with {short_code} "
                f"({retries}/{self.max_retries})"
            )

        self.logger.error(f"Unable to allocate a short code for {long_url} after {retries} retries")
        raise AllocationExhausted()
