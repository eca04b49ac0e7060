"""In-process store for development and tests."""

import itertools
import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional

from .base import URLStoreBase
from .models import URLMapping
from ..errors import ConflictError


class InMemoryURLStore(URLStoreBase):
    """Dictionary backed store with a unique index on the short code.

    Every method completes without awaiting, so inserts are atomic with
    respect to other coroutines on the same event loop.
    """

    def __init__(self, db_config: str = "memory://", logger: Optional[logging.Logger] = None):
        super().__init__(db_config)
        self.logger = logger or logging.getLogger(__name__)
        self._by_hash: Dict[str, URLMapping] = {}
        self._by_long_url: Dict[str, URLMapping] = {}
        self._ids = itertools.count(1)

    async def insert_mapping(self, short_code: str, long_url: str) -> URLMapping:
        if short_code in self._by_hash:
            raise ConflictError(short_code)

        mapping = URLMapping(
            id=next(self._ids),
            long_url=long_url,
            hash=short_code,
            created_at=datetime.now(timezone.utc),
        )
        self._by_hash[short_code] = mapping
        # First mapping per URL wins, as the canonical one
        self._by_long_url.setdefault(long_url, mapping)
        return mapping

    async def find_by_long_url(self, long_url: str) -> Optional[URLMapping]:
        return self._by_long_url.get(long_url)

    async def find_by_hash(self, short_code: str) -> Optional[URLMapping]:
        return self._by_hash.get(short_code)

    def all_mappings(self) -> List[URLMapping]:
        """All stored mappings in insertion order."""
        return list(self._by_hash.values())

    async def health_check(self) -> bool:
        return True

    async def close(self) -> None:
        self.logger.debug(f"Closing in-memory store with {len(self._by_hash)} mappings")
