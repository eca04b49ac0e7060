"""Abstract base class for URL shortener store implementations."""

from abc import ABC, abstractmethod
from typing import Optional

from .models import URLMapping


class URLStoreBase(ABC):
    """Abstract base class for URL mapping storage.

    Implementations must enforce uniqueness of the short code themselves and
    report a duplicate with ConflictError. Every other failure is reported
    as StorageError.
    """

    def __init__(self, db_config: str):
        """Initialize store.

        Args:
            db_config: Connection string
        """
        self.db_config = db_config

    async def connect(self) -> None:
        """Open connections. Stores without a connection need not override."""
        return None

    @abstractmethod
    async def insert_mapping(self, short_code: str, long_url: str) -> URLMapping:
        """Persist a new mapping.

        Args:
            short_code: The short code (must be unique)
            long_url: The original long URL

        Returns:
            The stored mapping

        Raises:
            ConflictError: If short_code is already taken
            StorageError: On any other failure
        """
        pass

    @abstractmethod
    async def find_by_long_url(self, long_url: str) -> Optional[URLMapping]:
        """Get the mapping for a long URL, or None."""
        pass

    @abstractmethod
    async def find_by_hash(self, short_code: str) -> Optional[URLMapping]:
        """Get the mapping for a short code, or None."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the store is reachable.

        Returns:
            True if healthy, False otherwise
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close connections."""
        pass
