"""Data models for URL shortener."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional


@dataclass(frozen=True)
class URLMapping:
    """Represents a stored long URL -> short code mapping."""

    long_url: str
    hash: str
    created_at: datetime
    id: Optional[Any] = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "long_url": self.long_url,
            "hash": self.hash,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    @classmethod
    def from_record(cls, record) -> "URLMapping":
        """Create from a database row (asyncpg Record or mapping)."""
        return cls(
            id=record["id"],
            long_url=record["long_url"],
            hash=record["hash"],
            created_at=record["created_at"],
        )
