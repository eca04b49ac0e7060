"""Core business logic for URL shortener."""

from .allocator import CodeAllocator
from .errors import AllocationExhausted, ConflictError, NotFoundError, StorageError
from .hasher import hash_url
from .resolver import Resolver
from .service import URLShortenerService

__all__ = [
    "CodeAllocator",
    "Resolver",
    "URLShortenerService",
    "hash_url",
    "AllocationExhausted",
    "ConflictError",
    "NotFoundError",
    "StorageError",
]
