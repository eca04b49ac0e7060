"""
Error classes for the URL shortener.

Each error carries the HTTP status code the web layer reports it with.
"""

from typing import Optional


class HashlinkError(Exception):
    """
    Base error class.

    Attributes:
        status_code: HTTP status code (default: 500)
        message: Error message (default: "Internal server error")
    """
    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.message
        super().__init__(self.message)


class ConflictError(HashlinkError):
    """A short code is already taken in the store (unique index violation)."""
    status_code = 409
    message = "Short code already exists"

    def __init__(self, short_code: str, message: Optional[str] = None):
        self.short_code = short_code
        super().__init__(message or f"Short code '{short_code}' already exists")


class NotFoundError(HashlinkError):
    """404 No mapping exists for a short code. Raised by the HTTP layer only."""
    status_code = 404
    message = "Short URL not found"

    def __init__(self, short_code: str):
        self.short_code = short_code
        super().__init__(f"Short code '{short_code}' not found")


class StorageError(HashlinkError):
    """503 Storage failure other than a uniqueness violation."""
    status_code = 503
    message = "Storage unavailable"


class AllocationExhausted(HashlinkError):
    """503 No unique short code could be produced within the retry budget."""
    status_code = 503
    message = "Failed to create a unique short URL after multiple attempts."
