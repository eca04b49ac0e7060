"""Pydantic schemas for API requests and responses."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from hashlink.common.validators import MAX_URL_LENGTH, is_valid_url


class ShortenRequest(BaseModel):
    """Request to shorten a URL."""

    long_url: str = Field(
        ...,
        alias="longUrl",
        description="The URL to shorten",
        min_length=1,
        max_length=MAX_URL_LENGTH,
    )

    @field_validator("long_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate URL format."""
        is_valid, error = is_valid_url(v)
        if not is_valid:
            raise ValueError(error)
        return v

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "examples": [
                {"longUrl": "https://example.com/some/long/path"},
            ]
        },
    }


class ShortenResponse(BaseModel):
    """Response after shortening a URL."""

    short_url: str = Field(..., alias="shortUrl", description="The complete short URL")
    hash: str = Field(..., description="The short code")
    long_url: str = Field(..., alias="longUrl", description="The original long URL")

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "examples": [
                {
                    "shortUrl": "http://localhost:3000/3a7bd3e2",
                    "hash": "3a7bd3e2",
                    "longUrl": "https://example.com/some/long/path",
                }
            ]
        },
    }


class URLInfoResponse(BaseModel):
    """Response with stored mapping information."""

    hash: str
    long_url: str = Field(..., alias="longUrl")
    created_at: datetime = Field(..., alias="createdAt")

    model_config = {"populate_by_name": True}


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    database: str = Field(..., description="Database status")
    cache: str = Field(..., description="Cache status")
    timestamp: datetime = Field(..., description="Check timestamp")


class ErrorResponse(BaseModel):
    """Error response."""

    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Error type")
