"""API routes implementation."""

from datetime import datetime, timezone

from fastapi import APIRouter, Request, status
from fastapi.responses import RedirectResponse

from hashlink.common.headers import build_base_url
from hashlink.errors import NotFoundError
from hashlink.hasher import is_valid_hash
from .schemas import (
    ErrorResponse,
    HealthResponse,
    ShortenRequest,
    ShortenResponse,
    URLInfoResponse,
)

router = APIRouter()


@router.post(
    "",
    response_model=ShortenResponse,
    responses={
        422: {"description": "Invalid URL"},
        503: {"model": ErrorResponse, "description": "Allocation exhausted or storage unavailable"},
    },
    summary="Create short URL",
    description="Shorten a URL. Shortening the same URL again returns the same short URL.",
)
@router.post("/", response_model=ShortenResponse, include_in_schema=False)
async def shorten_url(request: Request, body: ShortenRequest):
    """Create a shortened URL."""
    service = request.app.state.service
    config = request.app.state.config

    base_url = build_base_url(
        headers=dict(request.headers),
        fallback_base_url=config.base_url,
        request_scheme=request.url.scheme,
        request_host=request.headers.get("host"),
    )

    result = await service.create_short_url(
        long_url=body.long_url,
        base_url=base_url,
        path_prefix=config.path_prefix,
    )

    return ShortenResponse(
        short_url=result["short_url"],
        hash=result["hash"],
        long_url=result["long_url"],
    )


@router.get(
    "/urls/{short_code}",
    response_model=URLInfoResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Short code not found"},
    },
    summary="Get URL information",
)
async def get_url_info(request: Request, short_code: str):
    """Get the stored mapping for a short code."""
    service = request.app.state.service

    if not is_valid_hash(short_code):
        raise NotFoundError(short_code)

    mapping = await service.get_url_info(short_code)

    if mapping is None:
        raise NotFoundError(short_code)

    return URLInfoResponse(
        hash=mapping.hash,
        long_url=mapping.long_url,
        created_at=mapping.created_at,
    )


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
)
async def health_check(request: Request):
    """Health check endpoint for load balancers and monitoring."""
    service = request.app.state.service

    health = await service.health_check()

    return HealthResponse(
        status="healthy" if health["overall"] else "unhealthy",
        database="healthy" if health["database"] else "unhealthy",
        cache="healthy" if health["cache"] else "unhealthy",
        timestamp=datetime.now(timezone.utc),
    )


@router.get(
    "/{short_code}",
    responses={
        302: {"description": "Redirect to the original URL"},
        404: {"model": ErrorResponse, "description": "Short code not found"},
    },
    summary="Resolve short code",
)
async def resolve_short_code(request: Request, short_code: str):
    """Redirect to the original URL for a short code."""
    service = request.app.state.service

    # Codes outside the hasher's output format can never be stored
    if not is_valid_hash(short_code):
        raise NotFoundError(short_code)

    long_url = await service.get_original_url(short_code)

    if long_url is None:
        raise NotFoundError(short_code)

    return RedirectResponse(url=long_url, status_code=status.HTTP_302_FOUND)
