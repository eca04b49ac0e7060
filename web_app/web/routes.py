"""Web interface routes implementation."""

import os

from fastapi import APIRouter, Form, HTTPException, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from hashlink.common.headers import build_base_url
from hashlink.common.url_builder import build_short_url
from hashlink.common.validators import is_valid_url
from hashlink.errors import HashlinkError
from hashlink.hasher import is_valid_hash

router = APIRouter()

template_dir = os.path.join(os.path.dirname(__file__), "..", "..", "ux", "web")
templates = Jinja2Templates(directory=template_dir)


def _base_url_from_request(request: Request) -> str:
    return build_base_url(
        headers=dict(request.headers),
        fallback_base_url=request.app.state.config.base_url,
        request_scheme=request.url.scheme,
        request_host=request.headers.get("host"),
    )


def _error_page(request: Request, message: str, status_code: int) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "error.html",
        {"error_message": message},
        status_code=status_code,
    )


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def homepage(request: Request):
    """Serve the form page."""
    return templates.TemplateResponse(request, "index.html", {"error_message": None, "url": ""})


@router.post("/create", response_class=HTMLResponse, include_in_schema=False)
async def create_short_url_web(request: Request, url: str = Form("")):
    """Handle form submission to create short URL."""
    service = request.app.state.service
    config = request.app.state.config

    url = url.strip()
    is_valid, error = is_valid_url(url)
    if not is_valid:
        return templates.TemplateResponse(
            request,
            "index.html",
            {"error_message": "Please enter a valid URL.", "detail": error, "url": url},
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    try:
        result = await service.create_short_url(
            long_url=url,
            base_url=_base_url_from_request(request),
            path_prefix=config.path_prefix,
        )
    except HashlinkError as e:
        return _error_page(request, e.message, e.status_code)

    # Relative redirect so it works behind a path-stripping proxy
    return RedirectResponse(
        url=f"result/{result['hash']}",
        status_code=status.HTTP_303_SEE_OTHER,
    )


@router.get("/result/{short_code}", response_class=HTMLResponse, include_in_schema=False)
async def result_page(request: Request, short_code: str):
    """Show result page with short URL."""
    service = request.app.state.service
    config = request.app.state.config

    mapping = None
    if is_valid_hash(short_code):
        mapping = await service.get_url_info(short_code)

    if mapping is None:
        return _error_page(request, f"Short code '{short_code}' not found", status.HTTP_404_NOT_FOUND)

    short_url = build_short_url(
        short_code=short_code,
        base_url=_base_url_from_request(request),
        path_prefix=config.path_prefix,
    )

    return templates.TemplateResponse(
        request,
        "result.html",
        {"short_url": short_url, "short_code": short_code, "long_url": mapping.long_url},
    )


@router.get("/health", include_in_schema=False)
async def health_check_web(request: Request):
    """Health check endpoint (simple version for load balancers)."""
    service = request.app.state.service

    health = await service.health_check()

    if health["overall"]:
        return {"status": "healthy"}
    raise HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="Service unhealthy",
    )


@router.get("/{short_code}", include_in_schema=False)
async def redirect_to_url(request: Request, short_code: str):
    """Redirect to the original URL."""
    service = request.app.state.service

    long_url = None
    if is_valid_hash(short_code):
        long_url = await service.get_original_url(short_code)

    if long_url is None:
        return _error_page(request, f"Short code '{short_code}' not found", status.HTTP_404_NOT_FOUND)

    return RedirectResponse(url=long_url, status_code=status.HTTP_302_FOUND)
