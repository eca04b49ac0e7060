"""FastAPI application factory."""

import logging
import os

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from hashlink.errors import HashlinkError
from .api import api_router
from .web import web_router
from .middleware.logging import LoggingMiddleware

logger = logging.getLogger("hashlink.web")


async def hashlink_error_handler(request: Request, exc: HashlinkError) -> JSONResponse:
    """Convert service errors into JSON error responses."""
    logger.warning(f"Error in {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "detail": type(exc).__name__},
    )


def create_app(
    store_instance,
    cache_instance,
    service_instance,
    config,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        store_instance: Store instance
        cache_instance: Cache instance
        service_instance: Service instance
        config: Configuration instance

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="hashlink",
        description="URL shortening service",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    # Store instances in app state for access in routes
    app.state.store = store_instance
    app.state.cache = cache_instance
    app.state.service = service_instance
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)

    app.add_exception_handler(HashlinkError, hashlink_error_handler)

    css_path = os.path.join(os.path.dirname(__file__), "..", "ux", "web", "css")
    if os.path.exists(css_path):
        app.mount("/css", StaticFiles(directory=css_path), name="css")

    app.include_router(api_router, prefix="/api", tags=["API"])
    app.include_router(web_router, tags=["Web"])

    return app
