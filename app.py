#!/usr/bin/env python3
"""
Main entry point for URL shortener service.

Concurrency: requests are served with async I/O (FastAPI + asyncpg pool +
redis.asyncio). Short code uniqueness is enforced by the database's unique
index, so WORKERS > 1 is safe: uvicorn then runs build_application in each
worker process, and each worker has its own pool.

Usage:
    python app.py

Environment variables:
    DATABASE_URL - PostgreSQL connection URL (memory:// for an in-process store)
    DB_CREATE_TABLES - Set to true to create the schema on startup
    REDIS_URL - Redis connection URL (optional)
    BASE_URL - Base URL for short links
    PORT - Port to listen on
    WORKERS - Number of uvicorn worker processes (default 1)
    MAX_COLLISION_RETRIES - Hash perturbations per allocation (default 3)
    LOG_LEVEL - Logging level
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import load_config
from hashlink.database import create_store
from hashlink.database.cache import RedisCache
from hashlink.service import URLShortenerService
from hashlink.common.logging_config import setup_logging
from web_app import create_app


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    config = app.state.config
    logger = app.state.logger

    logger.info("Starting URL shortener service...")

    # One store client for the whole process, closed at shutdown
    store = create_store(
        config.database_url,
        pool_max_size=config.db_pool_max_size,
        create_tables=config.db_create_tables,
        logger=logger,
    )
    await store.connect()

    if config.redis_url:
        logger.info(f"Connecting to Redis at {config.redis_url}")
        cache = RedisCache(
            redis_url=config.redis_url,
            ttl_seconds=config.cache_ttl_seconds,
            logger=logger,
        )
        await cache.connect()
    else:
        logger.info("Redis caching disabled")
        cache = None

    service = URLShortenerService(
        store=store,
        cache=cache,
        logger=logger,
        max_collision_retries=config.max_collision_retries,
    )

    app.state.store = store
    app.state.cache = cache
    app.state.service = service

    logger.info("Service started successfully")

    yield

    logger.info("Shutting down URL shortener service...")
    await service.close()
    logger.info("Service stopped")


def build_application(config=None) -> FastAPI:
    """Build the app with logging set up and the lifespan attached.

    Called with no arguments as uvicorn's app factory in each worker process.
    """
    config = config or load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    app = create_app(
        store_instance=None,  # Set in lifespan
        cache_instance=None,
        service_instance=None,
        config=config,
    )
    app.state.logger = logger
    app.router.lifespan_context = lifespan
    return app


def main():
    """Main entry point."""
    config = load_config()
    app = build_application(config)
    logger = app.state.logger

    logger.info("hashlink URL shortener")
    logger.info(f"Configuration: {config.model_dump(exclude={'database_url', 'redis_url'})}")

    if config.workers > 1:
        # uvicorn's supervisor handles signals and imports the factory per worker
        logger.info(f"Starting {config.workers} workers on {config.host}:{config.port}")
        uvicorn.run(
            "app:build_application",
            factory=True,
            host=config.host,
            port=config.port,
            workers=config.workers,
            log_level=config.log_level.lower(),
            access_log=True,
        )
        return

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        access_log=True,
    )

    server = uvicorn.Server(uvicorn_config)

    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
