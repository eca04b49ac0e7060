"""Storage layer for URL shortener."""

import logging
from typing import Optional

from .base import URLStoreBase
from .memory import InMemoryURLStore
from .models import URLMapping
from .postgres import PostgresURLStore

__all__ = ["URLStoreBase", "InMemoryURLStore", "PostgresURLStore", "URLMapping", "create_store"]


def create_store(
    db_config: str,
    pool_max_size: int = 10,
    create_tables: bool = False,
    logger: Optional[logging.Logger] = None,
) -> URLStoreBase:
    """Build the store for a connection string.

    Args:
        db_config: postgresql://... or memory://
        pool_max_size: Maximum size of the PostgreSQL connection pool
        create_tables: Create the PostgreSQL schema on connect
        logger: Optional logger

    Returns:
        Store instance (not yet connected)
    """
    if db_config.startswith("memory://"):
        return InMemoryURLStore(db_config, logger=logger)
    return PostgresURLStore(
        db_config,
        pool_max_size=pool_max_size,
        create_tables=create_tables,
        logger=logger,
    )
