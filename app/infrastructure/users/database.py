"""
Async SQLAlchemy engine construction.

The engine owns the connection pool shared by every request.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from app.core.config import Settings

logger = logging.getLogger(__name__)


def build_engine(settings: Settings) -> AsyncEngine:
    """Build an async engine from application settings.

    Args:
        settings: Application settings holding the DSN and pool sizing.

    Returns:
        An AsyncEngine with a pre-pinging connection pool.
    """
    url = settings.get_database_url()
    logger.info(
        "Creating database engine: pool_size=%d, max_overflow=%d",
        settings.db_pool_size,
        settings.db_max_overflow,
    )
    return create_async_engine(
        url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,
    )
