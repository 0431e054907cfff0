"""
Database connection management.

This module handles:
- Engine creation for the active backend (SQLite or PostgreSQL)
- Connection pooling for the client-server engine
- Retry logic while the database server comes up
- Connection health checks
"""

import time
from pathlib import Path
from typing import Any, Dict, Optional
import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import QueuePool

from portfolio_api.core.config import Settings, get_settings
from portfolio_api.core.exceptions import ConfigurationException
from portfolio_api.db.adapter import PostgresBackend, SQLiteBackend, StorageBackend

logger = logging.getLogger('CORE_DATABASE')

# Optimized retry logic with exponential backoff
RETRY_DELAYS = [1, 2, 3, 5, 8]


def _create_sqlite(url: str, settings: Settings) -> StorageBackend:
    database = make_url(url).database
    if database and database != ":memory:":
        Path(database).parent.mkdir(parents=True, exist_ok=True)

    # Request handlers run in a thread pool
    engine = create_engine(
        url,
        echo=settings.db_echo,
        connect_args={"check_same_thread": False},
    )
    return SQLiteBackend(engine)


def _create_postgres(url: str, settings: Settings) -> StorageBackend:
    engine_config = {
        'poolclass': QueuePool,
        'pool_size': settings.db_pool_size,
        'max_overflow': settings.db_max_overflow,
        'pool_timeout': settings.db_pool_timeout,
        'pool_recycle': settings.db_pool_recycle,
        'pool_pre_ping': settings.db_pool_pre_ping,
        'echo': settings.db_echo,
    }

    for i, delay in enumerate(RETRY_DELAYS):
        try:
            engine = create_engine(url, **engine_config)
            # Test connection with health check
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            logger.info(f"Database connection established successfully on attempt {i+1}")
            return PostgresBackend(engine)
        except OperationalError as e:
            logger.error(f" Database not ready (attempt {i+1}/{len(RETRY_DELAYS)}): {e}")
            if i < len(RETRY_DELAYS) - 1:
                logger.info(f"  Retrying in {delay} seconds...")
                time.sleep(delay)
            else:
                raise ConfigurationException(
                    f"Could not connect to the database after {len(RETRY_DELAYS)} attempts"
                ) from e

    raise ConfigurationException("No connection attempts were made")


def create_storage(settings: Optional[Settings] = None) -> StorageBackend:
    """
    Create the storage backend selected by the settings.

    Args:
        settings: Application settings (defaults to the cached instance)

    Returns:
        StorageBackend: SQLiteBackend in development, PostgresBackend in production
    """
    settings = settings or get_settings()
    url = settings.get_database_url()
    logger.info(f"Initializing database connection to: {make_url(url).render_as_string(hide_password=True)}")

    if url.startswith("sqlite"):
        return _create_sqlite(url, settings)
    if url.startswith("postgresql"):
        return _create_postgres(url, settings)
    raise ConfigurationException(f"Unsupported database URL scheme: {make_url(url).drivername}")


def get_database_health(storage: StorageBackend) -> Dict[str, Any]:
    """
    Check database connection health and return status.

    Returns:
        dict: Health status with connection pool information

    Example:
        {
            "status": "healthy",
            "backend": "sqlite",
            "pool": "Pool size: 5  Connections in pool: 0 ..."
        }
    """
    return storage.health()
