"""Shared test fixtures and configuration.

Every test gets its own SQLite file under tmp_path, so nothing leaks
between tests and no .env file is read.
"""

import os

# Keep a developer's environment from selecting the production engine
os.environ.pop("ENVIRONMENT", None)
os.environ.pop("NODE_ENV", None)

import pytest
from fastapi.testclient import TestClient

from portfolio_api.core.config import Settings
from portfolio_api.core.database import create_storage
from portfolio_api.db.init_db import initialize_database


@pytest.fixture
def settings(tmp_path):
    """Development settings pointing at a temporary SQLite file."""
    return Settings(
        _env_file=None,
        environment="development",
        sqlite_path=str(tmp_path / "test_portfolio.db"),
        log_level="WARNING",
    )


@pytest.fixture
def storage(settings):
    """An initialized SQLiteBackend."""
    backend = create_storage(settings)
    initialize_database(backend)
    yield backend
    backend.dispose()


@pytest.fixture
def app(settings):
    from portfolio_api.main import create_app
    return create_app(settings)


@pytest.fixture
def client(app):
    """TestClient with the lifespan running (storage opened and initialized)."""
    with TestClient(app) as test_client:
        yield test_client
