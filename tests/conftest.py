"""
Shared fixtures for the test suite.

HTTP tests run against an in-memory repository so no database is needed.
"""

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.container import Container
from app.infrastructure.users.memory_repository import InMemoryUserRepository
from app.main import create_app


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(
        _env_file=None,
        storage_backend="memory",
        rate_limit_enabled=False,
        log_level="WARNING",
    )


@pytest.fixture
def memory_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def client(test_settings: Settings, memory_repo: InMemoryUserRepository) -> TestClient:
    """TestClient for an app backed by a fresh in-memory repository."""
    app = create_app(
        settings=test_settings,
        container=Container(memory_repo, memory_repo),
    )
    return TestClient(app)
