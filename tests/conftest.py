# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides an in-memory SQLite store and a TestClient bound to it
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# app.main builds a module-level app, which reads settings on import

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from app.config import Settings
from app.main import create_app
from lib.user_store import UserStore


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def engine():
    """
    In-memory SQLite engine shared across threads.

    StaticPool keeps a single connection so every request thread sees
    the same database.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine):
    """Connected UserStore with an empty users table."""
    store = UserStore(engine)
    store.connect()
    return store


@pytest.fixture
def test_settings():
    """Settings independent of the developer's environment."""
    return Settings(DATABASE_URL="sqlite://", ENVIRONMENT="development", _env_file=None)


@pytest.fixture
def client(store, test_settings):
    """TestClient running the full app (lifespan included) on the test store."""
    app = create_app(settings=test_settings, store=store)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def sample_user_data():
    """Sample user body for testing."""
    return {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "city": "London",
    }
