"""
Pytest fixtures for Workout Tracker API tests.

Every app fixture gets its own store instance, so tests never share data.
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from backend.main import create_app
from backend.settings import Settings
from infrastructure.db import SqliteWorkoutStore
from tests.fakes import FakeWorkoutStore


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Test settings pointing the SQLite store at a temporary directory."""
    return Settings(
        environment="test",
        store_backend="sqlite",
        data_dir=tmp_path / "data",
        _env_file=None,
    )


# ---------------------------------------------------------------------------
# Stores
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_store() -> FakeWorkoutStore:
    """A fresh in-memory store."""
    return FakeWorkoutStore()


@pytest.fixture
def sqlite_store(tmp_path) -> SqliteWorkoutStore:
    """A fresh SQLite store in a temporary directory."""
    return SqliteWorkoutStore(tmp_path / "data" / "workouts.db")


@pytest.fixture(params=["fake", "sqlite"])
def store(request, tmp_path):
    """Each store implementation that runs without network access."""
    if request.param == "sqlite":
        return SqliteWorkoutStore(tmp_path / "workouts.db")
    return FakeWorkoutStore()


# ---------------------------------------------------------------------------
# Test App and Client
# ---------------------------------------------------------------------------


@pytest.fixture
def app(test_settings, fake_store):
    """Application wired to the fake store."""
    return create_app(settings=test_settings, store=fake_store)


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    """TestClient for the fake-store app; runs the lifespan."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sqlite_client(test_settings, sqlite_store) -> Generator[TestClient, None, None]:
    """TestClient for an app backed by a real SQLite file."""
    app = create_app(settings=test_settings, store=sqlite_store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def lenient_client(app) -> Generator[TestClient, None, None]:
    """TestClient that returns 500 responses instead of re-raising errors."""
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


# ---------------------------------------------------------------------------
# Command line options (used by tests/e2e)
# ---------------------------------------------------------------------------


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--live",
        action="store_true",
        default=False,
        help="Run e2e tests against a running server",
    )
    parser.addoption(
        "--api-url",
        action="store",
        default="http://localhost:3000",
        help="Base URL of the running server",
    )
