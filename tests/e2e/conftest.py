"""
E2E test fixtures and configuration.

These fixtures provide:
- A SupabaseWorkoutStore on a real project, for store-level checks
- HTTP client for API endpoint testing against a running server

Every fixture skips when its prerequisites (credentials, --live) are absent.
Records are written under E2E_DATE and removed again after each test.
"""
import os
from typing import Generator, List

import httpx
import pytest
from dotenv import load_dotenv
from supabase import Client, create_client

from infrastructure.db import SupabaseWorkoutStore
from tests.e2e import E2E_DATE, E2E_EXERCISE_PREFIX


# Load environment variables from .env file
load_dotenv()


@pytest.fixture(scope="session")
def live_mode(request) -> bool:
    """Check if tests should run against live API."""
    return request.config.getoption("--live")


@pytest.fixture(scope="session")
def api_base_url(request) -> str:
    """Get the API base URL from command line or default."""
    return request.config.getoption("--api-url")


@pytest.fixture(scope="session")
def supabase_url() -> str:
    """Get Supabase URL from environment."""
    url = os.getenv("SUPABASE_URL")
    if not url:
        pytest.skip("SUPABASE_URL environment variable not set")
    return url


@pytest.fixture(scope="session")
def supabase_key() -> str:
    """Get the best available Supabase key from environment."""
    key = os.getenv("SUPABASE_SERVICE_ROLE_KEY") or os.getenv("SUPABASE_ANON_KEY")
    if not key:
        pytest.skip("SUPABASE_SERVICE_ROLE_KEY / SUPABASE_ANON_KEY not set")
    return key


@pytest.fixture(scope="session")
def supabase_client(supabase_url: str, supabase_key: str) -> Client:
    """Create a Supabase client for direct database access."""
    return create_client(supabase_url, supabase_key)


@pytest.fixture
def supabase_store(supabase_client: Client) -> Generator[SupabaseWorkoutStore, None, None]:
    """Store on the real project; cleans up E2E rows afterwards."""
    store = SupabaseWorkoutStore(supabase_client)
    yield store
    _cleanup(supabase_client)


@pytest.fixture
def http_client(live_mode: bool, api_base_url: str, supabase_client: Client) -> Generator[httpx.Client, None, None]:
    """Create an HTTP client for a running server (requires --live)."""
    if not live_mode:
        pytest.skip("Pass --live to run against a running server")
    with httpx.Client(base_url=api_base_url, timeout=30.0) as client:
        yield client
    _cleanup(supabase_client)


def _cleanup(client: Client) -> None:
    client.table("workout").delete().eq("date", E2E_DATE).execute()
    rows = client.table("exercise").select("id").like("name", f"{E2E_EXERCISE_PREFIX}%").execute().data or []
    ids: List[int] = [row["id"] for row in rows]
    if ids:
        client.table("exercise").delete().in_("id", ids).execute()
