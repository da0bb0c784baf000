"""
FastAPI Dependency Providers for the Workout Tracker API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake stores.

Architecture:
- Settings are cached per-process (lru_cache in backend.settings)
- The store is built once by the app lifespan (build_store) and kept on
  app.state; get_workout_store hands that instance to each request

Usage in routers:
    from api.deps import get_workout_store
    from application.ports import WorkoutStore

    @router.get("/api/exercises")
    def list_exercises(store: WorkoutStore = Depends(get_workout_store)):
        return store.list_exercises()

Testing:
    # Pass a store to the factory
    app = create_app(settings=test_settings, store=FakeWorkoutStore())

    # Or override the dependency
    app.dependency_overrides[get_workout_store] = lambda: FakeWorkoutStore()
"""

import logging

from fastapi import HTTPException, Request
from supabase import Client, create_client

from application.ports import WorkoutStore
from infrastructure import SqliteWorkoutStore, SupabaseWorkoutStore
from backend.settings import Settings, get_settings as _get_settings

logger = logging.getLogger(__name__)


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Store Construction
# =============================================================================


def get_supabase_client(settings: Settings) -> Client:
    """
    Create a Supabase client from settings.

    Raises:
        RuntimeError: If SUPABASE_URL or a Supabase key is missing
    """
    if not settings.supabase_configured:
        raise RuntimeError(
            "STORE_BACKEND=supabase requires SUPABASE_URL and SUPABASE_ANON_KEY "
            "(or SUPABASE_SERVICE_ROLE_KEY) to be set"
        )
    return create_client(settings.supabase_url, settings.supabase_key)


def build_store(settings: Settings) -> WorkoutStore:
    """
    Build the store selected by settings.store_backend.

    The SQLite store creates settings.data_dir and its schema on first run.

    Returns:
        WorkoutStore: Store instance to share across requests
    """
    if settings.store_backend == "supabase":
        client = get_supabase_client(settings)
        return SupabaseWorkoutStore(client, use_rpc=settings.supabase_workout_rpc)
    return SqliteWorkoutStore(settings.sqlite_path)


# =============================================================================
# Store Provider
# =============================================================================


def get_workout_store(request: Request) -> WorkoutStore:
    """
    Get the WorkoutStore built at startup.

    Raises:
        HTTPException: 503 if the application has no store
    """
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise HTTPException(status_code=503, detail="Database not available")
    return store


__all__ = [
    "get_settings",
    "get_supabase_client",
    "build_store",
    "get_workout_store",
]
