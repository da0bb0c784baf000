"""
Application factory for FastAPI.

This module provides a factory function for creating FastAPI application instances.
The factory pattern allows for:
- Easy testing with custom settings and an explicitly constructed store
- Multiple app instances with different configurations
- Clear separation of app creation from route definitions

Usage:
    from backend.main import create_app
    from backend.settings import Settings

    # Default app (uses get_settings(), builds the store on startup)
    app = create_app()

    # Test app with custom settings and its own store
    test_settings = Settings(environment="test", _env_file=None)
    test_app = create_app(settings=test_settings, store=SqliteWorkoutStore(tmp_path / "t.db"))
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.deps import build_store
from api.errors import register_exception_handlers
from application.ports import WorkoutStore
from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[WorkoutStore] = None,
) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.
        store: Optional store instance. If not provided, one is built from
               settings when the application starts.

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    _configure_logging(settings)

    # Initialize Sentry for error tracking
    _init_sentry(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if app.state.store is None:
            app.state.store = build_store(settings)
        _log_startup(settings, app.state.store)
        yield
        logger.info("Shutting down gracefully...")

    # Create FastAPI app
    app = FastAPI(
        title="Workout Tracker API",
        description="Exercise and workout tracking API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store

    # Configure CORS middleware
    _configure_cors(app, settings)

    # Render every error as {"error": message}
    register_exception_handlers(app)

    # Include API routers
    _include_routers(app)

    return app


def _configure_logging(settings: Settings) -> None:
    """Configure root logging once, at the configured level."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,  # 10% of transactions for performance monitoring
            profiles_sample_rate=0.1,
            enable_tracing=True,
        )
        logger.info("Sentry initialized for workout-tracker-api")


def _configure_cors(app: FastAPI, settings: Settings) -> None:
    """Configure CORS middleware for the application."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _include_routers(app: FastAPI) -> None:
    """Include all API routers in the application."""
    from api.routers import (
        health_router,
        exercises_router,
        workouts_router,
        workout_actions_router,
    )

    # Health router (no prefix - /health at root)
    app.include_router(health_router)

    # Per-resource routes
    app.include_router(exercises_router)
    app.include_router(workouts_router)

    # Single action-dispatched endpoint
    app.include_router(workout_actions_router)


def _log_startup(settings: Settings, store: WorkoutStore) -> None:
    """Log which store backs the API and whether it is configured."""
    provider = getattr(store, "provider", type(store).__name__)
    logger.info(f"Workout Tracker API starting ({settings.environment}), store: {provider}")
    if provider == "supabase":
        logger.info(f"Supabase URL: {'configured' if settings.supabase_url else 'not configured'}")
        logger.info(f"Supabase Key: {'configured' if settings.supabase_key else 'not configured'}")
    elif provider == "sqlite":
        logger.info(f"SQLite database: {store.db_path}")


# Default app instance for uvicorn
# This allows: uvicorn backend.main:app --reload
app = create_app()
