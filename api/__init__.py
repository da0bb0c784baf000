"""
API package for the Workout Tracker API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- errors.py: Exception handlers rendering {"error": message} bodies
- schemas/: Request/response models
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    build_store,
    get_settings,
    get_supabase_client,
    get_workout_store,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "build_store",
    "get_workout_store",
]
