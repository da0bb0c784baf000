"""
Infrastructure Layer for the Workout Tracker API.

This package contains concrete implementations of the store interface:
- db/: Supabase and SQLite implementations
"""

from infrastructure.db import (
    SupabaseWorkoutStore,
    SqliteWorkoutStore,
)

__all__ = [
    "SupabaseWorkoutStore",
    "SqliteWorkoutStore",
]
