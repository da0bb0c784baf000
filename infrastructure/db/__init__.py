"""
Infrastructure Database Layer.

This package provides the store implementations of the WorkoutStore
interface defined in application.ports. One instance is constructed at
startup and injected into the routers.

Usage:
    from supabase import create_client
    from infrastructure.db import SupabaseWorkoutStore, SqliteWorkoutStore

    # Hosted Postgres over REST
    client = create_client(SUPABASE_URL, SUPABASE_KEY)
    store = SupabaseWorkoutStore(client)

    # Local database file
    store = SqliteWorkoutStore("data/workouts.db")
"""

from infrastructure.db.supabase_store import SupabaseWorkoutStore
from infrastructure.db.sqlite_store import SqliteWorkoutStore

__all__ = [
    "SupabaseWorkoutStore",
    "SqliteWorkoutStore",
]
