"""
Repository Interfaces (Ports) for the Workout Tracker API.

This package defines abstract interfaces that decouple request handling
from infrastructure (Supabase, SQLite). Implementations are provided
in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the API needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import WorkoutStore

    def list_exercises(store: WorkoutStore):
        return store.list_exercises()
"""

from application.ports.workout_store import WorkoutStore

__all__ = [
    "WorkoutStore",
]
