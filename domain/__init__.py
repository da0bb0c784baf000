"""
Domain layer for the Workout Tracker API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).
"""

from domain.models import (
    Exercise,
    WorkoutEntry,
    WorkoutExercise,
)

__all__ = [
    "Exercise",
    "WorkoutEntry",
    "WorkoutExercise",
]
