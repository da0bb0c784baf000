"""
Domain models for the Workout Tracker API.

These models represent the core business concepts and are independent of
the backing store and the HTTP layer:
- Exercise: A named activity definition
- WorkoutEntry: One exercise performed on a date, for a duration
- WorkoutExercise: An ``{id, duration}`` pair submitted when saving a workout
"""

from domain.models.exercise import MAX_INT, Exercise
from domain.models.workout import WorkoutEntry, WorkoutExercise

__all__ = [
    "MAX_INT",
    "Exercise",
    "WorkoutEntry",
    "WorkoutExercise",
]
