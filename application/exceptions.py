"""
Application-layer exceptions.

These exceptions are raised by the store adapters in infrastructure/db and
translated into HTTP responses by api/errors.py.
"""

from typing import Iterable, List


class WorkoutStoreError(Exception):
    """Error talking to the backing store.

    Wraps network failures, PostgREST errors and SQLite errors. The message
    of the underlying error is preserved and returned to the caller.
    """

    pass


class ExerciseInUseError(Exception):
    """Raised when deleting an exercise that workout entries still reference."""

    def __init__(self, exercise_id: int):
        super().__init__("Cannot delete exercise that is used in workouts")
        self.exercise_id = exercise_id


class UnknownExerciseError(Exception):
    """Raised when a workout references exercise IDs that do not exist."""

    def __init__(self, exercise_ids: Iterable[int]):
        self.exercise_ids: List[int] = sorted(set(exercise_ids))
        ids = ", ".join(str(i) for i in self.exercise_ids)
        super().__init__(f"Unknown exercise id(s): {ids}")
