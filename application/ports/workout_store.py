"""
Workout Store Interface (Port).

This module defines the abstract interface for exercise and workout
persistence. Implementations exist for Supabase (REST) and SQLite
(embedded file); both must behave identically for every operation,
including the exercise deletion guard.
"""
from typing import List, Optional, Protocol, Sequence

from domain.models import Exercise, WorkoutEntry, WorkoutExercise


class WorkoutStore(Protocol):
    """
    Abstract interface for exercise and workout persistence.

    Store failures are raised as application.exceptions.WorkoutStoreError.
    """

    # =========================================================================
    # Exercises
    # =========================================================================

    def list_exercises(self) -> List[Exercise]:
        """
        Get all exercises.

        Returns:
            Exercises sorted by id ascending
        """
        ...

    def get_exercise(self, exercise_id: int) -> Optional[Exercise]:
        """
        Get an exercise by ID.

        Args:
            exercise_id: Exercise ID

        Returns:
            Exercise or None if not found
        """
        ...

    def add_exercise(self, name: str, gif: Optional[str]) -> Exercise:
        """
        Create an exercise.

        Args:
            name: Display name
            gif: Reference image URL

        Returns:
            The created exercise with its assigned ID
        """
        ...

    def update_exercise(self, exercise_id: int, name: str, gif: Optional[str]) -> bool:
        """
        Replace the name and gif of an existing exercise.

        Args:
            exercise_id: Exercise ID
            name: New display name
            gif: New reference image URL

        Returns:
            True if a row existed and was updated; never creates a row
        """
        ...

    def is_exercise_in_use(self, exercise_id: int) -> bool:
        """
        Check whether any workout entry references an exercise.

        Args:
            exercise_id: Exercise ID

        Returns:
            True if at least one workout entry references the exercise
        """
        ...

    def delete_exercise(self, exercise_id: int) -> bool:
        """
        Delete an exercise that no workout references.

        Args:
            exercise_id: Exercise ID

        Returns:
            True if a row was deleted, False if it did not exist

        Raises:
            ExerciseInUseError: If workout entries reference the exercise.
                Nothing is deleted.
        """
        ...

    # =========================================================================
    # Workouts
    # =========================================================================

    def get_workout_by_date(self, date: str) -> List[WorkoutEntry]:
        """
        Get the entries of one day's workout.

        Args:
            date: Calendar date (YYYY-MM-DD)

        Returns:
            Entries ordered by entry id, enriched with exercise name and gif
        """
        ...

    def save_workout(self, date: str, exercises: Sequence[WorkoutExercise]) -> None:
        """
        Replace the workout for a date.

        Deletes every existing entry for ``date`` and inserts one entry per
        element of ``exercises``.

        Args:
            date: Calendar date (YYYY-MM-DD)
            exercises: New entries for the day

        Raises:
            UnknownExerciseError: If any referenced exercise does not exist.
                Nothing is written.
        """
        ...

    def list_workout_dates(self) -> List[str]:
        """
        Get every date that has a workout.

        Returns:
            Unique dates, most recent first
        """
        ...

    def delete_workout(self, date: str) -> int:
        """
        Delete the workout for a date.

        Args:
            date: Calendar date (YYYY-MM-DD)

        Returns:
            Number of entries removed
        """
        ...

    # =========================================================================
    # Health
    # =========================================================================

    def ping(self) -> bool:
        """Return True if the backing store answers a trivial query."""
        ...
