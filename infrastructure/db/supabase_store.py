"""
Supabase implementation of WorkoutStore.

This module provides the concrete Supabase (PostgREST) implementation for
exercise and workout persistence. The client is injected via constructor.

Saving a workout is a delete followed by an insert. PostgREST cannot wrap
two requests in one transaction, so by default the store compensates: if the
insert fails, the rows deleted a moment earlier are re-inserted. When the
``replace_workout`` function from sql/schema.sql is deployed, pass
``use_rpc=True`` to replace the day atomically inside Postgres instead.
"""
import logging
from typing import Any, Dict, List, Optional, Sequence

from supabase import Client

from application.exceptions import (
    ExerciseInUseError,
    UnknownExerciseError,
    WorkoutStoreError,
)
from domain.models import Exercise, WorkoutEntry, WorkoutExercise

logger = logging.getLogger(__name__)

EXERCISE_TABLE = "exercise"
WORKOUT_TABLE = "workout"
REPLACE_WORKOUT_RPC = "replace_workout"


class SupabaseWorkoutStore:
    """
    Supabase implementation of WorkoutStore protocol.

    All Supabase query logic is encapsulated here. Every failed request is
    logged and re-raised as WorkoutStoreError with the PostgREST message.
    """

    provider = "supabase"

    def __init__(self, client: Client, *, use_rpc: bool = False):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
            use_rpc: Save workouts through the replace_workout RPC
        """
        self._client = client
        self._use_rpc = use_rpc

    def _execute(self, query, action: str):
        """Run a PostgREST query, translating failures into WorkoutStoreError."""
        try:
            return query.execute()
        except Exception as e:
            message = getattr(e, "message", None) or str(e)
            logger.error(f"Supabase error while trying to {action}: {message}")
            raise WorkoutStoreError(message) from e

    # =========================================================================
    # Exercises
    # =========================================================================

    def list_exercises(self) -> List[Exercise]:
        result = self._execute(
            self._client.table(EXERCISE_TABLE).select("*").order("id"),
            "list exercises",
        )
        return [Exercise(**row) for row in result.data or []]

    def get_exercise(self, exercise_id: int) -> Optional[Exercise]:
        result = self._execute(
            self._client.table(EXERCISE_TABLE).select("*").eq("id", exercise_id).limit(1),
            f"get exercise {exercise_id}",
        )
        if result.data and len(result.data) > 0:
            return Exercise(**result.data[0])
        return None

    def add_exercise(self, name: str, gif: Optional[str]) -> Exercise:
        result = self._execute(
            self._client.table(EXERCISE_TABLE).insert({"name": name, "gif": gif}),
            "add exercise",
        )
        if not result.data:
            raise WorkoutStoreError("Insert returned no exercise")
        exercise = Exercise(**result.data[0])
        logger.info(f"Exercise {exercise.id} created: {exercise.name}")
        return exercise

    def update_exercise(self, exercise_id: int, name: str, gif: Optional[str]) -> bool:
        result = self._execute(
            self._client.table(EXERCISE_TABLE).update({"name": name, "gif": gif}).eq("id", exercise_id),
            f"update exercise {exercise_id}",
        )
        updated = bool(result.data)
        if not updated:
            logger.warning(f"No exercise found with id {exercise_id} (0 rows updated)")
        return updated

    def is_exercise_in_use(self, exercise_id: int) -> bool:
        result = self._execute(
            self._client.table(WORKOUT_TABLE).select("id").eq("exercise_id", exercise_id).limit(1),
            f"check workouts referencing exercise {exercise_id}",
        )
        return bool(result.data)

    def delete_exercise(self, exercise_id: int) -> bool:
        if self.is_exercise_in_use(exercise_id):
            logger.warning(f"Refusing to delete exercise {exercise_id}: referenced by workouts")
            raise ExerciseInUseError(exercise_id)

        result = self._execute(
            self._client.table(EXERCISE_TABLE).delete().eq("id", exercise_id),
            f"delete exercise {exercise_id}",
        )
        deleted_count = len(result.data) if result.data else 0
        if deleted_count > 0:
            logger.info(f"Exercise {exercise_id} deleted")
            return True
        logger.warning(f"No exercise found with id {exercise_id} (0 rows deleted)")
        return False

    # =========================================================================
    # Workouts
    # =========================================================================

    def get_workout_by_date(self, date: str) -> List[WorkoutEntry]:
        result = self._execute(
            self._client.table(WORKOUT_TABLE)
            .select("*, exercise:exercise_id(name, gif)")
            .eq("date", date)
            .order("id"),
            f"get workout for {date}",
        )
        return [self._flatten_entry(row) for row in result.data or []]

    @staticmethod
    def _flatten_entry(row: Dict[str, Any]) -> WorkoutEntry:
        """Move the embedded exercise's name and gif onto the entry."""
        row = dict(row)
        exercise = row.pop("exercise", None) or {}
        return WorkoutEntry(**row, name=exercise.get("name"), gif=exercise.get("gif"))

    def _check_exercises_exist(self, exercises: Sequence[WorkoutExercise]) -> None:
        ids = {e.id for e in exercises}
        if not ids:
            return
        result = self._execute(
            self._client.table(EXERCISE_TABLE).select("id").in_("id", sorted(ids)),
            "look up workout exercises",
        )
        missing = ids - {row["id"] for row in result.data or []}
        if missing:
            raise UnknownExerciseError(missing)

    def save_workout(self, date: str, exercises: Sequence[WorkoutExercise]) -> None:
        self._check_exercises_exist(exercises)
        rows = [
            {"date": date, "exercise_id": e.id, "duration": e.duration}
            for e in exercises
        ]

        if self._use_rpc:
            self._execute(
                self._client.rpc(
                    REPLACE_WORKOUT_RPC,
                    {
                        "p_date": date,
                        "p_entries": [
                            {"exercise_id": r["exercise_id"], "duration": r["duration"]}
                            for r in rows
                        ],
                    },
                ),
                f"replace workout for {date}",
            )
            logger.info(f"Workout saved for {date} ({len(rows)} entries, rpc)")
            return

        previous = self._execute(
            self._client.table(WORKOUT_TABLE)
            .select("date, exercise_id, duration")
            .eq("date", date)
            .order("id"),
            f"snapshot workout for {date}",
        ).data or []

        self._execute(
            self._client.table(WORKOUT_TABLE).delete().eq("date", date),
            f"clear workout for {date}",
        )

        if rows:
            try:
                self._execute(
                    self._client.table(WORKOUT_TABLE).insert(rows),
                    f"insert workout for {date}",
                )
            except WorkoutStoreError:
                self._restore_entries(date, previous)
                raise

        logger.info(f"Workout saved for {date} ({len(rows)} entries)")

    def _restore_entries(self, date: str, previous: List[Dict[str, Any]]) -> None:
        """Re-insert a day's entries after a failed replace."""
        if not previous:
            return
        logger.warning(f"Restoring {len(previous)} previous entries for {date}")
        try:
            self._client.table(WORKOUT_TABLE).insert(previous).execute()
        except Exception:
            logger.exception(f"Failed to restore workout for {date}; previous entries are lost")

    def list_workout_dates(self) -> List[str]:
        result = self._execute(
            self._client.table(WORKOUT_TABLE).select("date").order("date", desc=True),
            "list workout dates",
        )
        # One row per entry; several entries share a date
        return list(dict.fromkeys(row["date"] for row in result.data or []))

    def delete_workout(self, date: str) -> int:
        result = self._execute(
            self._client.table(WORKOUT_TABLE).delete().eq("date", date),
            f"delete workout for {date}",
        )
        deleted_count = len(result.data) if result.data else 0
        logger.info(f"Workout for {date} deleted ({deleted_count} row(s))")
        return deleted_count

    # =========================================================================
    # Health
    # =========================================================================

    def ping(self) -> bool:
        try:
            self._client.table(EXERCISE_TABLE).select("id").limit(1).execute()
            return True
        except Exception as e:
            logger.warning(f"Supabase health check failed: {e}")
            return False
