"""
SQLite implementation of WorkoutStore.

Stores exercises and workouts in a local database file. Each operation
opens its own connection, so a single store instance is safe to share
across the request threadpool. Multi-statement operations (saving a
workout, the delete guard) run inside one BEGIN IMMEDIATE transaction, so
the write lock is held from the first read to the commit.
"""
import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Union

from application.exceptions import (
    ExerciseInUseError,
    UnknownExerciseError,
    WorkoutStoreError,
)
from domain.models import Exercise, WorkoutEntry, WorkoutExercise

logger = logging.getLogger(__name__)

SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS exercise (
        id   INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        gif  TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS workout (
        id          INTEGER PRIMARY KEY AUTOINCREMENT,
        date        TEXT NOT NULL,
        exercise_id INTEGER NOT NULL REFERENCES exercise(id),
        duration    INTEGER
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_workout_date ON workout(date)",
    "CREATE INDEX IF NOT EXISTS idx_workout_exercise ON workout(exercise_id)",
)


class SqliteWorkoutStore:
    """
    SQLite implementation of WorkoutStore protocol.

    The parent directory and the schema are created on construction.
    """

    provider = "sqlite"

    def __init__(self, db_path: Union[str, Path]):
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self.init_schema()

    @property
    def db_path(self) -> Path:
        return self._db_path

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        """Open a connection; commit on success, roll back on any error."""
        try:
            conn = sqlite3.connect(self._db_path)
        except sqlite3.Error as e:
            raise WorkoutStoreError(str(e)) from e
        try:
            conn.row_factory = sqlite3.Row
            conn.execute("PRAGMA foreign_keys = ON")
            yield conn
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            logger.error(f"SQLite error on {self._db_path}: {e}")
            raise WorkoutStoreError(str(e)) from e
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def init_schema(self) -> None:
        """Create tables and indexes if they don't exist."""
        with self._connect() as conn:
            for statement in SCHEMA:
                conn.execute(statement)
        logger.info(f"SQLite database ready at {self._db_path}")

    # =========================================================================
    # Exercises
    # =========================================================================

    def list_exercises(self) -> List[Exercise]:
        with self._connect() as conn:
            rows = conn.execute("SELECT id, name, gif FROM exercise ORDER BY id").fetchall()
        return [Exercise(**dict(row)) for row in rows]

    def get_exercise(self, exercise_id: int) -> Optional[Exercise]:
        with self._connect() as conn:
            row = conn.execute(
                "SELECT id, name, gif FROM exercise WHERE id = ?", (exercise_id,)
            ).fetchone()
        return Exercise(**dict(row)) if row else None

    def add_exercise(self, name: str, gif: Optional[str]) -> Exercise:
        with self._connect() as conn:
            cursor = conn.execute(
                "INSERT INTO exercise (name, gif) VALUES (?, ?)", (name, gif)
            )
            exercise = Exercise(id=cursor.lastrowid, name=name, gif=gif)
        logger.info(f"Exercise {exercise.id} created: {exercise.name}")
        return exercise

    def update_exercise(self, exercise_id: int, name: str, gif: Optional[str]) -> bool:
        with self._connect() as conn:
            cursor = conn.execute(
                "UPDATE exercise SET name = ?, gif = ? WHERE id = ?",
                (name, gif, exercise_id),
            )
        return cursor.rowcount > 0

    @staticmethod
    def _in_use(conn: sqlite3.Connection, exercise_id: int) -> bool:
        row = conn.execute(
            "SELECT 1 FROM workout WHERE exercise_id = ? LIMIT 1", (exercise_id,)
        ).fetchone()
        return row is not None

    def is_exercise_in_use(self, exercise_id: int) -> bool:
        with self._connect() as conn:
            return self._in_use(conn, exercise_id)

    def delete_exercise(self, exercise_id: int) -> bool:
        with self._connect() as conn:
            conn.execute("BEGIN IMMEDIATE")
            if self._in_use(conn, exercise_id):
                logger.warning(f"Refusing to delete exercise {exercise_id}: referenced by workouts")
                raise ExerciseInUseError(exercise_id)
            cursor = conn.execute("DELETE FROM exercise WHERE id = ?", (exercise_id,))
        return cursor.rowcount > 0

    # =========================================================================
    # Workouts
    # =========================================================================

    def get_workout_by_date(self, date: str) -> List[WorkoutEntry]:
        with self._connect() as conn:
            rows = conn.execute(
                """
                SELECT w.id, w.date, w.exercise_id, w.duration, e.name, e.gif
                FROM workout w
                JOIN exercise e ON e.id = w.exercise_id
                WHERE w.date = ?
                ORDER BY w.id
                """,
                (date,),
            ).fetchall()
        return [WorkoutEntry(**dict(row)) for row in rows]

    def save_workout(self, date: str, exercises: Sequence[WorkoutExercise]) -> None:
        ids = {e.id for e in exercises}
        with self._connect() as conn:
            conn.execute("BEGIN IMMEDIATE")
            if ids:
                placeholders = ", ".join("?" for _ in ids)
                found = {
                    row["id"]
                    for row in conn.execute(
                        f"SELECT id FROM exercise WHERE id IN ({placeholders})",
                        tuple(ids),
                    )
                }
                missing = ids - found
                if missing:
                    raise UnknownExerciseError(missing)

            conn.execute("DELETE FROM workout WHERE date = ?", (date,))
            conn.executemany(
                "INSERT INTO workout (date, exercise_id, duration) VALUES (?, ?, ?)",
                [(date, e.id, e.duration) for e in exercises],
            )
        logger.info(f"Workout saved for {date} ({len(exercises)} entries)")

    def list_workout_dates(self) -> List[str]:
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT DISTINCT date FROM workout ORDER BY date DESC"
            ).fetchall()
        return [row["date"] for row in rows]

    def delete_workout(self, date: str) -> int:
        with self._connect() as conn:
            cursor = conn.execute("DELETE FROM workout WHERE date = ?", (date,))
        logger.info(f"Workout for {date} deleted ({cursor.rowcount} row(s))")
        return cursor.rowcount

    # =========================================================================
    # Health
    # =========================================================================

    def ping(self) -> bool:
        try:
            with self._connect() as conn:
                conn.execute("SELECT 1").fetchone()
            return True
        except WorkoutStoreError:
            return False
