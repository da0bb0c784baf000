"""
Pydantic schemas for API requests and responses.

Organized by feature/domain:
- workouts: Exercise and workout request/response models
"""

from api.schemas.workouts import (
    DATE_FORMAT_MESSAGE,
    DeleteExerciseResponse,
    DeleteWorkoutResponse,
    ExerciseRequest,
    SaveWorkoutRequest,
    SuccessResponse,
    UpdateExerciseResponse,
    WorkoutExercisesRequest,
    check_workout_date,
    parse_workout_date,
)

__all__ = [
    "DATE_FORMAT_MESSAGE",
    "DeleteExerciseResponse",
    "DeleteWorkoutResponse",
    "ExerciseRequest",
    "SaveWorkoutRequest",
    "SuccessResponse",
    "UpdateExerciseResponse",
    "WorkoutExercisesRequest",
    "check_workout_date",
    "parse_workout_date",
]
