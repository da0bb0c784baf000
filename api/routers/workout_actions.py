"""
Action-dispatched workout endpoint.

A single route, ``/api/workout``, serves every operation. The HTTP method
and the ``action`` query parameter select the operation:

    GET    ?action=exercises                 list exercises
    GET    ?action=exercise&id=1             get one exercise
    GET    ?action=workout&date=2024-01-01   get the day's workout
    GET    ?action=dates                     list workout dates
    POST   ?action=workout&date=2024-01-01   save the day's workout {exercises}
    POST   ?action=exercise                  create an exercise {name, gif}
    PUT    ?action=exercise&id=1             update an exercise {name, gif}
    DELETE ?action=workout&date=2024-01-01   delete the day's workout
    DELETE ?action=exercise&id=1             delete an exercise

Each (method, action) pair is bound to exactly one handler in DISPATCH;
pairs missing from the table are rejected with 400.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple, Type, TypeVar

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError
from starlette.concurrency import run_in_threadpool

from api.deps import get_workout_store
from api.schemas import (
    DeleteExerciseResponse,
    DeleteWorkoutResponse,
    ExerciseRequest,
    SuccessResponse,
    UpdateExerciseResponse,
    WorkoutExercisesRequest,
    parse_workout_date,
)
from application.ports import WorkoutStore
from domain.models import MAX_INT

logger = logging.getLogger(__name__)

INVALID_ACTION = "Invalid action or missing parameters"
EXERCISE_NOT_FOUND = "Exercise not found"
INVALID_EXERCISE_ID = "Invalid exercise id"

SUPPORTED_METHODS = ("GET", "POST", "PUT", "DELETE")
BODY_METHODS = ("POST", "PUT")

router = APIRouter(
    tags=["Workout Actions"],
)

ModelT = TypeVar("ModelT", bound=BaseModel)


class WorkoutAction(str, Enum):
    """Values accepted by the ``action`` query parameter."""

    EXERCISES = "exercises"
    EXERCISE = "exercise"
    WORKOUT = "workout"
    DATES = "dates"


@dataclass
class ActionRequest:
    """Everything a handler may need from the incoming request."""

    store: WorkoutStore
    date: Optional[str] = None
    id: Optional[str] = None
    body: Dict[str, Any] = field(default_factory=dict)

    def require_id(self) -> int:
        if not self.id:
            raise HTTPException(status_code=400, detail=INVALID_ACTION)
        return _parse_id(self.id)

    def require_date(self) -> str:
        if not self.date:
            raise HTTPException(status_code=400, detail=INVALID_ACTION)
        return parse_workout_date(self.date)

    def parse_body(self, model: Type[ModelT]) -> ModelT:
        try:
            return model.model_validate(self.body)
        except ValidationError as e:
            raise RequestValidationError(e.errors())


# =============================================================================
# Handlers
# =============================================================================


def list_exercises(req: ActionRequest):
    return req.store.list_exercises()


def get_exercise(req: ActionRequest):
    exercise = req.store.get_exercise(req.require_id())
    if exercise is None:
        raise HTTPException(status_code=404, detail=EXERCISE_NOT_FOUND)
    return exercise


def get_workout(req: ActionRequest):
    return req.store.get_workout_by_date(req.require_date())


def list_workout_dates(req: ActionRequest):
    return req.store.list_workout_dates()


def save_workout(req: ActionRequest):
    date = req.require_date()
    body = req.parse_body(WorkoutExercisesRequest)
    req.store.save_workout(date, body.exercises)
    return SuccessResponse()


def add_exercise(req: ActionRequest):
    body = req.parse_body(ExerciseRequest)
    return req.store.add_exercise(body.name, body.gif)


def update_exercise(req: ActionRequest):
    exercise_id = req.require_id()
    body = req.parse_body(ExerciseRequest)
    if not req.store.update_exercise(exercise_id, body.name, body.gif):
        raise HTTPException(status_code=404, detail=EXERCISE_NOT_FOUND)
    return UpdateExerciseResponse(updated=True)


def delete_workout(req: ActionRequest):
    deleted_rows = req.store.delete_workout(req.require_date())
    return DeleteWorkoutResponse(deleted_rows=deleted_rows)


def delete_exercise(req: ActionRequest):
    if not req.store.delete_exercise(req.require_id()):
        raise HTTPException(status_code=404, detail=EXERCISE_NOT_FOUND)
    return DeleteExerciseResponse(deleted=True)


Handler = Callable[[ActionRequest], Any]

DISPATCH: Dict[Tuple[str, WorkoutAction], Handler] = {
    ("GET", WorkoutAction.EXERCISES): list_exercises,
    ("GET", WorkoutAction.EXERCISE): get_exercise,
    ("GET", WorkoutAction.WORKOUT): get_workout,
    ("GET", WorkoutAction.DATES): list_workout_dates,
    ("POST", WorkoutAction.WORKOUT): save_workout,
    ("POST", WorkoutAction.EXERCISE): add_exercise,
    ("PUT", WorkoutAction.EXERCISE): update_exercise,
    ("DELETE", WorkoutAction.WORKOUT): delete_workout,
    ("DELETE", WorkoutAction.EXERCISE): delete_exercise,
}


def resolve_handler(method: str, action: Optional[str]) -> Handler:
    """
    Look up the handler for a method and action.

    Raises:
        HTTPException: 405 for unsupported methods, 400 for unknown or
            unsupported actions
    """
    if method not in SUPPORTED_METHODS:
        raise HTTPException(status_code=405, detail="Method not allowed")
    try:
        handler = DISPATCH[(method, WorkoutAction(action))]
    except (KeyError, ValueError):
        raise HTTPException(status_code=400, detail=INVALID_ACTION)
    return handler


def _parse_id(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise HTTPException(status_code=400, detail=INVALID_EXERCISE_ID)
    if not 1 <= value <= MAX_INT:
        raise HTTPException(status_code=400, detail=INVALID_EXERCISE_ID)
    return value


async def _read_body(request: Request) -> Dict[str, Any]:
    if request.method not in BODY_METHODS:
        return {}
    raw = await request.body()
    if not raw:
        return {}
    try:
        body = await request.json()
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid JSON body")
    if not isinstance(body, dict):
        raise HTTPException(status_code=400, detail="Request body must be a JSON object")
    return body


@router.api_route(
    "/api/workout",
    methods=["GET", "POST", "PUT", "DELETE", "PATCH"],
)
async def workout_action(
    request: Request,
    action: Optional[str] = Query(None, description="exercises, exercise, workout or dates"),
    date: Optional[str] = Query(None, description="Workout date, YYYY-MM-DD"),
    id: Optional[str] = Query(None, description="Exercise id"),
    store: WorkoutStore = Depends(get_workout_store),
):
    """Dispatch to the operation selected by the HTTP method and ``action``."""
    handler = resolve_handler(request.method, action)
    action_request = ActionRequest(
        store=store,
        date=date,
        id=id,
        body=await _read_body(request),
    )
    logger.debug(f"{request.method} action={action} -> {handler.__name__}")
    return await run_in_threadpool(handler, action_request)
