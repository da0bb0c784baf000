"""
Exception handlers for the Workout Tracker API.

Every error leaves the API as ``{"error": "<message>"}``:

- HTTPException: status code preserved
- RequestValidationError (missing/malformed input): 400
- ExerciseInUseError (delete blocked by workout entries): 400
- UnknownExerciseError (workout references missing exercises): 400
- WorkoutStoreError (Supabase/SQLite failure): 500, message passed through
- anything else: 500 with the exception's message, no stack trace
"""

import logging
from typing import Any, Dict, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from application.exceptions import (
    ExerciseInUseError,
    UnknownExerciseError,
    WorkoutStoreError,
)

logger = logging.getLogger(__name__)

# Messages for the fields whose absence clients most often hit
FIELD_MESSAGES = {
    "name": "Name and gif URL are required",
    "gif": "Name and gif URL are required",
    "exercises": "Exercises array is required",
}

LOCATION_PREFIXES = {"body", "query", "path"}


def error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def describe_validation_errors(errors: Sequence[Dict[str, Any]]) -> str:
    """Turn pydantic error dicts into one human-readable message."""
    if not errors:
        return "Invalid request"

    parts = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if str(p) not in LOCATION_PREFIXES]
        if len(loc) == 1 and loc[0] in FIELD_MESSAGES:
            return FIELD_MESSAGES[loc[0]]
        field = ".".join(loc)
        msg = err.get("msg", "invalid value")
        parts.append(f"{field}: {msg}" if field else f"Request body: {msg}")
    return "; ".join(parts)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = describe_validation_errors(exc.errors())
    logger.info(f"Rejected {request.method} {request.url.path}: {message}")
    return error_response(400, message)


async def exercise_in_use_handler(request: Request, exc: ExerciseInUseError) -> JSONResponse:
    return error_response(400, str(exc))


async def unknown_exercise_handler(request: Request, exc: UnknownExerciseError) -> JSONResponse:
    return error_response(400, str(exc))


async def store_error_handler(request: Request, exc: WorkoutStoreError) -> JSONResponse:
    logger.error(f"API Error on {request.method} {request.url.path}: {exc}")
    return error_response(500, str(exc) or "Internal server error")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(500, str(exc) or "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on an application."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ExerciseInUseError, exercise_in_use_handler)
    app.add_exception_handler(UnknownExerciseError, unknown_exercise_handler)
    app.add_exception_handler(WorkoutStoreError, store_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
