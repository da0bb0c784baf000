"""
Router package for the Workout Tracker API.

This package contains all API routers organized by domain:
- health: Health check endpoint
- exercises: Exercise CRUD under /api/exercises
- workouts: Date-keyed workouts under /api/workouts and /api/workout-dates
- workout_actions: The single action-dispatched /api/workout endpoint
"""

from api.routers.health import router as health_router
from api.routers.exercises import router as exercises_router
from api.routers.workouts import router as workouts_router
from api.routers.workout_actions import router as workout_actions_router

__all__ = [
    "health_router",
    "exercises_router",
    "workouts_router",
    "workout_actions_router",
]
