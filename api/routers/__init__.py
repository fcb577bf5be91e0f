"""
Router package for the Family Fitness API.

This package contains all API routers organized by domain:
- health: Liveness endpoint
- sessions: Session CRUD, lifecycle transitions, assignments, roster, stations
- groups: Group-scoped session queries (list, active session)
- scores: Score submission and correction
- workout_types: Scores across sessions for one workout type
"""

from api.routers.health import router as health_router
from api.routers.sessions import router as sessions_router
from api.routers.groups import router as groups_router
from api.routers.scores import router as scores_router
from api.routers.workout_types import router as workout_types_router

__all__ = [
    "health_router",
    "sessions_router",
    "groups_router",
    "scores_router",
    "workout_types_router",
]
